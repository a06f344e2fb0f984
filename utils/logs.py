import logging

from utils.config import LOG_LEVEL

logger = logging.getLogger("maxcalorie")
handler = logging.StreamHandler()
formatter = logging.Formatter("%(levelname)s - %(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(LOG_LEVEL)


def use_debugging_formatter():
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)


if LOG_LEVEL == "DEBUG":
    use_debugging_formatter()
