import os

# Masks are int64, so more than 62 items can never be enumerated.
EXHAUSTIVE_HARD_LIMIT = 62

MAX_EXHAUSTIVE_ITEMS = min(
    int(os.getenv("MAXCALORIE_MAX_EXHAUSTIVE_ITEMS", "24")), EXHAUSTIVE_HARD_LIMIT
)
EXHAUSTIVE_BLOCK_BITS = int(os.getenv("MAXCALORIE_EXHAUSTIVE_BLOCK_BITS", "16"))
LOG_LEVEL = os.getenv("MAXCALORIE_LOG_LEVEL", "WARNING").strip().upper()
