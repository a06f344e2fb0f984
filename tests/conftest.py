import pytest

from classical.food import Catalog
from data.sample_catalogs import pantry_catalog, textbook_catalog


@pytest.fixture
def textbook():
    return textbook_catalog()


@pytest.fixture
def pantry():
    return pantry_catalog()


@pytest.fixture
def empty_catalog():
    return Catalog()
