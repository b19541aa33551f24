import copy

import pytest

from calhijri.bootstrap import build_engine
from calhijri.profiles import default_profile, with_offset


# Three consecutive Umm al-Qura months around 1 Muharram 1447.
SMALL_TABLE = {
    "metadata": {
        "source": "test",
        "range": "1447 AH",
        "lastUpdated": "2025-01-01",
        "description": "three months for loader tests",
    },
    "months": [
        {"h_year": 1447, "h_month": 1, "g_start": "2025-06-26", "days": 30},
        {"h_year": 1447, "h_month": 2, "g_start": "2025-07-26", "days": 29},
        {"h_year": 1447, "h_month": 3, "g_start": "2025-08-24", "days": 30},
    ],
}


@pytest.fixture
def small_raw():
    return copy.deepcopy(SMALL_TABLE)


@pytest.fixture(scope="session")
def engine():
    return build_engine()


@pytest.fixture(scope="session")
def sa():
    return default_profile()


@pytest.fixture(scope="session")
def profile_for():
    """profile_for(offset) -> SA profile shifted by offset days."""
    base = default_profile()
    return lambda offset: with_offset(base, offset)
