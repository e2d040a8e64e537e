"""
Shared fixtures for enumtypes tests.
"""

import pytest

from enumtypes import Enum, EnumeratedRange, Flags, EnumObjects


@pytest.fixture
def color():
    """Three-colour closed enumeration."""
    return Enum("RED", "GREEN", "BLUE")


@pytest.fixture
def letters():
    """Five-letter closed enumeration."""
    return Enum("A", "B", "C", "D", "E")


@pytest.fixture
def small_num():
    """Named range 1..10."""
    return EnumeratedRange(1, 10, "SmallNum")


@pytest.fixture
def options():
    """Four flags A, B, C, D with values 1, 2, 4, 8."""
    return Flags("A", "B", "C", "D")


@pytest.fixture
def animal():
    """Object enumeration where two animals speak for themselves."""
    return EnumObjects({
        "DOG": {"speak": lambda self: "woof!"},
        "CAT": {"speak": lambda self: "meow!"},
        "GIRAFFE": {},
    })
