"""
Tests for declaration models.
"""

import pytest
from pydantic import ValidationError

from enumtypes import (
    EnumDeclaration,
    RangeDeclaration,
    ObjectDeclaration,
    DuplicateNameError,
)


class TestEnumDeclaration:
    """Names for Enum and Flags."""

    def test_valid(self):
        """Valid names are kept in order."""
        assert EnumDeclaration.from_names("B", "A").names == ["B", "A"]

    def test_duplicates_listed_once(self):
        """Each repeated name is reported once."""
        with pytest.raises(DuplicateNameError) as exc_info:
            EnumDeclaration.from_names("A", "B", "A", "B", "A")
        assert exc_info.value.names == ["A", "B"]

    def test_frozen(self):
        """Declarations are immutable."""
        declaration = EnumDeclaration(names=["A"])
        with pytest.raises(ValidationError):
            declaration.names = ["B"]


class TestRangeDeclaration:
    """Bounds for EnumeratedRange."""

    def test_default_name(self):
        """The display name defaults to empty."""
        assert RangeDeclaration(minimum=0, maximum=5).name == ""

    def test_inverted(self):
        """minimum must not exceed maximum."""
        with pytest.raises(ValidationError) as exc_info:
            RangeDeclaration(minimum=5, maximum=0)
        assert "must be <=" in str(exc_info.value)


class TestObjectDeclaration:
    """Members for EnumObjects."""

    def test_names(self):
        """names lists member keys in order."""
        declaration = ObjectDeclaration(members={"X": {}, "Y": None})
        assert declaration.names == ["X", "Y"]

    def test_callables_preserved(self):
        """Behaviour values pass through unchanged."""
        def speak(self):
            return "hi"
        declaration = ObjectDeclaration(members={"X": {"speak": speak}})
        assert declaration.members["X"]["speak"] is speak

    @pytest.mark.parametrize("reserved", ["name", "value", "domain", "behaviour"])
    def test_reserved(self, reserved):
        """Reserved attribute names are rejected."""
        with pytest.raises(ValidationError):
            ObjectDeclaration(members={"X": {reserved: 1}})

    def test_blank_name(self):
        """Blank member names are rejected."""
        with pytest.raises(ValidationError):
            ObjectDeclaration(members={"": {}})
