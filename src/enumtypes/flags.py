"""
Flags — Enumerated constants whose values are powers of two.

Flags give symbolic names to a set of options so that any subset can be
carried as one integer bitmask.

Example:
    Options = Flags("A", "B", "C", "D")
    Options.A.to_int()         # 1
    Options.from_int(8)        # Options.D
    Options.A | Options.C      # 5
    Options.list_from_int(11)  # [Options.A, Options.B, Options.D]
    (13 & Options.B) > 0       # False
    (13 & Options.C) > 0       # True
"""

from dataclasses import dataclass
from typing import Any

from enumtypes.base import is_strict_int
from enumtypes.declarations import EnumDeclaration
from enumtypes.enumeration import EnumerationType, Variant
from enumtypes.errors import DomainLookupError, RangeError
from enumtypes.observability.logging import LogContext, get_logger

logger = get_logger("flags")


@dataclass(frozen=True, eq=False, repr=False)
class FlagVariant(Variant):
    """
    A named bit.

    Converts to its integer value with int() and operator.index(), and
    combines with ints or other flags through |, & and ^, always yielding
    a plain int bitmask.
    """

    def next(self) -> "FlagVariant":
        """Return the flag with double this flag's value."""
        return self._neighbour(2 * self.to_int(), "successor")

    def previous(self) -> "FlagVariant":
        """Return the flag with half this flag's value."""
        return self._neighbour(self.to_int() // 2, "predecessor")

    def __int__(self) -> int:
        return self.to_int()

    def __index__(self) -> int:
        return self.to_int()

    def __or__(self, other: Any) -> int:
        if not isinstance(other, (int, FlagVariant)):
            return NotImplemented
        return self.to_int() | int(other)

    __ror__ = __or__

    def __and__(self, other: Any) -> int:
        if not isinstance(other, (int, FlagVariant)):
            return NotImplemented
        return self.to_int() & int(other)

    __rand__ = __and__

    def __xor__(self, other: Any) -> int:
        if not isinstance(other, (int, FlagVariant)):
            return NotImplemented
        return self.to_int() ^ int(other)

    __rxor__ = __xor__


class FlagType(EnumerationType):
    """
    Domain of flags; the flag at declaration index k has value 2**k.
    """

    variant_class = FlagVariant
    kind = "Flags"

    def _build_variant(self, index: int, name: str) -> FlagVariant:
        return self.variant_class(name=name, value=1 << index, domain=self)

    def from_int(self, i: int) -> FlagVariant:
        """
        Return the flag whose value is exactly i.

        Raises:
            DomainLookupError: i is not the value of a declared flag
        """
        if not is_strict_int(i) or i <= 0 or i & (i - 1) or i.bit_length() > len(self):
            raise DomainLookupError(f"Integer '{i}' is not a valid flag value.")
        return self._variants[i.bit_length() - 1]

    @property
    def mask_limit(self) -> int:
        """One past the largest valid bitmask, 2**n."""
        return 1 << len(self)

    def list_from_int(self, i: int) -> list[FlagVariant]:
        """
        Get a list of all flags represented by an integer.

        The allowable range is [0, 2**n - 1] where n is the number of
        flags, so for four flags it is [0, 15].

        Args:
            i: Bitmask

        Returns:
            Flags whose bit is set in i, in ascending order

        Raises:
            TypeError: i is not an integer
            RangeError: i is outside the allowable range
        """
        if not is_strict_int(i):
            raise TypeError(f"Bitmask must be an integer, not {type(i).__name__}")
        if i < 0 or i >= self.mask_limit:
            raise RangeError(i, f"Integer '{i}' is out of range.")
        return [flag for flag in self if i & flag]


def Flags(*names: str) -> FlagType:
    """
    Build a set of flags from a list of names.

    Args:
        *names: Flag names, lowest bit first

    Returns:
        FlagType holding one flag per name

    Raises:
        ValidationError: A name is not a non-empty string
        DuplicateNameError: A name is repeated
    """
    declaration = EnumDeclaration.from_names(*names)
    with LogContext(f"Flags({', '.join(declaration.names)})"):
        flag_type = FlagType.create(declaration.names)
        logger.debug("Built flag set with %d flags", len(flag_type))
    return flag_type
