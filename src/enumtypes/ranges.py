"""
Ranges — Bounded integer types.

Values are validated and built on demand rather than pre-allocated, so
two values built from the same integer are equal but not identical:
compare them with == or is_equal_to(), never with `is`.

Example:
    SmallNum = EnumeratedRange(1, 10, "SmallNum")
    SmallNum(5).to_string()         # 'SmallNum(5)'
    SmallNum(1) == SmallNum(1)      # True
    SmallNum(1) is SmallNum(1)      # False
    SmallNum(11)                    # RangeError
"""

from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from enumtypes.base import EnumerationBase, EnumerationIterator, ValueBase, is_strict_int
from enumtypes.declarations import RangeDeclaration
from enumtypes.errors import RangeError
from enumtypes.observability.logging import LogContext, get_logger

logger = get_logger("ranges")


@dataclass(frozen=True, repr=False)
class RangeValue(ValueBase):
    """
    A value of a bounded range.

    Equality and hashing are structural over (value, domain).
    """
    value: int
    domain: "RangeType"

    def to_int(self) -> int:
        return self.value

    def to_string(self) -> str:
        if self.domain.name:
            return f"{self.domain.name}({self.value})"
        return str(self.value)

    def __repr__(self) -> str:
        return f"<RangeValue {self.to_string()}>"


class RangeType(EnumerationBase):
    """Domain over the inclusive interval [minimum, maximum]."""

    def __init__(self, minimum: int, maximum: int, name: str = ""):
        self.minimum = minimum
        self.maximum = maximum
        self.name = name

    def first(self) -> RangeValue:
        return self.from_int(self.minimum)

    def last(self) -> RangeValue:
        return self.from_int(self.maximum)

    def from_int(self, i: int) -> RangeValue:
        """
        Build the value i.

        Raises:
            TypeError: i is not an integer
            RangeError: i is outside [minimum, maximum]
        """
        if not is_strict_int(i):
            raise TypeError(f"Range values must be integers, not {type(i).__name__}")
        if not self.minimum <= i <= self.maximum:
            raise RangeError(i)
        return RangeValue(value=i, domain=self)

    def __repr__(self) -> str:
        if self.name:
            return f"EnumeratedRange({self.minimum}, {self.maximum}, {self.name!r})"
        return f"EnumeratedRange({self.minimum}, {self.maximum})"


class RangeConstructor:
    """
    Callable front of a RangeType.

    Calling it builds values. Only the type-level operations (first, last,
    from_int, iterator, methods) are exposed; value-level operations such
    as to_int or next exist on the values it builds, not here.
    """

    def __init__(self, domain: RangeType):
        self._domain = domain

    @property
    def domain(self) -> RangeType:
        return self._domain

    @property
    def minimum(self) -> int:
        return self._domain.minimum

    @property
    def maximum(self) -> int:
        return self._domain.maximum

    @property
    def name(self) -> str:
        return self._domain.name

    def __call__(self, i: int) -> RangeValue:
        return self._domain.from_int(i)

    def from_int(self, i: int) -> RangeValue:
        return self._domain.from_int(i)

    def first(self) -> RangeValue:
        return self._domain.first()

    def last(self) -> RangeValue:
        return self._domain.last()

    def iterator(self, start: Any = None, end: Any = None) -> EnumerationIterator:
        return self._domain.iterator(start, end)

    def methods(
        self,
        mapping: Mapping[str, Any] | None = None,
        **behaviour: Any,
    ) -> "RangeConstructor":
        """Register shared behaviour on the values this constructor builds."""
        self._domain.methods(mapping, **behaviour)
        return self

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, RangeValue):
            return item.domain is self._domain
        return is_strict_int(item) and self.minimum <= item <= self.maximum

    def __iter__(self) -> Iterator[RangeValue]:
        return iter(self._domain.iterator())

    def __len__(self) -> int:
        return self.maximum - self.minimum + 1

    def __repr__(self) -> str:
        return repr(self._domain)


def EnumeratedRange(minimum: int, maximum: int, name: str = "") -> RangeConstructor:
    """
    Create a type which only allows values within a given range.

    Args:
        minimum: Smallest allowed value
        maximum: Largest allowed value
        name: Optional display name; values print as "name(i)" when given,
              otherwise as "i"

    Returns:
        RangeConstructor for building and walking values of the type

    Raises:
        ValidationError: Bounds are not integers or minimum > maximum
    """
    declaration = RangeDeclaration(minimum=minimum, maximum=maximum, name=name)
    range_type = RangeType.create(declaration.minimum, declaration.maximum, declaration.name)
    with LogContext(repr(range_type)):
        logger.debug(
            "Built range of %d values",
            declaration.maximum - declaration.minimum + 1,
        )
    return RangeConstructor(range_type)
