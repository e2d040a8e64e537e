"""
Enumeration — Closed sets of named constants.

Every variant is built once, when the domain is declared, and is
immutable afterwards. Two lookups of the same constant return the same
object, so identity and value comparison agree.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from enumtypes.base import EnumerationBase, ValueBase, is_strict_int
from enumtypes.declarations import EnumDeclaration
from enumtypes.errors import DomainLookupError
from enumtypes.observability.logging import LogContext, get_logger

logger = get_logger("enumeration")


@dataclass(frozen=True, eq=False, repr=False)
class Variant(ValueBase):
    """
    A single named constant.

    value is the declaration index for Enum and EnumObjects and the bit
    value for Flags.
    """
    name: str
    value: int
    domain: "EnumerationType"

    def to_int(self) -> int:
        return self.value

    def to_string(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}={self.value}>"


class EnumerationType(EnumerationBase):
    """
    Domain of pre-built, singleton variants.

    Variants are reachable as attributes (Color.RED), by subscription
    (Color["RED"]), by integer (Color.from_int(0)) and by iteration in
    declaration order.
    """

    variant_class: type[Variant] = Variant
    kind = "Enum"

    def __init__(self, names: Sequence[str]):
        self._names = tuple(names)
        self._variants = tuple(
            self._build_variant(index, name) for index, name in enumerate(self._names)
        )
        self._by_name = {variant.name: variant for variant in self._variants}

    def _build_variant(self, index: int, name: str) -> Variant:
        return self.variant_class(name=name, value=index, domain=self)

    @property
    def names(self) -> tuple[str, ...]:
        """Variant names in declaration order."""
        return self._names

    def first(self) -> Variant:
        if not self._variants:
            raise DomainLookupError(f"{self!r} has no variants.")
        return self._variants[0]

    def last(self) -> Variant:
        if not self._variants:
            raise DomainLookupError(f"{self!r} has no variants.")
        return self._variants[-1]

    def from_int(self, i: int) -> Variant:
        """
        Return the variant at declaration index i.

        Raises:
            DomainLookupError: i is not an index of a declared variant
        """
        if not is_strict_int(i) or not 0 <= i < len(self._variants):
            raise DomainLookupError(f"Integer '{i}' has no corresponding variant.")
        return self._variants[i]

    def __getattr__(self, name: str) -> Any:
        variants = self.__dict__.get("_by_name")
        if variants is not None and name in variants:
            return variants[name]
        raise AttributeError(f"'{type(self).__name__}' object has no variant '{name}'")

    def __getitem__(self, name: str) -> Variant:
        return self._by_name[name]

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, str):
            return item in self._by_name
        return any(item is variant for variant in self._variants)

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._names))

    def __repr__(self) -> str:
        return f"{self.kind}({', '.join(self._names)})"


def Enum(*names: str) -> EnumerationType:
    """
    Build a type of enumerated constants from a list of names.

    Example:
        Color = Enum("RED", "GREEN", "BLUE")
        Color.RED.to_string()             # 'RED'
        Color.GREEN.to_int()              # 1
        Color.BLUE.previous().to_string() # 'GREEN'

    Args:
        *names: Variant names, in order

    Returns:
        EnumerationType holding one constant per name

    Raises:
        ValidationError: A name is not a non-empty string
        DuplicateNameError: A name is repeated
    """
    declaration = EnumDeclaration.from_names(*names)
    with LogContext(f"Enum({', '.join(declaration.names)})"):
        enum_type = EnumerationType.create(declaration.names)
        logger.debug("Built enumeration with %d variants", len(enum_type))
    return enum_type
