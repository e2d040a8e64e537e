"""
Base — Primitive contract and default behaviour for enumerated types.

Base lists the five operations every domain must supply. EnumerationBase
builds comparisons, stepping, iteration and the write-once extension
point on top of them, and ValueBase adds what variants share: delegation
to their owning domain and access to registered behaviour.
"""

from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

from enumtypes.errors import (
    DomainLookupError,
    MethodsLockedError,
    SequenceExhaustionError,
)
from enumtypes.observability.logging import get_logger

logger = get_logger("base")

_NO_METHODS: Mapping[str, Any] = MappingProxyType({})


class Base:
    """
    Operations with no default implementation.

    Concrete domains and their variants override each of these; reaching
    one of the placeholders means a domain was built incompletely.
    """

    def first(self):
        """Return the first variant in declaration order."""
        raise NotImplementedError("first() not implemented.")

    def from_int(self, i: int):
        """Return the variant whose integer value is i."""
        raise NotImplementedError("from_int() not implemented.")

    def last(self):
        """Return the last variant in declaration order."""
        raise NotImplementedError("last() not implemented.")

    def to_int(self) -> int:
        """Return the integer value of this variant."""
        raise NotImplementedError("to_int() not implemented.")

    def to_string(self) -> str:
        """Return the display string of this variant."""
        raise NotImplementedError("to_string() not implemented.")


def is_strict_int(i: Any) -> bool:
    """True for ints, excluding bools."""
    return isinstance(i, int) and not isinstance(i, bool)


def resolve_member(member: Any, instance: Any) -> Any:
    """
    Resolve caller-supplied behaviour against a variant.

    Anything implementing the descriptor protocol (plain functions,
    staticmethod, classmethod, property) is bound exactly as if it had been
    defined on the variant's class. Other values are returned unchanged.
    """
    if isinstance(member, type) or not hasattr(member, "__get__"):
        return member
    return member.__get__(instance, type(instance))


class EnumerationIterator:
    """
    Restartable, inclusive walk between two variants.

    Ascends with next() when start < end, otherwise descends with
    previous(). Each call to iter() starts over from the first endpoint.
    """

    def __init__(self, source: "EnumerationBase", start: int, end: int):
        self._source = source
        self.start = start
        self.end = end

    @property
    def ascending(self) -> bool:
        return self.start < self.end

    def __iter__(self) -> Iterator[Any]:
        step = "next" if self.ascending else "previous"
        value = self._source.from_int(self.start)
        yield value
        while value.to_int() != self.end:
            value = getattr(value, step)()
            yield value

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def for_each(self, action: Callable[[Any], Any]) -> None:
        """Apply action to every variant in order."""
        for value in self:
            action(value)

    def __repr__(self) -> str:
        direction = "ascending" if self.ascending else "descending"
        return f"<EnumerationIterator {self.start}..{self.end} {direction}>"


class EnumerationBase(Base):
    """
    Default behaviour shared by every domain and variant.

    Everything here is written purely in terms of the primitive contract.
    Each domain carries its own extension point, which starts unlocked and
    is written at most once by methods().
    """

    _methods: Mapping[str, Any] | None = None

    @classmethod
    def create(cls, *args: Any, **kwargs: Any) -> "EnumerationBase":
        """Factory for a fresh domain with an unlocked extension point."""
        return cls(*args, **kwargs)

    # -------------------------------------------------------------------------
    # Comparisons
    # -------------------------------------------------------------------------

    def is_equal_to(self, other: "EnumerationBase") -> bool:
        return self.to_int() == other.to_int()

    def is_greater(self, other: "EnumerationBase") -> bool:
        return self.to_int() > other.to_int()

    def is_greater_or_equal_to(self, other: "EnumerationBase") -> bool:
        return self.is_equal_to(other) or self.is_greater(other)

    def is_less(self, other: "EnumerationBase") -> bool:
        return self.to_int() < other.to_int()

    def is_less_or_equal_to(self, other: "EnumerationBase") -> bool:
        return self.is_equal_to(other) or self.is_less(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, EnumerationBase):
            return NotImplemented
        return self.is_less(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, EnumerationBase):
            return NotImplemented
        return self.is_less_or_equal_to(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, EnumerationBase):
            return NotImplemented
        return self.is_greater(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, EnumerationBase):
            return NotImplemented
        return self.is_greater_or_equal_to(other)

    # -------------------------------------------------------------------------
    # Stepping and iteration
    # -------------------------------------------------------------------------

    def next(self):
        """
        Return the next variant.

        Raises:
            SequenceExhaustionError: There is no next variant
        """
        return self._neighbour(self.to_int() + 1, "successor")

    def previous(self):
        """
        Return the previous variant.

        Raises:
            SequenceExhaustionError: There is no previous variant
        """
        return self._neighbour(self.to_int() - 1, "predecessor")

    def _neighbour(self, i: int, relation: str):
        try:
            return self.from_int(i)
        except DomainLookupError as e:
            raise SequenceExhaustionError(
                f"'{self.to_string()}' has no {relation}."
            ) from e

    def iterator(self, start: Any = None, end: Any = None) -> EnumerationIterator:
        """
        Build an iterator over the variants of this domain.

        Example:
            Letters = Enum("A", "B", "C", "D", "E")
            for letter in Letters.iterator():
                print(letter)

            Letters.iterator().for_each(print)
            list(Letters.iterator(Letters.D, Letters.B))  # [D, C, B]

        Args:
            start: Variant to start from (default: first())
            end: Variant to stop at, inclusive (default: last())

        Returns:
            EnumerationIterator walking from start to end
        """
        first = start.to_int() if start is not None else self.first().to_int()
        last = end.to_int() if end is not None else self.last().to_int()
        return EnumerationIterator(self, first, last)

    # -------------------------------------------------------------------------
    # Extension point
    # -------------------------------------------------------------------------

    @property
    def registered_methods(self) -> Mapping[str, Any]:
        """Shared behaviour registered through methods(), read-only."""
        return self._methods if self._methods is not None else _NO_METHODS

    def methods(
        self,
        mapping: Mapping[str, Any] | None = None,
        **behaviour: Any,
    ) -> "EnumerationBase":
        """
        Register behaviour available on every variant of this domain.

        Registered names never replace the default operations. Registration
        happens once; the stored behaviour is immutable afterwards.

        Example:
            Color = Enum("RED", "GREEN").methods(
                describe=lambda self: f"the colour {self.to_string().lower()}"
            )
            Color.RED.describe()  # 'the colour red'

        Args:
            mapping: Name to behaviour mapping
            **behaviour: Additional name/behaviour pairs

        Returns:
            This domain, for chaining

        Raises:
            MethodsLockedError: Methods were already registered
            TypeError: A registered name is not a string
        """
        if self._methods is not None:
            raise MethodsLockedError(f"Methods already registered on {self!r}")

        registered = dict(mapping or {})
        registered.update(behaviour)
        for name in registered:
            if not isinstance(name, str):
                raise TypeError(f"Method names must be strings, not {type(name).__name__}")

        object.__setattr__(self, "_methods", MappingProxyType(registered))
        logger.debug("Registered %d shared methods on %r", len(registered), self)
        return self


class ValueBase(EnumerationBase):
    """
    Defaults for variants.

    Type-level operations are forwarded to the owning domain, and names the
    variant does not define are looked up in the domain's registered
    behaviour. Subclasses provide a `domain` attribute.
    """

    def first(self):
        return self.domain.first()

    def last(self):
        return self.domain.last()

    def from_int(self, i: int):
        return self.domain.from_int(i)

    @property
    def registered_methods(self) -> Mapping[str, Any]:
        return self.domain.registered_methods

    def methods(self, mapping: Mapping[str, Any] | None = None, **behaviour: Any):
        return self.domain.methods(mapping, **behaviour)

    def __str__(self) -> str:
        return self.to_string()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        domain = self.__dict__.get("domain")
        if domain is not None:
            shared = domain.registered_methods
            if name in shared:
                return resolve_member(shared[name], self)
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )
