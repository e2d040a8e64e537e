"""
Object Enumerations — Constants that carry their own behaviour.

Like Enum, except each constant may define its own methods and
attributes. A constant's own behaviour wins over the defaults and over
anything later registered with methods(); shared methods only fill in
what a constant does not define itself.

Example:
    Animal = EnumObjects({
        "DOG": {"speak": lambda self: "woof!"},
        "CAT": {"speak": lambda self: "meow!"},
        "GIRAFFE": {},
    }).methods(speak=lambda self: "...")

    Animal.DOG.speak()      # 'woof!'
    Animal.GIRAFFE.speak()  # '...'
"""

from dataclasses import FrozenInstanceError, dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from enumtypes.base import resolve_member
from enumtypes.declarations import ObjectDeclaration
from enumtypes.enumeration import EnumerationType, Variant
from enumtypes.observability.logging import LogContext, get_logger

logger = get_logger("objects")


@dataclass(frozen=True, eq=False, repr=False)
class ObjectVariant(Variant):
    """A constant with its own behaviour bound onto it."""
    behaviour: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "behaviour", MappingProxyType(dict(self.behaviour)))
        for key, member in self.behaviour.items():
            object.__setattr__(self, key, resolve_member(member, self))


class ObjectEnumerationType(EnumerationType):
    """
    Domain of ObjectVariants, frozen once built.

    Only the write-once methods() registration can change it afterwards.
    """

    variant_class = ObjectVariant
    kind = "EnumObjects"

    def __init__(self, members: Mapping[str, Mapping[str, Any] | None]):
        self._members = {name: dict(behaviour or {}) for name, behaviour in members.items()}
        super().__init__(list(self._members))
        self._frozen = True

    def _build_variant(self, index: int, name: str) -> ObjectVariant:
        return self.variant_class(
            name=name,
            value=index,
            domain=self,
            behaviour=self._members[name],
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen"):
            raise FrozenInstanceError(f"cannot assign to '{name}' on frozen {self!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self.__dict__.get("_frozen"):
            raise FrozenInstanceError(f"cannot delete '{name}' on frozen {self!r}")
        super().__delattr__(name)


def EnumObjects(object_map: Mapping[str, Mapping[str, Any] | None]) -> ObjectEnumerationType:
    """
    Build a type of enumerated constants from a name to behaviour map.

    Args:
        object_map: Each key becomes one constant, in insertion order. Each
                    value maps attribute names to methods or plain values
                    for that constant (may be empty or None).

    Returns:
        Frozen ObjectEnumerationType

    Raises:
        ValidationError: A name is blank, a value is not a mapping, or a
                         behaviour redefines name, value, domain or behaviour
    """
    declaration = ObjectDeclaration(members=dict(object_map))
    with LogContext(f"EnumObjects({', '.join(declaration.names)})"):
        enum_type = ObjectEnumerationType.create(declaration.members)
        logger.debug("Built object enumeration with %d variants", len(enum_type))
    return enum_type
