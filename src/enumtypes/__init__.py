"""
enumtypes — Enumerated value types.

Four constructors share one behavioural contract (ordering, integer
conversion, stepping, iteration and write-once custom behaviour):

- Enum: closed set of named constants
- EnumeratedRange: bounded integer range
- Flags: named powers of two with bitmask decomposition
- EnumObjects: named constants carrying their own behaviour
"""

from enumtypes.base import (
    Base,
    EnumerationBase,
    EnumerationIterator,
    ValueBase,
)
from enumtypes.declarations import (
    EnumDeclaration,
    RangeDeclaration,
    ObjectDeclaration,
)
from enumtypes.enumeration import Enum, EnumerationType, Variant
from enumtypes.errors import (
    EnumerationError,
    DomainLookupError,
    RangeError,
    SequenceExhaustionError,
    MethodsLockedError,
    DuplicateNameError,
)
from enumtypes.flags import Flags, FlagType, FlagVariant
from enumtypes.objects import EnumObjects, ObjectEnumerationType, ObjectVariant
from enumtypes.ranges import EnumeratedRange, RangeConstructor, RangeType, RangeValue

__version__ = "0.1.0"

__all__ = [
    # Constructors
    "Enum",
    "EnumeratedRange",
    "Flags",
    "EnumObjects",
    # Contract
    "Base",
    "EnumerationBase",
    "EnumerationIterator",
    "ValueBase",
    # Domains and variants
    "EnumerationType",
    "Variant",
    "RangeConstructor",
    "RangeType",
    "RangeValue",
    "FlagType",
    "FlagVariant",
    "ObjectEnumerationType",
    "ObjectVariant",
    # Declarations
    "EnumDeclaration",
    "RangeDeclaration",
    "ObjectDeclaration",
    # Errors
    "EnumerationError",
    "DomainLookupError",
    "RangeError",
    "SequenceExhaustionError",
    "MethodsLockedError",
    "DuplicateNameError",
]
