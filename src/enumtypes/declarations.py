"""
Declarations — Validated constructor arguments for enumerated types.

Each constructor validates its raw arguments through one of these models
before building a domain. Shape errors surface as pydantic's
ValidationError; repeated names raise DuplicateNameError.
"""

from collections import Counter
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator, model_validator

from enumtypes.errors import DuplicateNameError

RESERVED_MEMBER_NAMES = frozenset({"name", "value", "domain", "behaviour"})


def _check_name(name: str) -> str:
    if not name.strip():
        raise ValueError("variant names cannot be empty")
    return name


class EnumDeclaration(BaseModel):
    """
    Ordered variant names for Enum and Flags.
    """
    model_config = ConfigDict(frozen=True)

    names: list[StrictStr] = Field(..., description="Variant names in declaration order")

    @field_validator("names")
    @classmethod
    def names_not_blank(cls, v: list[str]) -> list[str]:
        return [_check_name(name) for name in v]

    @classmethod
    def from_names(cls, *names: Any) -> "EnumDeclaration":
        """Validate names and reject repeats."""
        declaration = cls(names=list(names))
        ensure_unique(declaration.names)
        return declaration


class RangeDeclaration(BaseModel):
    """
    Inclusive integer interval for EnumeratedRange.
    """
    model_config = ConfigDict(frozen=True)

    minimum: StrictInt = Field(..., description="Smallest allowed value")
    maximum: StrictInt = Field(..., description="Largest allowed value")
    name: StrictStr = Field(default="", description="Display name used by to_string()")

    @model_validator(mode="after")
    def bounds_ordered(self) -> "RangeDeclaration":
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must be <= maximum ({self.maximum})"
            )
        return self


class ObjectDeclaration(BaseModel):
    """
    Variant names mapped to their own behaviour for EnumObjects.
    """
    model_config = ConfigDict(frozen=True)

    members: dict[StrictStr, dict[StrictStr, Any] | None] = Field(
        ...,
        description="Variant name to behaviour mapping, in declaration order",
    )

    @field_validator("members")
    @classmethod
    def members_well_formed(
        cls, v: dict[str, dict[str, Any] | None]
    ) -> dict[str, dict[str, Any] | None]:
        for name, behaviour in v.items():
            _check_name(name)
            reserved = RESERVED_MEMBER_NAMES.intersection(behaviour or {})
            if reserved:
                raise ValueError(
                    f"'{name}' redefines reserved attributes: {', '.join(sorted(reserved))}"
                )
        return v

    @property
    def names(self) -> list[str]:
        return list(self.members)


def ensure_unique(names: list[str]) -> None:
    """
    Raise DuplicateNameError if any name repeats.

    Raises:
        DuplicateNameError: Lists each repeated name once
    """
    repeated = [name for name, count in Counter(names).items() if count > 1]
    if repeated:
        raise DuplicateNameError(repeated)
