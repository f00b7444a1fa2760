"""Schema Base Classes — camelCase wire format and partial-update semantics.

Invariants:
    - ApiModel accepts both camelCase and snake_case input, emits camelCase
    - Enum fields are stored as their plain string values
    - PartialModel.changes() contains only the fields the client sent
    - A field listed in non_nullable may be omitted from an update but not nulled
"""

from datetime import datetime
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def _decimal_to_str(value: Any) -> Any:
    """Numbers become decimal strings; everything else is left for str validation."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


# Decimal column carried as a string, the way the dashboard sends it
DecimalString = Annotated[str, BeforeValidator(_decimal_to_str)]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class PartialModel(ApiModel):
    """Base for XUpdate schemas: every field optional, unset fields untouched."""

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if name in self.non_nullable and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class RecordMixin(ApiModel):
    """Identity and creation timestamp assigned by the storage layer."""
    id: int
    created_at: datetime | None = None
