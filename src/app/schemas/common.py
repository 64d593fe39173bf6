"""
Shared schema building blocks: the response envelope, the error body and the
base classes every payload/read schema derives from.
"""

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator

T = TypeVar("T")

# Required text fields must carry something besides whitespace
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Store-assigned identities and references to them
EntityId = Annotated[int, Field(gt=0)]


class DataResponse(BaseModel, Generic[T]):
    """Success envelope: `{"data": ...}`."""
    data: T


class ErrorResponse(BaseModel):
    detail: str
    code: str
    fields: list[str] | None = None


class PayloadSchema(BaseModel):
    """Base for request bodies. Unknown keys are rejected."""
    model_config = ConfigDict(extra="forbid")


class PatchSchema(PayloadSchema):
    """
    Base for partial updates.

    Every field is optional; a field that is sent must not be null, because the
    stored attributes are all NOT NULL. Omitted fields keep their stored value.
    """

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"field(s) cannot be null: {', '.join(nulls)}")
        return self


class ReadSchema(BaseModel):
    """Base for response bodies built from ORM objects."""
    model_config = ConfigDict(from_attributes=True)
