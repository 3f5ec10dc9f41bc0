# multiblog/schemas/common.py
"""Common schemas used across multiple modules."""
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo
from pydantic.alias_generators import to_pascal
from typing import Optional


class ApiModel(BaseModel):
    """
    Base for wire schemas.

    Attributes are snake_case in Python and PascalCase on the wire
    (``blog_id`` <-> ``BlogId``); both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        from_attributes=True,
    )


def require_text(value: Optional[str], info: ValidationInfo) -> str:
    """Reject empty or whitespace-only values for required text fields."""
    if value is None or not value.strip():
        raise ValueError(f"{to_pascal(info.field_name)} is required")
    return value


class MessageResponse(BaseModel):
    """Confirmation payload for actions that don't return a resource."""
    message: str = Field(..., description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: str = Field(..., description="Human-readable error message")
