"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(CamelModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: str | None = Field(default=None, description="Underlying error, outside production only")
    duration: int | None = Field(default=None, description="Processing time in milliseconds")
