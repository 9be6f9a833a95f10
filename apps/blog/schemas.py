"""
Pydantic schemas for the Blog API.

Defines request/response models with validation.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from apps.blog.models import (
    MAX_INTEGER,
    TITLE_MAX_LENGTH,
    AUTHOR_MAX_LENGTH,
    URL_MAX_LENGTH,
)


class BlogCreate(BaseModel):
    """Schema for creating a blog post. Missing likes default to 0."""
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    author: Optional[str] = Field(None, max_length=AUTHOR_MAX_LENGTH)
    url: str = Field(..., min_length=1, max_length=URL_MAX_LENGTH)
    likes: int = Field(0, ge=0, le=MAX_INTEGER, strict=True)


class BlogUpdate(BaseModel):
    """
    Schema for updating a blog post. All fields optional.

    Clients usually send back the whole object they received, `id` included;
    unknown keys are ignored so the id can never be rewritten.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    author: Optional[str] = Field(None, max_length=AUTHOR_MAX_LENGTH)
    url: Optional[str] = Field(None, min_length=1, max_length=URL_MAX_LENGTH)
    likes: Optional[int] = Field(None, ge=0, le=MAX_INTEGER, strict=True)

    @field_validator("title", "url", "likes")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # Omitting a required field is fine here, nulling it is not
        if value is None:
            raise ValueError("may not be null")
        return value


class BlogResponse(BaseModel):
    """Schema for blog responses."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> str:
        return str(value)
