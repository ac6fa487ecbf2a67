"""
Pydantic schemas for series.

A series is a named grouping that products reference.  The name is
required and must not be empty; uniqueness is enforced by the store.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import coerce_text


class SeriesCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["iPhone 15"])

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, value: Any) -> Any:
        return coerce_text(value)


class SeriesRead(BaseModel):
    """Schema for reading a series from the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
