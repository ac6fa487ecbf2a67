"""
Pydantic schemas for products.

Two read models exist: :class:`ProductPublic` is served on
unauthenticated listings and leaves out the cost fields
(``purchasePrice`` and ``source``); :class:`ProductRead` is the full
record.  Both expand the referenced series into ``{_id, name}``.

On input, text attributes accept numbers and booleans and store them
as strings, so ``{"capacity": 128}`` is kept as ``"128"``.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import coerce_text

TEXT_FIELDS = ("name", "capacity", "color", "code", "battery", "condition", "source")


class SeriesRef(BaseModel):
    """Series as embedded in a product."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str


class ProductCreate(BaseModel):
    """Schema for creating a product.

    Every attribute is optional except that ``seriesId`` must name an
    existing series; a missing or unknown ``seriesId`` is rejected by
    the service, not by validation.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, examples=["iPhone 15 Pro"])
    capacity: Optional[str] = Field(None, examples=["256GB"])
    color: Optional[str] = Field(None, examples=["Black"])
    code: Optional[str] = None
    battery: Optional[str] = Field(None, examples=["91%"])
    condition: Optional[str] = Field(None, examples=["Used"])
    selling_price: Optional[float] = Field(None, alias="sellingPrice")
    purchase_price: Optional[float] = Field(None, alias="purchasePrice")
    source: Optional[str] = None
    series_id: Optional[str] = Field(None, alias="seriesId", description="ID of the series the product belongs to")

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def coerce_text_fields(cls, value: Any) -> Any:
        return coerce_text(value)


class ProductPublic(BaseModel):
    """Product as shown to anonymous clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: Optional[str] = None
    capacity: Optional[str] = None
    color: Optional[str] = None
    code: Optional[str] = None
    battery: Optional[str] = None
    condition: Optional[str] = None
    selling_price: Optional[float] = Field(None, alias="sellingPrice")
    series: Optional[SeriesRef] = None


class ProductRead(ProductPublic):
    """Full product record, including cost fields."""

    purchase_price: Optional[float] = Field(None, alias="purchasePrice")
    source: Optional[str] = None
