"""
Product Pydantic schemas for request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PriceResponse(BaseModel):
    """Resolved price of a variant."""

    amount: Optional[Decimal]
    currency: str
    country_iso: Optional[str] = Field(None, alias="countryIso")

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class ProductResponse(BaseModel):
    """Schema for product API responses."""

    id: int
    name: str
    slug: str
    description: Optional[str] = None
    available_on: Optional[datetime] = Field(None, alias="availableOn")
    discontinue_on: Optional[datetime] = Field(None, alias="discontinueOn")
    master_sku: Optional[str] = Field(None, alias="masterSku")
    price: Optional[PriceResponse] = None

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class PaginatedProductsResponse(BaseModel):
    """Schema for a page of available products."""

    items: list[ProductResponse]
    total: int
    page_count: int = Field(alias="pageCount")
    page: int
    per_page: int = Field(alias="perPage")
    has_more: bool = Field(alias="hasMore")

    model_config = ConfigDict(populate_by_name=True)


class ProductCountResponse(BaseModel):
    """Number of available products on the requested page."""

    count: int
    page: int
    per_page: int = Field(alias="perPage")
    currency: str

    model_config = ConfigDict(populate_by_name=True)
