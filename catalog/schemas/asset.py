"""
Asset Pydantic schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog.models.asset import Asset


class ImageResponse(BaseModel):
    """Schema for a product image."""

    id: int
    variant_id: int = Field(alias="variantId")
    position: Optional[int] = None
    file_name: Optional[str] = Field(None, alias="fileName")
    content_type: Optional[str] = Field(None, alias="contentType")
    alt: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_asset(cls, asset: Asset) -> "ImageResponse":
        return cls(
            id=asset.id,
            variant_id=asset.viewable_id,
            position=asset.position,
            file_name=asset.attachment_file_name,
            content_type=asset.attachment_content_type,
            alt=asset.alt,
        )


class ProductImagesResponse(BaseModel):
    """All images of a product in display order."""

    product_id: int = Field(alias="productId")
    items: list[ImageResponse]

    model_config = ConfigDict(populate_by_name=True)
