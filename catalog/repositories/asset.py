"""
Asset repository for product image lookups.
"""
from typing import Optional

from sqlalchemy import Select, select

from catalog.models.asset import IMAGE_TYPE, VARIANT_VIEWABLE, Asset
from catalog.models.variant import Variant
from catalog.repositories.base import BaseRepository


class AssetRepository(BaseRepository[Asset]):
    """Repository for Asset model operations."""

    def _product_images_query(self, product_id: int) -> Select:
        # Images hang off variants; deleted variants hide their images
        return (
            select(Asset)
            .join(Variant, Asset.viewable_id == Variant.id)
            .where(
                Variant.deleted_at.is_(None),
                Asset.type == IMAGE_TYPE,
                Variant.product_id == product_id,
                Asset.viewable_type == VARIANT_VIEWABLE,
            )
            .order_by(Asset.position.asc(), Variant.position.asc(), Asset.id.asc())
        )

    async def first_image_for_product(self, product_id: int) -> Optional[Asset]:
        """Get the image shown first for a product, or None."""
        result = await self.session.execute(
            self._product_images_query(product_id).limit(1)
        )
        return result.scalar_one_or_none()

    async def images_for_product(self, product_id: int) -> list[Asset]:
        """Get every image of a product in display order."""
        result = await self.session.execute(self._product_images_query(product_id))
        return list(result.scalars().all())
