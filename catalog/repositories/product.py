"""
Product repository: storefront availability queries.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Select, and_, func, or_, select
from sqlalchemy.orm import aliased, selectinload

from catalog.core.logging import get_logger
from catalog.models.price import Price
from catalog.models.product import Product
from catalog.models.variant import Variant
from catalog.repositories.base import BaseRepository
from catalog.repositories.price import country_filter

logger = get_logger(__name__)


class ProductRepository(BaseRepository[Product]):
    """Repository for Product model operations."""

    def available_query(
        self,
        currency: str,
        *,
        country_iso: Optional[str] = None,
        as_of: Optional[datetime] = None,
    ) -> Select:
        """
        Select product ids on sale at `as_of` with a price in `currency`.

        A product qualifies when it is not deleted, its availability window
        covers `as_of`, its master variant has at least one live price, and
        one of its live variants (master included) has a live price in the
        currency usable in `country_iso` (see `country_filter`). The result
        has one row per matching price, so callers apply DISTINCT.
        """
        as_of = as_of or datetime.now(timezone.utc)

        master = aliased(Variant, name="master_variant")
        variants = aliased(Variant, name="variants_including_master")
        master_price = aliased(Price, name="master_price")

        master_has_price = (
            select(master_price.id)
            .where(
                master_price.deleted_at.is_(None),
                master_price.variant_id == master.id,
            )
            .exists()
        )

        return (
            select(Product.id)
            .join(
                master,
                and_(master.is_master.is_(True), master.product_id == Product.id),
            )
            .join(
                variants,
                and_(variants.deleted_at.is_(None), variants.product_id == Product.id),
            )
            .join(
                Price,
                and_(Price.deleted_at.is_(None), Price.variant_id == variants.id),
            )
            .where(
                Product.deleted_at.is_(None),
                master_has_price,
                Product.available_on <= as_of,
                or_(
                    Product.discontinue_on.is_(None),
                    Product.discontinue_on >= as_of,
                ),
                Price.currency == currency.upper(),
                country_filter(country_iso),
            )
        )

    def _page_ids_query(
        self,
        currency: str,
        *,
        limit: int,
        offset: int,
        country_iso: Optional[str],
        as_of: Optional[datetime],
    ) -> Select:
        return (
            self.available_query(currency, country_iso=country_iso, as_of=as_of)
            .with_only_columns(Product.id.label("count_column"))
            .distinct()
            .order_by(Product.id)
            .limit(limit)
            .offset(offset)
        )

    async def count_available_page(
        self,
        currency: str,
        *,
        limit: int = 12,
        offset: int = 0,
        country_iso: Optional[str] = None,
        as_of: Optional[datetime] = None,
    ) -> int:
        """
        Count the available products that land on one page.

        The count runs over the limited DISTINCT id list, so it is never
        larger than `limit`.
        """
        page = self._page_ids_query(
            currency,
            limit=limit,
            offset=offset,
            country_iso=country_iso,
            as_of=as_of,
        ).subquery("subquery_for_count")
        stmt = select(func.count(page.c.count_column))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_available(
        self,
        currency: str,
        *,
        country_iso: Optional[str] = None,
        as_of: Optional[datetime] = None,
    ) -> int:
        """Count every available product, ignoring pagination."""
        ids = (
            self.available_query(currency, country_iso=country_iso, as_of=as_of)
            .distinct()
            .subquery()
        )
        result = await self.session.execute(select(func.count()).select_from(ids))
        return result.scalar() or 0

    async def list_available(
        self,
        currency: str,
        *,
        limit: int = 12,
        offset: int = 0,
        country_iso: Optional[str] = None,
        as_of: Optional[datetime] = None,
    ) -> list[Product]:
        """Load the available products on one page, ordered by id."""
        ids_result = await self.session.execute(
            self._page_ids_query(
                currency,
                limit=limit,
                offset=offset,
                country_iso=country_iso,
                as_of=as_of,
            )
        )
        ids = list(ids_result.scalars().all())
        if not ids:
            return []

        stmt = (
            select(Product)
            .where(Product.id.in_(ids))
            .options(
                selectinload(Product.variants_including_master).selectinload(Variant.prices)
            )
            .order_by(Product.id)
        )
        result = await self.session.execute(stmt)
        products = list(result.scalars().all())

        logger.debug(
            "Loaded available products",
            currency=currency,
            count=len(products),
            offset=offset,
        )
        return products

    async def get_active(self, product_id: int) -> Optional[Product]:
        """Get a product that has not been soft-deleted, with its variants."""
        stmt = (
            select(Product)
            .where(Product.id == product_id, Product.deleted_at.is_(None))
            .options(
                selectinload(Product.variants_including_master).selectinload(Variant.prices)
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
