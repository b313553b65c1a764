"""
Catalog service - storefront reads composed from the repositories.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import ImageNotFoundError, ProductNotFoundError
from catalog.core.logging import get_logger
from catalog.models.asset import Asset
from catalog.models.price import Price
from catalog.models.product import Product
from catalog.repositories.asset import AssetRepository
from catalog.repositories.price import PriceRepository, preferred_price
from catalog.repositories.product import ProductRepository

logger = get_logger(__name__)


@dataclass
class ProductPage:
    """One page of available products plus its counts."""

    products: list[Product]
    prices: dict[int, Optional[Price]]
    total: int
    page_count: int
    page: int
    per_page: int

    @property
    def has_more(self) -> bool:
        return (self.page - 1) * self.per_page + self.page_count < self.total


class CatalogService:
    """Read-only storefront catalog operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.products = ProductRepository(session)
        self.prices = PriceRepository(session)
        self.assets = AssetRepository(session)

    @staticmethod
    def _master_price(
        product: Product,
        currency: str,
        country_iso: Optional[str],
    ) -> Optional[Price]:
        """Pick the master price from already loaded variants and prices."""
        master = product.master
        if master is None:
            return None
        return preferred_price(master.prices, currency, country_iso)

    async def product_page(
        self,
        currency: str,
        *,
        page: int = 1,
        per_page: int = 12,
        country_iso: Optional[str] = None,
        as_of: Optional[datetime] = None,
    ) -> ProductPage:
        """Load a page of available products with total and page counts."""
        offset = (page - 1) * per_page

        total = await self.products.count_available(
            currency, country_iso=country_iso, as_of=as_of
        )
        page_count = await self.products.count_available_page(
            currency,
            limit=per_page,
            offset=offset,
            country_iso=country_iso,
            as_of=as_of,
        )
        products = await self.products.list_available(
            currency,
            limit=per_page,
            offset=offset,
            country_iso=country_iso,
            as_of=as_of,
        )

        logger.info(
            "Served product page",
            currency=currency,
            page=page,
            per_page=per_page,
            total=total,
            page_count=page_count,
        )

        return ProductPage(
            products=products,
            prices={p.id: self._master_price(p, currency, country_iso) for p in products},
            total=total,
            page_count=page_count,
            page=page,
            per_page=per_page,
        )

    async def count_page(
        self,
        currency: str,
        *,
        page: int = 1,
        per_page: int = 12,
        country_iso: Optional[str] = None,
        as_of: Optional[datetime] = None,
    ) -> int:
        """Count the available products landing on one page."""
        return await self.products.count_available_page(
            currency,
            limit=per_page,
            offset=(page - 1) * per_page,
            country_iso=country_iso,
            as_of=as_of,
        )

    async def product_detail(
        self,
        product_id: int,
        currency: str,
        country_iso: Optional[str] = None,
    ) -> tuple[Product, Optional[Price]]:
        """Get a live product and its master price in `currency`."""
        product = await self.products.get_active(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        price = None
        if product.master is not None:
            price = await self.prices.price_for(product.master.id, currency, country_iso)
        return product, price

    async def first_image(self, product_id: int) -> Asset:
        """Get the lead image of a live product."""
        if await self.products.get_active(product_id) is None:
            raise ProductNotFoundError(product_id)

        image = await self.assets.first_image_for_product(product_id)
        if image is None:
            raise ImageNotFoundError(product_id)
        return image

    async def images(self, product_id: int) -> list[Asset]:
        """Get all images of a live product in display order."""
        if await self.products.get_active(product_id) is None:
            raise ProductNotFoundError(product_id)
        return await self.assets.images_for_product(product_id)
