"""
Price repository for variant price resolution.
"""
from collections.abc import Iterable
from typing import Optional

from sqlalchemy import ColumnElement, or_, select

from catalog.models.price import Price
from catalog.repositories.base import BaseRepository


def country_filter(country_iso: Optional[str] = None) -> ColumnElement[bool]:
    """
    Restrict prices to the ones usable in a country.

    Without a country only default (NULL country) prices qualify; with one,
    that country's prices and the default prices do.
    """
    if country_iso is None:
        return Price.country_iso.is_(None)
    return or_(
        Price.country_iso == country_iso.upper(),
        Price.country_iso.is_(None),
    )


def preferred_price(
    prices: Iterable[Price],
    currency: str,
    country_iso: Optional[str] = None,
) -> Optional[Price]:
    """
    Pick the price a shopper in `country_iso` pays in `currency`.

    A live price for the country wins over the default price; among equals
    the newest row wins.
    """
    country = country_iso.upper() if country_iso else None
    candidates = [
        price
        for price in prices
        if not price.is_deleted
        and price.currency == currency.upper()
        and price.country_iso in (country, None)
    ]
    if not candidates:
        return None
    return max(
        candidates,
        key=lambda price: (price.country_iso is not None, price.id or 0),
    )


class PriceRepository(BaseRepository[Price]):
    """Repository for Price model operations."""

    async def price_for(
        self,
        variant_id: int,
        currency: str,
        country_iso: Optional[str] = None,
    ) -> Optional[Price]:
        """Get the live price of a variant in a currency for a country."""
        stmt = select(Price).where(
            Price.variant_id == variant_id,
            Price.currency == currency.upper(),
            Price.deleted_at.is_(None),
            country_filter(country_iso),
        )
        result = await self.session.execute(stmt)
        return preferred_price(result.scalars().all(), currency, country_iso)
