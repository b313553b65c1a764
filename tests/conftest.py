"""
Shared fixtures: an in-memory SQLite catalog and HTTP clients bound to it.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./catalog-test.db")
os.environ.setdefault("ENVIRONMENT", "development")

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog.core.database import Base, get_db_session
from catalog.main import app
from catalog.models import Asset, Price, Product, Variant


@pytest.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    async with factory() as db_session:
        yield db_session


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class SeededCatalog:
    """Handles to the seeded rows that tests assert against."""

    tote: Product
    mug: Product
    upcoming: Product
    discontinued: Product
    deleted: Product
    unpriced_master: Product
    euro_only: Product
    unscheduled: Product
    filler: list[Product] = field(default_factory=list)
    lead_image: Optional[Asset] = None
    master_image: Optional[Asset] = None


def _product(
    name: str,
    *,
    available_on: Optional[datetime],
    discontinue_on: Optional[datetime] = None,
    deleted_at: Optional[datetime] = None,
    master_prices: tuple = (("USD", "10.00", None),),
    extra_variants: tuple = (),
) -> Product:
    """Build a product with a master variant and optional extra variants.

    Prices are (currency, amount, country_iso) tuples; a fourth element
    marks the price as deleted.
    """

    def prices(rows: tuple) -> list[Price]:
        built = []
        for row in rows:
            currency, amount, country = row[:3]
            built.append(
                Price(
                    currency=currency,
                    amount=Decimal(amount),
                    country_iso=country,
                    deleted_at=row[3] if len(row) > 3 else None,
                )
            )
        return built

    slug = name.lower().replace(" ", "-")
    variants = [
        Variant(sku=f"{slug}-master", is_master=True, position=1, prices=prices(master_prices))
    ]
    for index, (rows, variant_deleted_at) in enumerate(extra_variants, start=2):
        variants.append(
            Variant(
                sku=f"{slug}-{index}",
                is_master=False,
                position=index,
                prices=prices(rows),
                deleted_at=variant_deleted_at,
            )
        )

    return Product(
        name=name,
        slug=slug,
        available_on=available_on,
        discontinue_on=discontinue_on,
        deleted_at=deleted_at,
        variants_including_master=variants,
    )


@pytest.fixture
def product_factory():
    """Builder for one-off products; see `_product`."""
    return _product


@pytest.fixture
async def catalog(session: AsyncSession, now: datetime) -> SeededCatalog:
    """Seed a storefront catalog around `now`."""
    past = now - timedelta(days=10)

    tote = _product(
        "Ruby Tote",
        available_on=past,
        master_prices=(("USD", "15.99", None), ("EUR", "14.00", None)),
        extra_variants=(
            ((("USD", "17.99", None),), None),
            ((("USD", "12.00", None),), now - timedelta(days=1)),
        ),
    )
    mug = _product(
        "Solidus Mug",
        available_on=now - timedelta(days=5),
        discontinue_on=now + timedelta(days=5),
        master_prices=(("USD", "9.99", None), ("USD", "8.99", "US")),
    )
    upcoming = _product("Upcoming Hoodie", available_on=now + timedelta(days=3))
    discontinued = _product(
        "Old Cap",
        available_on=past,
        discontinue_on=now - timedelta(days=1),
    )
    deleted = _product("Gone Shirt", available_on=past, deleted_at=now - timedelta(days=2))
    unpriced_master = _product(
        "Bare Master",
        available_on=past,
        master_prices=(("USD", "5.00", None, now - timedelta(days=3)),),
        extra_variants=(((("USD", "6.00", None),), None),),
    )
    euro_only = _product(
        "Euro Scarf",
        available_on=past,
        master_prices=(("EUR", "20.00", None),),
    )
    unscheduled = _product("Draft Bag", available_on=None)
    filler = [
        _product(f"Filler {index:02d}", available_on=past)
        for index in range(15)
    ]

    session.add_all([
        tote, mug, upcoming, discontinued, deleted,
        unpriced_master, euro_only, unscheduled, *filler,
    ])
    await session.flush()

    tote_master, tote_second, tote_removed = tote.variants_including_master
    lead_image = Asset(viewable_id=tote_second.id, position=1, attachment_file_name="tote-side.jpg")
    master_image = Asset(viewable_id=tote_master.id, position=2, attachment_file_name="tote-front.jpg")
    session.add_all([
        lead_image,
        master_image,
        # Hidden: owned by a deleted variant
        Asset(viewable_id=tote_removed.id, position=0, attachment_file_name="tote-old.jpg"),
        # Hidden: not an image
        Asset(
            type="Document",
            viewable_id=tote_master.id,
            position=0,
            attachment_file_name="tote-care.pdf",
        ),
        Asset(viewable_id=mug.variants_including_master[0].id, position=1, attachment_file_name="mug.jpg"),
    ])
    await session.flush()

    return SeededCatalog(
        tote=tote,
        mug=mug,
        upcoming=upcoming,
        discontinued=discontinued,
        deleted=deleted,
        unpriced_master=unpriced_master,
        euro_only=euro_only,
        unscheduled=unscheduled,
        filler=filler,
        lead_image=lead_image,
        master_image=master_image,
    )


@pytest.fixture
def override_session(session: AsyncSession):
    """Route the app's database dependency to the test session."""

    async def _get_test_session() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_db_session] = _get_test_session
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(override_session) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def client() -> TestClient:
    """Synchronous client for endpoints that don't touch the database."""
    return TestClient(app)
