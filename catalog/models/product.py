"""
Product model - a sellable catalog entry with an availability window.
"""
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.database import Base
from catalog.models.mixins import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:
    from catalog.models.variant import Variant


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Product(SoftDeleteMixin, TimestampMixin, Base):
    """Catalog product. Sold through its variants, one of which is the master."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)

    # Availability window
    available_on: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        index=True,
    )
    discontinue_on: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        index=True,
    )

    # Relationships
    variants_including_master: Mapped[list["Variant"]] = relationship(
        "Variant",
        back_populates="product",
        order_by="Variant.position",
        cascade="all, delete-orphan",
    )

    @property
    def master(self) -> Optional["Variant"]:
        """The canonical variant, if it has been loaded and exists."""
        for variant in self.variants_including_master:
            if variant.is_master:
                return variant
        return None

    def is_available(self, at: Optional[datetime] = None) -> bool:
        """Whether the product is on sale at the given moment."""
        at = at or datetime.now(timezone.utc)
        if self.is_deleted or self.available_on is None:
            return False
        if _as_utc(self.available_on) > at:
            return False
        return self.discontinue_on is None or _as_utc(self.discontinue_on) >= at

    def __repr__(self) -> str:
        return f"<Product {self.name[:30]}>"
