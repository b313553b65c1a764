"""
Variant model - a concrete, priced version of a product.
"""
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.database import Base
from catalog.models.mixins import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:
    from catalog.models.price import Price
    from catalog.models.product import Product


class Variant(SoftDeleteMixin, TimestampMixin, Base):
    """Product variant. Exactly one per product is flagged as master."""

    __tablename__ = "variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        index=True,
    )

    sku: Mapped[str] = mapped_column(String(255), default="", index=True)
    is_master: Mapped[bool] = mapped_column(Boolean, default=False)
    position: Mapped[Optional[int]] = mapped_column(Integer)

    # Relationships
    product: Mapped["Product"] = relationship(
        "Product",
        back_populates="variants_including_master",
    )
    prices: Mapped[list["Price"]] = relationship(
        "Price",
        back_populates="variant",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Variant {self.sku or self.id}{' (master)' if self.is_master else ''}>"
