"""
Price model - the amount a variant sells for in one currency.
"""
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.database import Base
from catalog.models.mixins import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:
    from catalog.models.variant import Variant


class Price(SoftDeleteMixin, TimestampMixin, Base):
    """
    Variant price in a currency.

    A NULL country_iso marks the default price used for every country
    that has no price of its own.
    """

    __tablename__ = "prices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    variant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("variants.id", ondelete="CASCADE"),
        index=True,
    )

    amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))
    currency: Mapped[str] = mapped_column(String(3), index=True)
    country_iso: Mapped[Optional[str]] = mapped_column(String(2), index=True)

    # Relationships
    variant: Mapped["Variant"] = relationship("Variant", back_populates="prices")

    def __repr__(self) -> str:
        return f"<Price {self.amount} {self.currency}>"
