"""
Asset model - files attached to catalog records.

Assets share one table. `type` tells the kind of file apart and the
viewable_type/viewable_id pair points at the owning record.
"""
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.database import Base
from catalog.models.mixins import TimestampMixin

IMAGE_TYPE = "Image"
VARIANT_VIEWABLE = "Variant"


class Asset(TimestampMixin, Base):
    """Attachment owned by a variant (or any other viewable record)."""

    __tablename__ = "assets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    type: Mapped[str] = mapped_column(String(75), default=IMAGE_TYPE, index=True)
    viewable_type: Mapped[str] = mapped_column(String(255), default=VARIANT_VIEWABLE)
    viewable_id: Mapped[int] = mapped_column(Integer, index=True)
    position: Mapped[Optional[int]] = mapped_column(Integer)

    attachment_file_name: Mapped[Optional[str]] = mapped_column(String(255))
    attachment_content_type: Mapped[Optional[str]] = mapped_column(String(255))
    alt: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<Asset {self.type} {self.attachment_file_name}>"
