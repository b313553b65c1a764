"""
Base repository shared by the catalog repositories.
"""
from datetime import datetime, timezone
from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic repository bound to one session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def soft_delete(self, db_obj: ModelType) -> ModelType:
        """Stamp deleted_at on a soft-deletable record."""
        db_obj.deleted_at = datetime.now(timezone.utc)
        await self.session.flush()
        return db_obj
