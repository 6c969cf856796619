"""Base repository with common CRUD operations.

Usage:
    from trustgate.db.repositories.base import BaseRepository

    class ScreeningRepository(BaseRepository[RenterScreening, UUID]):
        model = RenterScreening

    repo = ScreeningRepository(db_session)
    screening = await repo.get(screening_id)
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from trustgate.db.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)
PKType = TypeVar("PKType", bound=UUID | int | str)


class BaseRepository(Generic[ModelType, PKType]):
    """Generic repository for SQLAlchemy models.

    Type Parameters:
        ModelType: The SQLAlchemy model class
        PKType: The type of the primary key (UUID, int, or str)

    Attributes:
        model: The model class
        db: The database session
    """

    model: type[ModelType]

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def get(self, pk: PKType) -> ModelType | None:
        """Get a single record by primary key."""
        return await self.db.get(self.model, pk)

    async def create(self, obj: ModelType, *, commit: bool = True) -> ModelType:
        """Create a new record.

        Args:
            obj: Model instance to create
            commit: Whether to commit the transaction

        Returns:
            Created model instance
        """
        self.db.add(obj)
        await self._persist(obj, commit)
        return obj

    async def update(
        self, obj: ModelType, updates: dict[str, Any], *, commit: bool = True
    ) -> ModelType:
        """Update a record with given values.

        Args:
            obj: Model instance to update
            updates: Dictionary of field: value to update
            commit: Whether to commit the transaction

        Returns:
            Updated model instance
        """
        for field, value in updates.items():
            if not hasattr(obj, field):
                raise AttributeError(f"{self.model.__name__} has no field {field!r}")
            setattr(obj, field, value)

        await self._persist(obj, commit)
        return obj

    async def _persist(self, obj: ModelType, commit: bool) -> None:
        """Flush or commit pending changes; roll back if the store rejects them."""
        try:
            if commit:
                await self.db.commit()
                await self.db.refresh(obj)
            else:
                await self.db.flush()
        except Exception:
            await self.db.rollback()
            raise
