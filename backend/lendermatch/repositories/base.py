from typing import Any, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lendermatch.db.base import BaseModel

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic read-only repository.

    The matching service never writes: lender records are maintained by the
    portal's admin screens. Repositories therefore only expose queries.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """
        Retrieve an entity by its ID.

        Args:
            id: The UUID of the entity

        Returns:
            The entity if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by(self, order_by: Optional[Any] = None, **filters: Any) -> List[ModelType]:
        """
        Find entities matching the given field filters.

        Args:
            order_by: Optional ordering clause(s); a tuple is applied in order
            **filters: Field equality filters (e.g., status="active")

        Returns:
            List of matching entities
        """
        stmt = select(self.model)

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        if order_by is not None:
            clauses = order_by if isinstance(order_by, tuple) else (order_by,)
            stmt = stmt.order_by(*clauses)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())
