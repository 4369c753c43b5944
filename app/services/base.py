"""
Base service implementing the record store operations.
"""

import logging
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import session_lock
from app.core.errors import InputValidationError, ReferenceNotFoundError
from app.models.base import BaseModel


logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseService(Generic[ModelType]):
    """
    Store operations for one record kind.

    Every call takes the session lock, so services may be used from
    resolvers running concurrently on the same request session.
    """

    model: type[ModelType]
    # Message reported when a unique constraint rejects a save
    conflict_message = "Record violates a uniqueness constraint"

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def kind(self) -> str:
        return self.model.__name__

    async def get_by_id(self, record_id: str) -> Optional[ModelType]:
        """Get a record by ID, None if it does not exist."""
        async with session_lock(self.db):
            return await self.db.get(self.model, record_id)

    async def find_one(self, *criteria: Any) -> Optional[ModelType]:
        """Get the single record matching the criteria."""
        async with session_lock(self.db):
            result = await self.db.execute(select(self.model).where(*criteria))
            return result.scalars().first()

    async def find_many(self, *criteria: Any) -> list[ModelType]:
        """Get every record matching the criteria, in no particular order."""
        async with session_lock(self.db):
            result = await self.db.execute(select(self.model).where(*criteria))
            return list(result.scalars().all())

    async def list_all(self) -> list[ModelType]:
        return await self.find_many()

    async def get_or_error(self, record_id: str) -> ModelType:
        """
        Resolve a stored reference.

        Raises:
            ReferenceNotFoundError: If the referenced record does not exist
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise ReferenceNotFoundError(self.kind, record_id)
        return record

    async def get_for_update(
        self,
        record_id: str,
        invalid_args: Optional[dict[str, Any]] = None,
    ) -> ModelType:
        """
        Get the target of a patch.

        Raises:
            InputValidationError: If no record has this ID
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise InputValidationError(
                f"{self.kind} {record_id} not found",
                invalid_args=invalid_args,
            )
        return record

    async def save(
        self,
        *records: BaseModel,
        invalid_args: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Persist records in order within one transaction.

        Args:
            records: Records to insert or update, flushed in the given order
            invalid_args: Submitted arguments reported if the save is rejected

        Raises:
            InputValidationError: If a uniqueness constraint is violated.
                Nothing is persisted in that case.
        """
        async with session_lock(self.db):
            try:
                for record in records:
                    self.db.add(record)
                    await self.db.flush()
                await self.db.commit()
            except IntegrityError as exc:
                await self.db.rollback()
                logger.warning(f"{self.kind} rejected by the store: {exc.orig}")
                raise InputValidationError(
                    self.conflict_message,
                    invalid_args=invalid_args,
                ) from exc

            for record in records:
                await self.db.refresh(record)

    async def apply_patch(
        self,
        record: ModelType,
        changes: dict[str, Any],
        invalid_args: Optional[dict[str, Any]] = None,
    ) -> ModelType:
        """
        Assign supplied fields onto a record and save it.

        Fields missing from ``changes`` are left untouched; an empty
        ``changes`` is a no-op save.
        """
        for field, value in changes.items():
            setattr(record, field, value)

        await self.save(record, invalid_args=invalid_args)
        return record
