"""
Base repository class providing common database operations.

`BaseRepository` is the storage gateway of the warehouse API: it turns one
logical operation (fetch-by-id, fetch-all, exists-by-unique-field, insert,
update, delete-by-id) into a parameterized SQLAlchemy statement and turns the
result, or the driver error, into something the service layer understands.

Every entity gets the same gateway. Model-specific repositories inherit from
it only to add read models (reports) that are not plain CRUD.
"""
from app.exceptions.base import (
    DuplicateError,
    EntityInUseError,
    InvalidFieldError,
    NotFoundError,
    ReferencedEntityNotFoundError,
    StorageError,
    ValidationFailedError,
)

from app.exceptions.mapper import db_error_handler
from app.validators.model_validators import (
    find_dangling_references,
    find_unique_conflicts,
    find_unknown_model_kwargs,
    get_primary_key_name,
    get_required_columns,
)

import time
from typing import TypeVar, Generic, Type, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
import logging

from app.database.base import Base

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.

    Transactions:
        The repository never commits. Each write runs in a SAVEPOINT so a rejected
        write leaves the surrounding unit of work intact; the request-scoped
        session dependency owns COMMIT/ROLLBACK.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class (e.g. Seller, not Seller())
            db: The async database session, usually injected by a FastAPI dependency
        """
        self.model = model
        self.db = db
        self.pk_name = get_primary_key_name(model)

    @property
    def model_name(self) -> str:
        return self.model.__name__

    @property
    def _pk(self):
        return getattr(self.model, self.pk_name)

    # =================================================================================================================
    # Create
    # =================================================================================================================

    async def create(self, **kwargs) -> ModelType:
        """
        Insert an entity and return it with its store-assigned identity.

        Order of checks:
            1. unknown fields                -> InvalidFieldError
            2. missing required fields       -> ValidationFailedError
            3. unique pre-check (one probe)  -> DuplicateError
            4. INSERT; constraint violations are classified from the driver error
               (DuplicateError / ReferencedEntityNotFoundError / StorageError)

        Logging:
        - DEBUG: start event with model name and provided keys (not values).
        - INFO: expected client errors (invalid fields, missing required, duplicate).
        - INFO: success event with created id and duration_ms.
        """
        logger.debug(
            "repo.create.start",
            extra={
                "model": self.model_name,
                "operation": "create",
                "provided_keys": sorted(kwargs.keys()),
            },
        )

        unknown = find_unknown_model_kwargs(self.model, kwargs)
        if unknown:
            logger.info(
                "repo.create.invalid_fields",
                extra={"model": self.model_name, "operation": "create", "invalid_fields": sorted(unknown)},
            )
            raise InvalidFieldError(f"Unknown field(s) for {self.model_name}: {', '.join(unknown)}", fields=unknown)

        # consider missing if not provided or explicitly None (since NOT NULL)
        missing = [c for c in get_required_columns(self.model) if kwargs.get(c) is None]
        if missing:
            logger.info(
                "repo.create.missing_required",
                extra={"model": self.model_name, "operation": "create", "missing_fields": sorted(missing)},
            )
            raise ValidationFailedError(
                f"Missing required field(s): {', '.join(missing)} for {self.model_name}", fields=missing
            )

        await self._raise_on_unique_conflicts(kwargs, operation="create")

        start = time.perf_counter()
        entity = self.model(**kwargs)

        async def _insert():
            self.db.add(entity)
            await self.db.flush()
            await self.db.refresh(entity)

        await self._write(_insert, kwargs)

        logger.info(
            "repo.create.success",
            extra={
                "model": self.model_name,
                "operation": "create",
                "id": getattr(entity, self.pk_name, None),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return entity

    # flush() sends the INSERT and gives us the generated id; commit() is left to
    # the session dependency so several repository calls can share one transaction.

    # =================================================================================================================
    # Read (single entity)
    # =================================================================================================================

    async def get_by_id(self, entity_id: Any) -> ModelType | None:
        """
        Get an entity by its primary key.

        Returns:
            The entity if found, otherwise None. Absence is an expected outcome, not an error.

        Raises:
            StorageError: If the query itself fails.
        """
        try:
            result = await self.db.execute(select(self.model).where(self._pk == entity_id))
            entity = result.scalar_one_or_none()
            logger.debug(f"Retrieved {self.model_name} by ID: {entity_id} (found={entity is not None})")
            return entity
        except Exception as e:
            logger.exception(f"Error retrieving {self.model_name} by ID {entity_id}")
            raise StorageError(f"Failed to retrieve {self.model_name}") from e

    async def get_by_id_or_raise(self, entity_id: Any) -> ModelType:
        """
        Get an entity by its primary key or raise NotFoundError.
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.model_name} with ID {entity_id} not found")
        return entity

    async def find_by_field(self, field: str, value: Any) -> ModelType | None:
        """
        Find a single entity by any field.

        Raises:
            InvalidFieldError: If the field does not exist on the model
            StorageError: If the query fails
        """
        if not hasattr(self.model, field):
            raise InvalidFieldError(f"{self.model_name} has no field '{field}'", fields=[field])

        try:
            result = await self.db.execute(select(self.model).where(getattr(self.model, field) == value).limit(1))
            entity = result.scalars().first()
            logger.debug(f"Found {self.model_name} by {field}: {entity is not None}")
            return entity
        except Exception as e:
            logger.exception(f"Error finding {self.model_name} by {field}")
            raise StorageError(f"Failed to find {self.model_name}") from e

    async def exists(self, entity_id: Any) -> bool:
        """
        Check if an entity exists by its primary key.
        """
        try:
            result = await self.db.execute(select(self._pk).where(self._pk == entity_id))
            return result.scalar() is not None
        except Exception as e:
            logger.exception(f"Error checking existence of {self.model_name} {entity_id}")
            raise StorageError(f"Failed to check {self.model_name} existence") from e

    async def exists_by_field(self, field: str, value: Any, exclude_id: Any = None) -> bool:
        """
        Existence probe on a (usually unique) field: `SELECT <pk> WHERE <field> = :value`.

        Args:
            field: Attribute name on the model
            value: Value to look for
            exclude_id: When given, the row with this primary key does not count,
                        so a record never conflicts with itself

        Returns:
            True if any (other) row holds the value.
        """
        if not hasattr(self.model, field):
            raise InvalidFieldError(f"{self.model_name} has no field '{field}'", fields=[field])

        query = select(self._pk).where(getattr(self.model, field) == value)
        if exclude_id is not None:
            query = query.where(self._pk != exclude_id)

        try:
            result = await self.db.execute(query.limit(1))
            return result.first() is not None
        except Exception as e:
            logger.exception(f"Error probing {self.model_name}.{field}")
            raise StorageError(f"Failed to check {self.model_name} {field}") from e

    # =================================================================================================================
    # Read (multiple entities)
    # =================================================================================================================

    async def get_all(
        self,
        offset: int = 0,                # how many records to skip
        limit: int | None = None,       # None returns every row
        order_by: str | None = None     # field to sort by; primary key when omitted
    ) -> list[ModelType]:
        """
        Get all entities with optional ordering and pagination.

        Returns:
            A list of model instances. An empty table yields an empty list.
        """
        try:
            query = select(self.model)

            if order_by and hasattr(self.model, order_by):
                query = query.order_by(getattr(self.model, order_by))
            else:
                if order_by:
                    logger.warning(
                        f"Ignored invalid 'order_by' field: '{order_by}' does not exist on {self.model_name}")
                query = query.order_by(self._pk)

            if offset:
                query = query.offset(offset)
            if limit is not None:
                query = query.limit(limit)

            result = await self.db.execute(query)
            entities = list(result.scalars().all())
            logger.debug(f"Retrieved {len(entities)} {self.model_name} entities")
            return entities

        except Exception as e:
            logger.exception(f"Error retrieving all {self.model_name}")
            raise StorageError(f"Failed to retrieve {self.model_name} entities") from e

    async def count(self, **filters: Any) -> int:
        """
        Count entities with optional equality filters (e.g. warehouse_id=3).
        """
        try:
            query = select(func.count(self._pk))
            for field, value in filters.items():
                if hasattr(self.model, field) and value is not None:
                    query = query.where(getattr(self.model, field) == value)

            result = await self.db.execute(query)
            return result.scalar() or 0
        except Exception as e:
            logger.exception(f"Error counting {self.model_name}")
            raise StorageError(f"Failed to count {self.model_name} entities") from e

    # =================================================================================================================
    # Update
    # =================================================================================================================

    async def update(self, entity_id: Any, **kwargs) -> ModelType | None:
        """
        Write the given attribute values to the row with `entity_id`.

        Callers pass the full merged record (fetch, overlay, write back); the
        primary key itself is never part of the SET clause.

        Returns:
            The updated entity, or None when zero rows were affected (id not found).

        Raises:
            InvalidFieldError: unknown attribute names
            DuplicateError: a unique value is already held by a different row
            ReferencedEntityNotFoundError: a foreign key points at a missing row
            StorageError: anything else
        """
        unknown = find_unknown_model_kwargs(self.model, kwargs)
        if unknown:
            logger.info(
                "repo.update.invalid_fields",
                extra={"model": self.model_name, "operation": "update", "invalid_fields": sorted(unknown)},
            )
            raise InvalidFieldError(f"Unknown field(s) for {self.model_name}: {', '.join(unknown)}", fields=unknown)

        values = {k: v for k, v in kwargs.items() if k != self.pk_name}
        if not values:
            logger.warning(f"No data provided for updating {self.model_name}")
            return await self.get_by_id(entity_id)

        await self._raise_on_unique_conflicts(values, operation="update", exclude_id=entity_id)

        stmt = (
            update(self.model)
            .where(self._pk == entity_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )

        async def _update():
            return await self.db.execute(stmt)

        result = await self._write(_update, values)

        if result.rowcount == 0:
            logger.info(
                "repo.update.not_found",
                extra={"model": self.model_name, "operation": "update", "id": entity_id},
            )
            return None

        updated_entity = await self.get_by_id(entity_id)
        if updated_entity is not None:
            await self.db.refresh(updated_entity)
        logger.debug(f"Updated {self.model_name} with ID: {entity_id}")
        return updated_entity

    # =================================================================================================================
    # Delete
    # =================================================================================================================

    async def delete(self, entity_id: Any) -> bool:
        """
        Delete an entity by its primary key.

        Returns:
            True if a row was removed, False if no row had that id.

        Raises:
            EntityInUseError: other rows still reference this one
            StorageError: for any other database error
        """
        stmt = delete(self.model).where(self._pk == entity_id)

        async def _delete():
            return await self.db.execute(stmt)

        try:
            result = await self._write(_delete, {})
        except ReferencedEntityNotFoundError as exc:
            # On DELETE a foreign-key violation means children still point here.
            logger.info(
                "repo.delete.in_use",
                extra={"model": self.model_name, "operation": "delete", "id": entity_id},
            )
            raise EntityInUseError(
                f"{self.model_name} with ID {entity_id} is still referenced by other records",
                constraint=exc.constraint,
            ) from exc

        if result.rowcount > 0:
            logger.debug(f"Deleted {self.model_name} with ID: {entity_id}")
            return True

        logger.info(
            "repo.delete.not_found",
            extra={"model": self.model_name, "operation": "delete", "id": entity_id},
        )
        return False

    # =================================================================================================================
    # Internals
    # =================================================================================================================

    async def _raise_on_unique_conflicts(self, values: dict, *, operation: str, exclude_id: Any = None) -> None:
        conflicts = sorted(await find_unique_conflicts(self.db, self.model, values, exclude_id=exclude_id))
        if conflicts:
            logger.info(
                f"repo.{operation}.duplicate_precheck",
                extra={"model": self.model_name, "operation": operation, "conflict_fields": conflicts},
            )
            raise DuplicateError(
                f"{self.model_name} already exists for field(s): {', '.join(conflicts)}", fields=conflicts
            )

    async def _write(self, operation, values: dict):
        """
        Run one write inside a SAVEPOINT and translate integrity failures.

        When the driver reports a foreign-key failure without naming the
        constraint (SQLite), each referenced table is probed once to say
        which reference was dangling.
        """
        try:
            async with db_error_handler(self.model_name):
                async with self.db.begin_nested():
                    return await operation()
        except ReferencedEntityNotFoundError as exc:
            if exc.fields or not values:
                raise
            dangling = await find_dangling_references(self.db, self.model, values)
            if not dangling:
                raise
            columns = sorted(dangling)
            raise ReferencedEntityNotFoundError(
                f"{self.model_name} referenced entity not found for field(s): {', '.join(columns)}",
                fields=columns,
                constraint=exc.constraint,
                reference=dangling[columns[0]],
            ) from exc
