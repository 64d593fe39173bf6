"""
Generic entity service.

`EntityService` implements create/get/get_all/update/delete (and the
dual-mode reports) once for every entity. It sits between the HTTP handlers
and the storage gateway and is independent of the transport: it takes plain
dicts and ids, returns models or rows, and raises `RepositoryError`
subclasses whose `error_code` the handlers map to a status.
"""

import logging
from typing import Any, Awaitable, Callable, Generic

from app.exceptions.base import (
    IdentityImmutableError,
    InvalidFieldError,
    NotFoundError,
    ReferencedEntityNotFoundError,
)
from app.repositories.base_repository import BaseRepository, ModelType
from app.validators.model_validators import get_column_names
from .definitions import EntityDefinition

logger = logging.getLogger(__name__)

ReportQuery = Callable[[Any], Awaitable[list[dict[str, Any]]]]


class EntityService(Generic[ModelType]):
    """
    Validated CRUD for one entity type.

    Nothing here retries or commits: every failure is terminal for the call and
    the request-scoped session decides whether the unit of work is committed.
    """

    def __init__(self, repository: BaseRepository[ModelType], definition: EntityDefinition):
        self.repository = repository
        self.definition = definition

    @property
    def label(self) -> str:
        return self.definition.label

    @property
    def pk_name(self) -> str:
        return self.repository.pk_name

    # =================================================================================================================
    # Commands
    # =================================================================================================================

    async def create(self, values: dict[str, Any]) -> ModelType:
        """
        Persist a new record and return it with its assigned identity.

        Raises:
            DuplicateError: a unique field is already taken
            ReferencedEntityNotFoundError: a referenced record does not exist,
                                           with a message naming which one
            ValidationFailedError / InvalidFieldError / StorageError: from the gateway
        """
        try:
            entity = await self.repository.create(**values)
        except ReferencedEntityNotFoundError as exc:
            raise self._describe_reference_error(exc) from exc

        logger.info("service.create.success", extra={"entity": self.label, "id": getattr(entity, self.pk_name)})
        return entity

    async def update(self, entity_id: Any, patch: dict[str, Any]) -> ModelType:
        """
        Fetch, merge, check identity, then write the full record back.

        Fields absent from `patch` keep their stored value. Applying the same
        patch twice leaves the same stored record.

        Raises:
            NotFoundError: no record with `entity_id`
            InvalidFieldError: the patch touches a field that is not updatable
            IdentityImmutableError: the patch tries to change the record's identity
            DuplicateError: a unique value is held by a different record
            ReferencedEntityNotFoundError: a referenced record does not exist
        """
        allowed = self.definition.updatable_fields
        if allowed is not None:
            rejected = sorted(k for k in patch if k not in allowed and k != self.pk_name)
            if rejected:
                raise InvalidFieldError(
                    f"Field(s) cannot be updated on {self.label}: {', '.join(rejected)}", fields=rejected
                )

        current = await self.get(entity_id)

        merged = {name: getattr(current, name) for name in get_column_names(self.definition.model)}
        merged.update(patch)

        if merged[self.pk_name] != getattr(current, self.pk_name):
            logger.info("service.update.identity_changed", extra={"entity": self.label, "id": entity_id})
            raise IdentityImmutableError(f"{self.label} id cannot be changed", fields=[self.pk_name])

        try:
            updated = await self.repository.update(entity_id, **merged)
        except ReferencedEntityNotFoundError as exc:
            raise self._describe_reference_error(exc) from exc

        # The row can disappear between the fetch and the write
        if updated is None:
            raise NotFoundError(f"{self.label} not found")

        logger.info("service.update.success", extra={"entity": self.label, "id": entity_id})
        return updated

    async def delete(self, entity_id: Any) -> None:
        """
        Raises:
            NotFoundError: nothing was deleted (also on a second delete of the same id)
            EntityInUseError: other records still reference this one
        """
        if not await self.repository.delete(entity_id):
            raise NotFoundError(f"{self.label} not found")
        logger.info("service.delete.success", extra={"entity": self.label, "id": entity_id})

    # =================================================================================================================
    # Queries
    # =================================================================================================================

    async def get(self, entity_id: Any) -> ModelType:
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.label} not found")
        return entity

    async def get_all(self) -> list[ModelType]:
        """Every record, ordered by identity. An empty table is an empty list."""
        return await self.repository.get_all()

    async def run_report(self, query: ReportQuery, entity_id: Any = None) -> list[dict[str, Any]]:
        """
        Run a report in its dual mode.

        No id (or the 0 sentinel) reports every record; an id reports that
        record only and fails with NotFoundError when it does not exist.
        """
        if entity_id is None or entity_id == 0:
            return await query(None)

        if not await self.repository.exists(entity_id):
            raise NotFoundError(f"{self.label} not found")
        return await query(entity_id)

    # =================================================================================================================
    # Helpers
    # =================================================================================================================

    def _describe_reference_error(self, exc: ReferencedEntityNotFoundError) -> ReferencedEntityNotFoundError:
        """
        Rephrase a foreign-key failure in business terms, e.g. "warehouse not found".
        """
        labels = self.definition.reference_labels
        names = [labels.get(column, column) for column in exc.fields or []]
        if names:
            message = f"{' and '.join(names)} not found"
        elif exc.reference:
            message = f"{exc.reference} not found"
        else:
            message = f"{self.label} references a record that does not exist"

        logger.info(
            "service.reference_not_found",
            extra={"entity": self.label, "fields": exc.fields, "reference": exc.reference},
        )
        return ReferencedEntityNotFoundError(
            message, fields=exc.fields, constraint=exc.constraint, reference=exc.reference
        )
