"""
Generic CRUD route builder.

Each resource router is the same five endpoints over a different schema set:

    GET    ""              list        200 {"data": [...]}
    GET    "/{entity_id}"  get         200 {"data": {...}}
    POST   ""              create      201 {"data": {...}}
    PATCH  "/{entity_id}"  update      200 {"data": {...}}
    DELETE "/{entity_id}"  delete      204 (no body)

Report routes ("/reportSellers", ...) must be added to the router *before*
calling `add_crud_routes`, otherwise "/{entity_id}" captures them.
"""

from enum import Enum
from typing import Any, Callable, Iterable, Type

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel

from app.schemas.common import DataResponse, ErrorResponse
from app.services.entity_service import EntityService


class Operation(str, Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


ALL_OPERATIONS = frozenset(Operation)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Malformed id or immutable identity"},
    404: {"model": ErrorResponse, "description": "Not found"},
    409: {"model": ErrorResponse, "description": "Conflict or missing referenced record"},
    422: {"model": ErrorResponse, "description": "Validation failed"},
    500: {"model": ErrorResponse, "description": "Storage error"},
}

ENTITY_ID_DESCRIPTION = "Identity of the record"


def add_crud_routes(
    router: APIRouter,
    *,
    label: str,
    service_dependency: Callable[..., EntityService],
    read_schema: Type[BaseModel],
    create_schema: Type[BaseModel] | None = None,
    update_schema: Type[BaseModel] | None = None,
    operations: Iterable[Operation] = ALL_OPERATIONS,
) -> APIRouter:
    """
    Register the enabled CRUD endpoints on `router`.

    Args:
        router: Router carrying the resource prefix and tags.
        label: Human name used in OpenAPI summaries ("seller").
        service_dependency: Dependency returning the resource's EntityService.
        read_schema: Response schema built from the ORM object.
        create_schema: Request body for POST (required when CREATE is enabled).
        update_schema: Request body for PATCH (required when UPDATE is enabled).
        operations: Which endpoints to expose.
    """
    operations = frozenset(operations)

    if Operation.LIST in operations:

        @router.get(
            "",
            response_model=DataResponse[list[read_schema]],
            summary=f"List {label} records",
            responses={500: ERROR_RESPONSES[500]},
        )
        async def list_entities(service: EntityService = Depends(service_dependency)):
            entities = await service.get_all()
            return {"data": [read_schema.model_validate(e) for e in entities]}

    if Operation.GET in operations:

        @router.get(
            "/{entity_id}",
            response_model=DataResponse[read_schema],
            summary=f"Get a {label} by id",
            responses={code: ERROR_RESPONSES[code] for code in (400, 404, 500)},
        )
        async def get_entity(
            entity_id: int = Path(..., ge=1, description=ENTITY_ID_DESCRIPTION),
            service: EntityService = Depends(service_dependency),
        ):
            entity = await service.get(entity_id)
            return {"data": read_schema.model_validate(entity)}

    if Operation.CREATE in operations:
        if create_schema is None:
            raise ValueError(f"create_schema is required to expose create for {label}")

        @router.post(
            "",
            response_model=DataResponse[read_schema],
            status_code=status.HTTP_201_CREATED,
            summary=f"Create a {label}",
            responses={code: ERROR_RESPONSES[code] for code in (409, 422, 500)},
        )
        async def create_entity(
            payload: create_schema,
            service: EntityService = Depends(service_dependency),
        ):
            entity = await service.create(payload.model_dump(exclude_none=True))
            return {"data": read_schema.model_validate(entity)}

    if Operation.UPDATE in operations:
        if update_schema is None:
            raise ValueError(f"update_schema is required to expose update for {label}")

        @router.patch(
            "/{entity_id}",
            response_model=DataResponse[read_schema],
            summary=f"Update a {label}",
            responses=ERROR_RESPONSES,
        )
        async def update_entity(
            payload: update_schema,
            entity_id: int = Path(..., ge=1, description=ENTITY_ID_DESCRIPTION),
            service: EntityService = Depends(service_dependency),
        ):
            entity = await service.update(entity_id, payload.model_dump(exclude_unset=True))
            return {"data": read_schema.model_validate(entity)}

    if Operation.DELETE in operations:

        @router.delete(
            "/{entity_id}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
            summary=f"Delete a {label}",
            responses={code: ERROR_RESPONSES[code] for code in (400, 404, 409, 500)},
        )
        async def delete_entity(
            entity_id: int = Path(..., ge=1, description=ENTITY_ID_DESCRIPTION),
            service: EntityService = Depends(service_dependency),
        ):
            await service.delete(entity_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
