"""Collection Routes — the five CRUD endpoints, built once per ResourceDefinition.

Invariants:
    - POST /{collection} -> 201 + resource; GET /{collection} -> 200 + {data, limit, offset, count}
    - GET /{collection}/{id} -> 200 + resource; PUT and DELETE -> 204 with empty body
    - PUT is only mounted for definitions with an update schema (logs have none -> 405)
    - limit/offset parsed leniently and clamped here, and again by the service
    - Every failure carries the definition's fixed operation description

Design Decisions:
    - Body and response types come from the definition; FastAPI reads the annotations
      of the closures, so validation and OpenAPI stay per-collection
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from apm.api.dependencies import describe_failure, get_services, require_id
from apm.core.pagination import parse_page
from apm.schemas.common import ErrorResponse, ListEnvelope
from apm.services.crud_service import CrudService
from apm.services.registry import ServiceContainer
from apm.services.resources import COLLECTIONS, ResourceDefinition

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def build_collection_router(definition: ResourceDefinition) -> APIRouter:
    """Router with create/list/get/update/delete for one collection."""
    router = APIRouter(
        prefix=definition.path, tags=[definition.name], responses=_ERROR_RESPONSES,
    )
    create_schema = definition.create_schema
    update_schema = definition.update_schema
    response_schema = definition.response_schema

    def service(services: ServiceContainer = Depends(get_services)) -> CrudService:
        return services.collection(definition.name)

    @router.post(
        "", response_model=response_schema,
        status_code=status.HTTP_201_CREATED, name=f"{definition.name}:create",
    )
    async def create_record(body: create_schema, svc: CrudService = Depends(service)):
        with describe_failure(definition.describe_failure("create")):
            return await svc.create(body)

    @router.get(
        "", response_model=ListEnvelope[response_schema], name=f"{definition.name}:list",
    )
    async def list_records(
        limit: str | None = Query(None),
        offset: str | None = Query(None),
        svc: CrudService = Depends(service),
    ):
        page = parse_page(limit, offset)
        with describe_failure(definition.describe_failure("list")):
            data = await svc.list(page.limit, page.offset)
        return {
            "data": data,
            "limit": page.limit,
            "offset": page.offset,
            "count": len(data),
        }

    @router.get(
        "/{record_id}", response_model=response_schema, name=f"{definition.name}:get",
    )
    async def get_record(record_id: str, svc: CrudService = Depends(service)):
        with describe_failure(definition.describe_failure("get")):
            return await svc.get_by_id(require_id(record_id))

    if update_schema is not None:
        @router.put(
            "/{record_id}", status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response, name=f"{definition.name}:update",
        )
        async def update_record(
            record_id: str, body: update_schema, svc: CrudService = Depends(service),
        ):
            with describe_failure(definition.describe_failure("update")):
                await svc.update(require_id(record_id), body)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{record_id}", status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response, name=f"{definition.name}:delete",
    )
    async def delete_record(record_id: str, svc: CrudService = Depends(service)):
        with describe_failure(definition.describe_failure("delete")):
            await svc.delete(require_id(record_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


def build_api_router() -> APIRouter:
    """Mount every collection under the versioned prefix."""
    api_v1 = APIRouter(prefix=API_V1_PREFIX)
    for definition in COLLECTIONS:
        api_v1.include_router(build_collection_router(definition))
    logger.debug(f"Mounted {len(COLLECTIONS)} collections under {API_V1_PREFIX}")
    return api_v1
