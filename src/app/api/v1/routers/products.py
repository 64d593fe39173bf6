"""
/products: CRUD, the records-per-product report and product type creation.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.crud import ERROR_RESPONSES, add_crud_routes
from app.api.v1.dependencies import get_product_service, get_product_type_service
from app.schemas.common import DataResponse
from app.schemas.product import ProductCreate, ProductRead, ProductRecordsReport, ProductUpdate
from app.schemas.product_type import ProductTypeCreate, ProductTypeRead
from app.services.entity_service import EntityService

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "/reportRecords",
    response_model=DataResponse[list[ProductRecordsReport]],
    summary="Count product records per product",
    responses={code: ERROR_RESPONSES[code] for code in (400, 404, 500)},
)
async def report_records(
    product_id: int | None = Query(None, alias="id", ge=0),
    service: EntityService = Depends(get_product_service),
):
    rows = await service.run_report(service.repository.report_records, product_id)
    return {"data": rows}


@router.post(
    "/type",
    response_model=DataResponse[ProductTypeRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create a product type",
    responses={code: ERROR_RESPONSES[code] for code in (409, 422, 500)},
)
async def create_product_type(
    payload: ProductTypeCreate,
    service: EntityService = Depends(get_product_type_service),
):
    product_type = await service.create(payload.model_dump())
    return {"data": ProductTypeRead.model_validate(product_type)}


add_crud_routes(
    router,
    label="product",
    service_dependency=get_product_service,
    read_schema=ProductRead,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
)
