"""
/localities: creation plus the sellers/carriers per locality reports.

Locality ids are caller-chosen codes, so the report filter is a string.
"""

from fastapi import APIRouter, Depends, Query

from app.api.v1.crud import ERROR_RESPONSES, Operation, add_crud_routes
from app.api.v1.dependencies import get_locality_service
from app.schemas.common import DataResponse
from app.schemas.locality import LocalityCarriersReport, LocalityCreate, LocalityRead, LocalitySellersReport
from app.services.entity_service import EntityService

router = APIRouter(prefix="/localities", tags=["localities"])

REPORT_RESPONSES = {code: ERROR_RESPONSES[code] for code in (400, 404, 500)}


@router.get(
    "/reportSellers",
    response_model=DataResponse[list[LocalitySellersReport]],
    summary="Count sellers per locality",
    responses=REPORT_RESPONSES,
)
async def report_sellers(
    locality_id: str | None = Query(None, alias="id", min_length=1, max_length=20),
    service: EntityService = Depends(get_locality_service),
):
    rows = await service.run_report(service.repository.report_sellers, locality_id)
    return {"data": rows}


@router.get(
    "/reportCarries",
    response_model=DataResponse[list[LocalityCarriersReport]],
    summary="Count carriers per locality",
    responses=REPORT_RESPONSES,
)
async def report_carriers(
    locality_id: str | None = Query(None, alias="id", min_length=1, max_length=20),
    service: EntityService = Depends(get_locality_service),
):
    rows = await service.run_report(service.repository.report_carriers, locality_id)
    return {"data": rows}


add_crud_routes(
    router,
    label="locality",
    service_dependency=get_locality_service,
    read_schema=LocalityRead,
    create_schema=LocalityCreate,
    operations={Operation.CREATE},
)
