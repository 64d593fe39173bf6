from fastapi import APIRouter, Depends, Query

from app.api.v1.crud import ERROR_RESPONSES, add_crud_routes
from app.api.v1.dependencies import get_section_service
from app.schemas.common import DataResponse
from app.schemas.section import SectionCreate, SectionProductsReport, SectionRead, SectionUpdate
from app.services.entity_service import EntityService

router = APIRouter(prefix="/sections", tags=["sections"])


@router.get(
    "/reportProducts",
    response_model=DataResponse[list[SectionProductsReport]],
    summary="Stock held per section",
    responses={code: ERROR_RESPONSES[code] for code in (400, 404, 500)},
)
async def report_products(
    section_id: int | None = Query(None, alias="id", ge=0),
    service: EntityService = Depends(get_section_service),
):
    rows = await service.run_report(service.repository.report_products, section_id)
    return {"data": rows}


add_crud_routes(
    router,
    label="section",
    service_dependency=get_section_service,
    read_schema=SectionRead,
    create_schema=SectionCreate,
    update_schema=SectionUpdate,
)
