from fastapi import APIRouter, Depends, Query

from app.api.v1.crud import ERROR_RESPONSES, add_crud_routes
from app.api.v1.dependencies import get_employee_service
from app.schemas.common import DataResponse
from app.schemas.employee import EmployeeCreate, EmployeeInboundOrdersReport, EmployeeRead, EmployeeUpdate
from app.services.entity_service import EntityService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get(
    "/reportInboundOrders",
    response_model=DataResponse[list[EmployeeInboundOrdersReport]],
    summary="Count inbound orders per employee",
    responses={code: ERROR_RESPONSES[code] for code in (400, 404, 500)},
)
async def report_inbound_orders(
    employee_id: int | None = Query(None, alias="id", ge=0),
    service: EntityService = Depends(get_employee_service),
):
    rows = await service.run_report(service.repository.report_inbound_orders, employee_id)
    return {"data": rows}


add_crud_routes(
    router,
    label="employee",
    service_dependency=get_employee_service,
    read_schema=EmployeeRead,
    create_schema=EmployeeCreate,
    update_schema=EmployeeUpdate,
)
