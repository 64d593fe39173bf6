from fastapi import APIRouter, Depends, Query

from app.api.v1.crud import ERROR_RESPONSES, add_crud_routes
from app.api.v1.dependencies import get_buyer_service
from app.schemas.buyer import BuyerCreate, BuyerPurchaseOrdersReport, BuyerRead, BuyerUpdate
from app.schemas.common import DataResponse
from app.services.entity_service import EntityService

router = APIRouter(prefix="/buyers", tags=["buyers"])


@router.get(
    "/reportPurchaseOrders",
    response_model=DataResponse[list[BuyerPurchaseOrdersReport]],
    summary="Count purchase orders per buyer",
    responses={code: ERROR_RESPONSES[code] for code in (400, 404, 500)},
)
async def report_purchase_orders(
    buyer_id: int | None = Query(None, alias="id", ge=0),
    service: EntityService = Depends(get_buyer_service),
):
    rows = await service.run_report(service.repository.report_purchase_orders, buyer_id)
    return {"data": rows}


add_crud_routes(
    router,
    label="buyer",
    service_dependency=get_buyer_service,
    read_schema=BuyerRead,
    create_schema=BuyerCreate,
    update_schema=BuyerUpdate,
)
