from fastapi import APIRouter

from app.api.v1.crud import Operation, add_crud_routes
from app.api.v1.dependencies import get_carrier_service
from app.schemas.carrier import CarrierCreate, CarrierRead

# Public path keeps the historical "carries" spelling
router = APIRouter(prefix="/carries", tags=["carriers"])

add_crud_routes(
    router,
    label="carrier",
    service_dependency=get_carrier_service,
    read_schema=CarrierRead,
    create_schema=CarrierCreate,
    operations={Operation.LIST, Operation.CREATE},
)
