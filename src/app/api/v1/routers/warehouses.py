from fastapi import APIRouter

from app.api.v1.crud import add_crud_routes
from app.api.v1.dependencies import get_warehouse_service
from app.schemas.warehouse import WarehouseCreate, WarehouseRead, WarehouseUpdate

router = APIRouter(prefix="/warehouses", tags=["warehouses"])

add_crud_routes(
    router,
    label="warehouse",
    service_dependency=get_warehouse_service,
    read_schema=WarehouseRead,
    create_schema=WarehouseCreate,
    update_schema=WarehouseUpdate,
)
