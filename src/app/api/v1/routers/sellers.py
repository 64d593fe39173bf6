from fastapi import APIRouter

from app.api.v1.crud import add_crud_routes
from app.api.v1.dependencies import get_seller_service
from app.schemas.seller import SellerCreate, SellerRead, SellerUpdate

router = APIRouter(prefix="/sellers", tags=["sellers"])

add_crud_routes(
    router,
    label="seller",
    service_dependency=get_seller_service,
    read_schema=SellerRead,
    create_schema=SellerCreate,
    update_schema=SellerUpdate,
)
