"""
Service dependencies for the v1 routers.

Every request gets its own `AsyncSession` (via `get_async_session`) and a
fresh service/repository pair bound to it; nothing is shared between requests.
"""

from typing import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.session import get_async_session
from app.services import definitions
from app.services.definitions import EntityDefinition
from app.services.entity_service import EntityService


def service_dependency(definition: EntityDefinition) -> Callable[..., EntityService]:
    """
    Build a FastAPI dependency yielding an `EntityService` for `definition`.

    Usage:
        @router.get("")
        async def list_sellers(service: EntityService = Depends(get_seller_service)):
            ...
    """

    async def _get_service(db: AsyncSession = Depends(get_async_session)) -> EntityService:
        return EntityService(definition.build_repository(db), definition)

    _get_service.__name__ = f"get_{definition.model.__tablename__}_service"
    return _get_service


get_locality_service = service_dependency(definitions.LOCALITY)
get_warehouse_service = service_dependency(definitions.WAREHOUSE)
get_product_type_service = service_dependency(definitions.PRODUCT_TYPE)
get_seller_service = service_dependency(definitions.SELLER)
get_product_service = service_dependency(definitions.PRODUCT)
get_section_service = service_dependency(definitions.SECTION)
get_product_batch_service = service_dependency(definitions.PRODUCT_BATCH)
get_product_record_service = service_dependency(definitions.PRODUCT_RECORD)
get_buyer_service = service_dependency(definitions.BUYER)
get_purchase_order_service = service_dependency(definitions.PURCHASE_ORDER)
get_carrier_service = service_dependency(definitions.CARRIER)
get_employee_service = service_dependency(definitions.EMPLOYEE)
get_inbound_order_service = service_dependency(definitions.INBOUND_ORDER)
