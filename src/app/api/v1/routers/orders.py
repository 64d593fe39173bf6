"""
Create-only resources: product batches, product records, purchase orders
and inbound orders.
"""

from fastapi import APIRouter

from app.api.v1.crud import Operation, add_crud_routes
from app.api.v1.dependencies import (
    get_inbound_order_service,
    get_product_batch_service,
    get_product_record_service,
    get_purchase_order_service,
)
from app.schemas.inbound_order import InboundOrderCreate, InboundOrderRead
from app.schemas.product_batch import ProductBatchCreate, ProductBatchRead
from app.schemas.product_record import ProductRecordCreate, ProductRecordRead
from app.schemas.purchase_order import PurchaseOrderCreate, PurchaseOrderRead

CREATE_ONLY = {Operation.CREATE}

product_batches_router = add_crud_routes(
    APIRouter(prefix="/productBatches", tags=["product batches"]),
    label="product batch",
    service_dependency=get_product_batch_service,
    read_schema=ProductBatchRead,
    create_schema=ProductBatchCreate,
    operations=CREATE_ONLY,
)

product_records_router = add_crud_routes(
    APIRouter(prefix="/productRecords", tags=["product records"]),
    label="product record",
    service_dependency=get_product_record_service,
    read_schema=ProductRecordRead,
    create_schema=ProductRecordCreate,
    operations=CREATE_ONLY,
)

purchase_orders_router = add_crud_routes(
    APIRouter(prefix="/purchaseorders", tags=["purchase orders"]),
    label="purchase order",
    service_dependency=get_purchase_order_service,
    read_schema=PurchaseOrderRead,
    create_schema=PurchaseOrderCreate,
    operations=CREATE_ONLY,
)

inbound_orders_router = add_crud_routes(
    APIRouter(prefix="/inboundOrders", tags=["inbound orders"]),
    label="inbound order",
    service_dependency=get_inbound_order_service,
    read_schema=InboundOrderRead,
    create_schema=InboundOrderCreate,
    operations=CREATE_ONLY,
)
