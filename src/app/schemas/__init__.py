"""
Request and response schemas (pydantic v2).

`*Create` / `*Update` validate request bodies at the boundary, `*Read`
serialize ORM objects, `*Report` describe the report rows.
"""

from .common import DataResponse, ErrorResponse
from .buyer import BuyerCreate, BuyerPurchaseOrdersReport, BuyerRead, BuyerUpdate
from .carrier import CarrierCreate, CarrierRead
from .employee import EmployeeCreate, EmployeeInboundOrdersReport, EmployeeRead, EmployeeUpdate
from .inbound_order import InboundOrderCreate, InboundOrderRead
from .locality import LocalityCarriersReport, LocalityCreate, LocalityRead, LocalitySellersReport
from .product import ProductCreate, ProductRead, ProductRecordsReport, ProductUpdate
from .product_batch import ProductBatchCreate, ProductBatchRead
from .product_record import ProductRecordCreate, ProductRecordRead
from .product_type import ProductTypeCreate, ProductTypeRead
from .purchase_order import PurchaseOrderCreate, PurchaseOrderRead
from .section import SectionCreate, SectionProductsReport, SectionRead, SectionUpdate
from .seller import SellerCreate, SellerRead, SellerUpdate
from .warehouse import WarehouseCreate, WarehouseRead, WarehouseUpdate

__all__ = [
    "DataResponse",
    "ErrorResponse",
    "BuyerCreate",
    "BuyerPurchaseOrdersReport",
    "BuyerRead",
    "BuyerUpdate",
    "CarrierCreate",
    "CarrierRead",
    "EmployeeCreate",
    "EmployeeInboundOrdersReport",
    "EmployeeRead",
    "EmployeeUpdate",
    "InboundOrderCreate",
    "InboundOrderRead",
    "LocalityCarriersReport",
    "LocalityCreate",
    "LocalityRead",
    "LocalitySellersReport",
    "ProductCreate",
    "ProductRead",
    "ProductRecordsReport",
    "ProductUpdate",
    "ProductBatchCreate",
    "ProductBatchRead",
    "ProductRecordCreate",
    "ProductRecordRead",
    "ProductTypeCreate",
    "ProductTypeRead",
    "PurchaseOrderCreate",
    "PurchaseOrderRead",
    "SectionCreate",
    "SectionProductsReport",
    "SectionRead",
    "SectionUpdate",
    "SellerCreate",
    "SellerRead",
    "SellerUpdate",
    "WarehouseCreate",
    "WarehouseRead",
    "WarehouseUpdate",
]
