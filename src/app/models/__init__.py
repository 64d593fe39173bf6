r"""
Centralized access to all database models of the warehouse API.

Importing this package registers every table with `Base.metadata`, which
`create_all` and the constraint-name lookup in `app.exceptions.mapper` rely on.

    from app.models import Seller, Warehouse, Section
"""

from .locality import Locality
from .warehouse import Warehouse
from .product_type import ProductType
from .seller import Seller
from .product import Product
from .section import Section
from .product_batch import ProductBatch
from .product_record import ProductRecord
from .buyer import Buyer
from .purchase_order import PurchaseOrder
from .carrier import Carrier
from .employee import Employee
from .inbound_order import InboundOrder

__all__ = [
    "Locality",
    "Warehouse",
    "ProductType",
    "Seller",
    "Product",
    "Section",
    "ProductBatch",
    "ProductRecord",
    "Buyer",
    "PurchaseOrder",
    "Carrier",
    "Employee",
    "InboundOrder",
]
