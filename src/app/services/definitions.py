"""
Per-entity configuration consumed by `EntityService`.

Every resource of the API is the same validated-CRUD core; what differs
between sellers, sections or employees is captured here as data: the model,
a human label, how each foreign key is named in messages, which fields may
be patched, and which repository serves the reports.
"""

from dataclasses import dataclass, field
from typing import Type

from app.database.base import Base
from app.models import (
    Buyer,
    Carrier,
    Employee,
    InboundOrder,
    Locality,
    Product,
    ProductBatch,
    ProductRecord,
    ProductType,
    PurchaseOrder,
    Section,
    Seller,
    Warehouse,
)
from app.repositories import (
    BaseRepository,
    BuyerRepository,
    EmployeeRepository,
    LocalityRepository,
    ProductRepository,
    SectionRepository,
)


@dataclass(frozen=True)
class EntityDefinition:
    """
    Attributes:
        model: SQLAlchemy model class.
        label: Human name used in error messages ("seller", "product batch").
        reference_labels: Foreign-key column -> human name of the referenced entity.
        updatable_fields: Fields a patch may carry. None allows every non-identity attribute.
        repository_class: Repository to instantiate; subclasses add report queries.
    """
    model: Type[Base]
    label: str
    reference_labels: dict[str, str] = field(default_factory=dict)
    updatable_fields: frozenset[str] | None = None
    repository_class: Type[BaseRepository] = BaseRepository

    def build_repository(self, db) -> BaseRepository:
        if self.repository_class is BaseRepository:
            return BaseRepository(self.model, db)
        return self.repository_class(db)


LOCALITY = EntityDefinition(
    model=Locality,
    label="locality",
    repository_class=LocalityRepository,
)

WAREHOUSE = EntityDefinition(model=Warehouse, label="warehouse")

PRODUCT_TYPE = EntityDefinition(model=ProductType, label="product type")

SELLER = EntityDefinition(
    model=Seller,
    label="seller",
    reference_labels={"locality_id": "locality"},
)

PRODUCT = EntityDefinition(
    model=Product,
    label="product",
    reference_labels={"product_type_id": "product type", "seller_id": "seller"},
    repository_class=ProductRepository,
)

SECTION = EntityDefinition(
    model=Section,
    label="section",
    reference_labels={"warehouse_id": "warehouse", "product_type_id": "product type"},
    repository_class=SectionRepository,
)

PRODUCT_BATCH = EntityDefinition(
    model=ProductBatch,
    label="product batch",
    reference_labels={"product_id": "product", "section_id": "section"},
)

PRODUCT_RECORD = EntityDefinition(
    model=ProductRecord,
    label="product record",
    reference_labels={"product_id": "product"},
)

BUYER = EntityDefinition(
    model=Buyer,
    label="buyer",
    repository_class=BuyerRepository,
)

PURCHASE_ORDER = EntityDefinition(
    model=PurchaseOrder,
    label="purchase order",
    reference_labels={"buyer_id": "buyer", "product_record_id": "product record"},
)

CARRIER = EntityDefinition(
    model=Carrier,
    label="carrier",
    reference_labels={"locality_id": "locality"},
)

# Badge number is fixed once issued
EMPLOYEE = EntityDefinition(
    model=Employee,
    label="employee",
    reference_labels={"warehouse_id": "warehouse"},
    updatable_fields=frozenset({"first_name", "last_name", "warehouse_id"}),
    repository_class=EmployeeRepository,
)

INBOUND_ORDER = EntityDefinition(
    model=InboundOrder,
    label="inbound order",
    reference_labels={
        "employee_id": "employee",
        "product_batch_id": "product batch",
        "warehouse_id": "warehouse",
    },
)
