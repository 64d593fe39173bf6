from datetime import date

from .common import EntityId, NonEmptyStr, PayloadSchema, ReadSchema


class InboundOrderCreate(PayloadSchema):
    order_date: date
    order_number: NonEmptyStr
    employee_id: EntityId
    product_batch_id: EntityId
    warehouse_id: EntityId


class InboundOrderRead(ReadSchema):
    id: int
    order_date: date
    order_number: str
    employee_id: int
    product_batch_id: int
    warehouse_id: int
