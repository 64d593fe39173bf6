from datetime import date

from pydantic import NonNegativeInt

from .common import EntityId, NonEmptyStr, PayloadSchema, ReadSchema


class PurchaseOrderCreate(PayloadSchema):
    order_number: NonEmptyStr
    order_date: date
    tracking_code: NonEmptyStr
    buyer_id: EntityId
    product_record_id: EntityId
    order_status_id: NonNegativeInt


class PurchaseOrderRead(ReadSchema):
    id: int
    order_number: str
    order_date: date
    tracking_code: str
    buyer_id: int
    product_record_id: int
    order_status_id: int
