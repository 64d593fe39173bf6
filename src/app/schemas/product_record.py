from datetime import date

from pydantic import NonNegativeFloat

from .common import EntityId, PayloadSchema, ReadSchema


class ProductRecordCreate(PayloadSchema):
    # Stamped with today's date when omitted
    last_update_date: date | None = None
    purchase_price: NonNegativeFloat
    sale_price: NonNegativeFloat
    product_id: EntityId


class ProductRecordRead(ReadSchema):
    id: int
    last_update_date: date
    purchase_price: float
    sale_price: float
    product_id: int
