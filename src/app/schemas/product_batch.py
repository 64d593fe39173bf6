from datetime import date, time

from pydantic import NonNegativeInt, PositiveInt

from .common import EntityId, PayloadSchema, ReadSchema


class ProductBatchCreate(PayloadSchema):
    batch_number: PositiveInt
    current_quantity: NonNegativeInt
    current_temperature: int
    due_date: date
    initial_quantity: NonNegativeInt
    manufacturing_date: date
    manufacturing_hour: time
    minimum_temperature: int
    product_id: EntityId
    section_id: EntityId


class ProductBatchRead(ReadSchema):
    id: int
    batch_number: int
    current_quantity: int
    current_temperature: int
    due_date: date
    initial_quantity: int
    manufacturing_date: date
    manufacturing_hour: time
    minimum_temperature: int
    product_id: int
    section_id: int
