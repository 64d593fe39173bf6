"""
Product payloads. Dimensions, weight and rates are non-negative; the
recommended freezing temperature may be below zero.
"""

from pydantic import NonNegativeFloat

from .common import EntityId, NonEmptyStr, PatchSchema, PayloadSchema, ReadSchema


class ProductCreate(PayloadSchema):
    description: NonEmptyStr
    expiration_rate: NonNegativeFloat
    freezing_rate: NonNegativeFloat
    height: NonNegativeFloat
    length: NonNegativeFloat
    netweight: NonNegativeFloat
    product_code: NonEmptyStr
    recommended_freezing_temperature: float
    width: NonNegativeFloat
    product_type_id: EntityId
    seller_id: EntityId


class ProductUpdate(PatchSchema):
    id: int | None = None
    description: NonEmptyStr | None = None
    expiration_rate: NonNegativeFloat | None = None
    freezing_rate: NonNegativeFloat | None = None
    height: NonNegativeFloat | None = None
    length: NonNegativeFloat | None = None
    netweight: NonNegativeFloat | None = None
    product_code: NonEmptyStr | None = None
    recommended_freezing_temperature: float | None = None
    width: NonNegativeFloat | None = None
    product_type_id: EntityId | None = None
    seller_id: EntityId | None = None


class ProductRead(ReadSchema):
    id: int
    description: str
    expiration_rate: float
    freezing_rate: float
    height: float
    length: float
    netweight: float
    product_code: str
    recommended_freezing_temperature: float
    width: float
    product_type_id: int
    seller_id: int


class ProductRecordsReport(ReadSchema):
    product_id: int
    description: str
    records_count: int
