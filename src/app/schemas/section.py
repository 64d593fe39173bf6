from pydantic import NonNegativeInt, PositiveInt

from .common import EntityId, PatchSchema, PayloadSchema, ReadSchema


class SectionCreate(PayloadSchema):
    section_number: PositiveInt
    current_temperature: int
    minimum_temperature: int
    current_capacity: NonNegativeInt
    minimum_capacity: NonNegativeInt
    maximum_capacity: NonNegativeInt
    warehouse_id: EntityId
    product_type_id: EntityId


class SectionUpdate(PatchSchema):
    id: int | None = None
    section_number: PositiveInt | None = None
    current_temperature: int | None = None
    minimum_temperature: int | None = None
    current_capacity: NonNegativeInt | None = None
    minimum_capacity: NonNegativeInt | None = None
    maximum_capacity: NonNegativeInt | None = None
    warehouse_id: EntityId | None = None
    product_type_id: EntityId | None = None


class SectionRead(ReadSchema):
    id: int
    section_number: int
    current_temperature: int
    minimum_temperature: int
    current_capacity: int
    minimum_capacity: int
    maximum_capacity: int
    warehouse_id: int
    product_type_id: int


class SectionProductsReport(ReadSchema):
    section_id: int
    section_number: int
    products_count: int
