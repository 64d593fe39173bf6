from pydantic import NonNegativeInt

from .common import NonEmptyStr, PatchSchema, PayloadSchema, ReadSchema


class WarehouseCreate(PayloadSchema):
    address: NonEmptyStr
    telephone: NonEmptyStr
    warehouse_code: NonEmptyStr
    minimum_capacity: NonNegativeInt
    minimum_temperature: int


class WarehouseUpdate(PatchSchema):
    id: int | None = None
    address: NonEmptyStr | None = None
    telephone: NonEmptyStr | None = None
    warehouse_code: NonEmptyStr | None = None
    minimum_capacity: NonNegativeInt | None = None
    minimum_temperature: int | None = None


class WarehouseRead(ReadSchema):
    id: int
    address: str
    telephone: str
    warehouse_code: str
    minimum_capacity: int
    minimum_temperature: int
