from pydantic import Field

from .common import NonEmptyStr, PayloadSchema, ReadSchema


class LocalityCreate(PayloadSchema):
    # Postal-style code chosen by the caller, e.g. "6701"
    id: NonEmptyStr = Field(..., max_length=20)
    locality_name: NonEmptyStr
    province_name: NonEmptyStr
    country_name: NonEmptyStr


class LocalityRead(ReadSchema):
    id: str
    locality_name: str
    province_name: str
    country_name: str


class LocalitySellersReport(ReadSchema):
    locality_id: str
    locality_name: str
    sellers_count: int


class LocalityCarriersReport(ReadSchema):
    locality_id: str
    locality_name: str
    carries_count: int
