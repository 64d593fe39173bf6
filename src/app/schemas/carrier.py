from .common import NonEmptyStr, PayloadSchema, ReadSchema


class CarrierCreate(PayloadSchema):
    cid: NonEmptyStr
    company_name: NonEmptyStr
    address: NonEmptyStr
    telephone: NonEmptyStr
    locality_id: NonEmptyStr


class CarrierRead(ReadSchema):
    id: int
    cid: str
    company_name: str
    address: str
    telephone: str
    locality_id: str
