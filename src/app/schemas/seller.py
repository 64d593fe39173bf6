from pydantic import PositiveInt

from .common import NonEmptyStr, PatchSchema, PayloadSchema, ReadSchema


class SellerCreate(PayloadSchema):
    cid: PositiveInt
    company_name: NonEmptyStr
    address: NonEmptyStr
    telephone: NonEmptyStr
    locality_id: NonEmptyStr


class SellerUpdate(PatchSchema):
    id: int | None = None
    cid: PositiveInt | None = None
    company_name: NonEmptyStr | None = None
    address: NonEmptyStr | None = None
    telephone: NonEmptyStr | None = None
    locality_id: NonEmptyStr | None = None


class SellerRead(ReadSchema):
    id: int
    cid: int
    company_name: str
    address: str
    telephone: str
    locality_id: str
