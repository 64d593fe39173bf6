from .common import NonEmptyStr, PayloadSchema, ReadSchema


class ProductTypeCreate(PayloadSchema):
    name: NonEmptyStr


class ProductTypeRead(ReadSchema):
    id: int
    name: str
