from .common import NonEmptyStr, PatchSchema, PayloadSchema, ReadSchema


class BuyerCreate(PayloadSchema):
    card_number_id: NonEmptyStr
    first_name: NonEmptyStr
    last_name: NonEmptyStr


class BuyerUpdate(PatchSchema):
    id: int | None = None
    card_number_id: NonEmptyStr | None = None
    first_name: NonEmptyStr | None = None
    last_name: NonEmptyStr | None = None


class BuyerRead(ReadSchema):
    id: int
    card_number_id: str
    first_name: str
    last_name: str


class BuyerPurchaseOrdersReport(ReadSchema):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    purchase_order_count: int
