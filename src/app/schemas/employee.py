from .common import EntityId, NonEmptyStr, PatchSchema, PayloadSchema, ReadSchema


class EmployeeCreate(PayloadSchema):
    card_number_id: NonEmptyStr
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    warehouse_id: EntityId


class EmployeeUpdate(PatchSchema):
    """The badge number is not part of an update."""
    id: int | None = None
    first_name: NonEmptyStr | None = None
    last_name: NonEmptyStr | None = None
    warehouse_id: EntityId | None = None


class EmployeeRead(ReadSchema):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int


class EmployeeInboundOrdersReport(ReadSchema):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int
    inbound_orders_count: int
