from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class Warehouse(Base):
    __tablename__ = "warehouses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)

    # Business code shown on labels, unique across warehouses
    warehouse_code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    minimum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_temperature: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Warehouse(id={self.id!r}, warehouse_code={self.warehouse_code!r})>"
