from datetime import date
from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class InboundOrder(Base):
    """
    Receipt of a product batch into a warehouse, registered by an employee.
    """
    __tablename__ = "inbound_orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_date: Mapped[date] = mapped_column(Date, nullable=False)
    order_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    # --- References ---
    employee_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id"), nullable=False)
    product_batch_id: Mapped[int] = mapped_column(Integer, ForeignKey("product_batches.id"), nullable=False)
    warehouse_id: Mapped[int] = mapped_column(Integer, ForeignKey("warehouses.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<InboundOrder(id={self.id!r}, order_number={self.order_number!r})>"
