from datetime import date
from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    order_date: Mapped[date] = mapped_column(Date, nullable=False)
    tracking_code: Mapped[str] = mapped_column(String(100), nullable=False)

    # --- References ---
    buyer_id: Mapped[int] = mapped_column(Integer, ForeignKey("buyers.id"), nullable=False)
    product_record_id: Mapped[int] = mapped_column(Integer, ForeignKey("product_records.id"), nullable=False)

    # Status codes are owned by another system; stored as-is
    order_status_id: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<PurchaseOrder(id={self.id!r}, order_number={self.order_number!r})>"
