from datetime import date
from sqlalchemy import Date, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class ProductRecord(Base):
    """
    A price snapshot for a product. Records are append-only.
    """
    __tablename__ = "product_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Filled with the current date when the caller does not send one
    last_update_date: Mapped[date] = mapped_column(Date, default=date.today, nullable=False)

    purchase_price: Mapped[float] = mapped_column(Float, nullable=False)
    sale_price: Mapped[float] = mapped_column(Float, nullable=False)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<ProductRecord(id={self.id!r}, product_id={self.product_id!r})>"
