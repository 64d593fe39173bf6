from datetime import date, time
from sqlalchemy import Date, ForeignKey, Integer, Time
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class ProductBatch(Base):
    __tablename__ = "product_batches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    batch_number: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    current_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    initial_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    manufacturing_date: Mapped[date] = mapped_column(Date, nullable=False)
    manufacturing_hour: Mapped[time] = mapped_column(Time, nullable=False)
    minimum_temperature: Mapped[int] = mapped_column(Integer, nullable=False)

    # --- References ---
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.id"), nullable=False)
    section_id: Mapped[int] = mapped_column(Integer, ForeignKey("sections.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<ProductBatch(id={self.id!r}, batch_number={self.batch_number!r})>"
