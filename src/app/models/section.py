from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class Section(Base):
    """
    A storage section inside a warehouse, dedicated to one product type.
    """
    __tablename__ = "sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    section_number: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    current_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    current_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    maximum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)

    # --- References ---
    warehouse_id: Mapped[int] = mapped_column(Integer, ForeignKey("warehouses.id"), nullable=False)
    product_type_id: Mapped[int] = mapped_column(Integer, ForeignKey("product_types.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<Section(id={self.id!r}, section_number={self.section_number!r})>"
