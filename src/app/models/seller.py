from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class Seller(Base):
    """
    A company that supplies products to the warehouses.
    """
    __tablename__ = "sellers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Company identifier (must be unique and non-null)
    cid: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)

    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)
    locality_id: Mapped[str] = mapped_column(String(20), ForeignKey("localities.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<Seller(id={self.id!r}, cid={self.cid!r}, company_name={self.company_name!r})>"
