from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class Carrier(Base):
    """
    A transport company delivering to a locality.
    """
    __tablename__ = "carriers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    cid: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)
    locality_id: Mapped[str] = mapped_column(String(20), ForeignKey("localities.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<Carrier(id={self.id!r}, cid={self.cid!r})>"
