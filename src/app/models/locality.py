from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class Locality(Base):
    """
    A locality (city/district) sellers and carriers operate from.

    The identity is a caller-supplied code such as "6701", not a store-generated number.
    """
    __tablename__ = "localities"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    locality_name: Mapped[str] = mapped_column(String(100), nullable=False)
    province_name: Mapped[str] = mapped_column(String(100), nullable=False)
    country_name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Locality(id={self.id!r}, locality_name={self.locality_name!r})>"
