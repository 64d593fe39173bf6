from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.database.base import Base


class Product(Base):
    """
    SQLAlchemy model for Product.

    Dimensions and rates are stored as plain floats; units are a client concern.
    """
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    expiration_rate: Mapped[float] = mapped_column(Float, nullable=False)
    freezing_rate: Mapped[float] = mapped_column(Float, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)
    length: Mapped[float] = mapped_column(Float, nullable=False)
    netweight: Mapped[float] = mapped_column(Float, nullable=False)

    # Catalogue code (must be unique and non-null)
    product_code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    recommended_freezing_temperature: Mapped[float] = mapped_column(Float, nullable=False)
    width: Mapped[float] = mapped_column(Float, nullable=False)

    # --- References ---
    product_type_id: Mapped[int] = mapped_column(Integer, ForeignKey("product_types.id"), nullable=False)
    seller_id: Mapped[int] = mapped_column(Integer, ForeignKey("sellers.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<Product(id={self.id!r}, product_code={self.product_code!r})>"
