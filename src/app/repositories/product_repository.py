"""
Product repository: CRUD plus the price-records-per-product report.
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions.base import StorageError
from app.models.product import Product
from app.models.product_record import ProductRecord
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ProductRepository(BaseRepository[Product]):

    def __init__(self, db: AsyncSession):
        super().__init__(Product, db)

    async def report_records(self, product_id: int | None = None) -> list[dict[str, Any]]:
        """
        Number of product records (price snapshots) per product.

        Returns:
            Rows of {"product_id", "description", "records_count"}.
        """
        query = (
            select(
                Product.id.label("product_id"),
                Product.description,
                func.count(ProductRecord.id).label("records_count"),
            )
            .outerjoin(ProductRecord, ProductRecord.product_id == Product.id)
            .group_by(Product.id, Product.description)
            .order_by(Product.id)
        )
        if product_id is not None:
            query = query.where(Product.id == product_id)

        try:
            result = await self.db.execute(query)
            return [dict(row) for row in result.mappings().all()]
        except Exception as e:
            logger.exception("Error building product records report")
            raise StorageError("Failed to build product report") from e
