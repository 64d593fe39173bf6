"""
Section repository: CRUD plus the products-per-section report.
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions.base import StorageError
from app.models.product_batch import ProductBatch
from app.models.section import Section
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class SectionRepository(BaseRepository[Section]):

    def __init__(self, db: AsyncSession):
        super().__init__(Section, db)

    async def report_products(self, section_id: int | None = None) -> list[dict[str, Any]]:
        """
        Stock held in each section.

        `products_count` is the sum of `current_quantity` over the batches
        stored in the section (0 when the section holds no batch).

        Returns:
            Rows of {"section_id", "section_number", "products_count"}.
        """
        query = (
            select(
                Section.id.label("section_id"),
                Section.section_number,
                func.coalesce(func.sum(ProductBatch.current_quantity), 0).label("products_count"),
            )
            .outerjoin(ProductBatch, ProductBatch.section_id == Section.id)
            .group_by(Section.id, Section.section_number)
            .order_by(Section.id)
        )
        if section_id is not None:
            query = query.where(Section.id == section_id)

        try:
            result = await self.db.execute(query)
            return [dict(row) for row in result.mappings().all()]
        except Exception as e:
            logger.exception("Error building section products report")
            raise StorageError("Failed to build section report") from e
