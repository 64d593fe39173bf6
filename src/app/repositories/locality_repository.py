"""
Locality repository: CRUD plus the per-locality seller and carrier reports.
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions.base import StorageError
from app.models.carrier import Carrier
from app.models.locality import Locality
from app.models.seller import Seller
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class LocalityRepository(BaseRepository[Locality]):
    """
    Repository for Locality entity operations.

    Both reports count children through a LEFT OUTER JOIN, so a locality
    without sellers (or carriers) is reported with a count of 0.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Locality, db)

    # =================================================================================================================
    # Reports
    # =================================================================================================================

    async def report_sellers(self, locality_id: str | None = None) -> list[dict[str, Any]]:
        """
        Number of sellers per locality.

        Args:
            locality_id: Restrict the report to one locality; None reports every locality.

        Returns:
            Rows of {"locality_id", "locality_name", "sellers_count"}.
        """
        return await self._count_children(Seller, "sellers_count", locality_id)

    async def report_carriers(self, locality_id: str | None = None) -> list[dict[str, Any]]:
        """
        Number of carriers per locality, same shape as `report_sellers`
        with the count under "carries_count".
        """
        return await self._count_children(Carrier, "carries_count", locality_id)

    async def _count_children(self, child, count_label: str, locality_id: str | None) -> list[dict[str, Any]]:
        query = (
            select(
                Locality.id.label("locality_id"),
                Locality.locality_name,
                func.count(child.id).label(count_label),
            )
            .outerjoin(child, child.locality_id == Locality.id)
            .group_by(Locality.id, Locality.locality_name)
            .order_by(Locality.id)
        )
        if locality_id is not None:
            query = query.where(Locality.id == locality_id)

        try:
            result = await self.db.execute(query)
            rows = [dict(row) for row in result.mappings().all()]
        except Exception as e:
            logger.exception(f"Error building {count_label} report")
            raise StorageError("Failed to build locality report") from e

        logger.debug(
            "repo.report.success",
            extra={"model": self.model_name, "report": count_label, "rows": len(rows)},
        )
        return rows
