"""
Buyer repository: CRUD plus the purchase-orders-per-buyer report.
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions.base import StorageError
from app.models.buyer import Buyer
from app.models.purchase_order import PurchaseOrder
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class BuyerRepository(BaseRepository[Buyer]):

    def __init__(self, db: AsyncSession):
        super().__init__(Buyer, db)

    async def report_purchase_orders(self, buyer_id: int | None = None) -> list[dict[str, Any]]:
        """
        The buyer's own fields plus `purchase_order_count`.
        """
        query = (
            select(
                Buyer.id,
                Buyer.card_number_id,
                Buyer.first_name,
                Buyer.last_name,
                func.count(PurchaseOrder.id).label("purchase_order_count"),
            )
            .outerjoin(PurchaseOrder, PurchaseOrder.buyer_id == Buyer.id)
            .group_by(Buyer.id, Buyer.card_number_id, Buyer.first_name, Buyer.last_name)
            .order_by(Buyer.id)
        )
        if buyer_id is not None:
            query = query.where(Buyer.id == buyer_id)

        try:
            result = await self.db.execute(query)
            return [dict(row) for row in result.mappings().all()]
        except Exception as e:
            logger.exception("Error building purchase orders report")
            raise StorageError("Failed to build buyer report") from e
