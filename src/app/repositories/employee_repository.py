"""
Employee repository: CRUD plus the inbound-orders-per-employee report.
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions.base import StorageError
from app.models.employee import Employee
from app.models.inbound_order import InboundOrder
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class EmployeeRepository(BaseRepository[Employee]):

    def __init__(self, db: AsyncSession):
        super().__init__(Employee, db)

    async def report_inbound_orders(self, employee_id: int | None = None) -> list[dict[str, Any]]:
        """
        Number of inbound orders registered by each employee.

        Returns:
            Rows of {"id", "card_number_id", "first_name", "last_name",
            "warehouse_id", "inbound_orders_count"}.
        """
        query = (
            select(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
                func.count(InboundOrder.id).label("inbound_orders_count"),
            )
            .outerjoin(InboundOrder, InboundOrder.employee_id == Employee.id)
            .group_by(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
            )
            .order_by(Employee.id)
        )
        if employee_id is not None:
            query = query.where(Employee.id == employee_id)

        try:
            result = await self.db.execute(query)
            return [dict(row) for row in result.mappings().all()]
        except Exception as e:
            logger.exception("Error building inbound orders report")
            raise StorageError("Failed to build employee report") from e
