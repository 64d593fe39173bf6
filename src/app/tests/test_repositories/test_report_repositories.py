import pytest

from app.services import definitions
from app.repositories import (
    BuyerRepository,
    EmployeeRepository,
    LocalityRepository,
    ProductRepository,
    SectionRepository,
)


@pytest.mark.asyncio
class TestLocalityReports:

    async def test_locality_without_children_reports_zero(self, db_session, created_locality):
        """
        Behavior:
                - A locality with no sellers and no carriers is still listed, with counts of 0.

        Importance:
                - The reports use an outer join; an inner join would drop the row.
        """
        repo = LocalityRepository(db_session)

        sellers = await repo.report_sellers()
        carriers = await repo.report_carriers()

        assert sellers == [{"locality_id": "6700", "locality_name": "Villa Crespo", "sellers_count": 0}]
        assert carriers == [{"locality_id": "6700", "locality_name": "Villa Crespo", "carries_count": 0}]

    async def test_counts_and_filter(self, db_session, service_for, created_seller, created_carrier, seller_data):
        await service_for(definitions.SELLER).create(dict(seller_data, cid=2))
        await service_for(definitions.LOCALITY).create(
            {"id": "1000", "locality_name": "Palermo", "province_name": "Buenos Aires", "country_name": "Argentina"}
        )
        repo = LocalityRepository(db_session)

        everything = await repo.report_sellers()
        assert [(r["locality_id"], r["sellers_count"]) for r in everything] == [("1000", 0), ("6700", 2)]

        only_one = await repo.report_sellers("6700")
        assert len(only_one) == 1
        assert only_one[0]["sellers_count"] == 2

        carriers = await repo.report_carriers("6700")
        assert carriers[0]["carries_count"] == 1


@pytest.mark.asyncio
class TestSectionProductsReport:

    async def test_sums_current_quantity(self, db_session, service_for, created_product_batch, product_batch_data):
        """
        Behavior:
                - products_count is the sum of current_quantity over the section's batches.
        """
        await service_for(definitions.PRODUCT_BATCH).create(
            dict(product_batch_data, batch_number=11, current_quantity=25)
        )
        repo = SectionRepository(db_session)

        rows = await repo.report_products(created_product_batch.section_id)

        assert rows == [{"section_id": created_product_batch.section_id, "section_number": 3, "products_count": 75}]

    async def test_empty_section_reports_zero(self, db_session, created_section):
        repo = SectionRepository(db_session)

        rows = await repo.report_products()

        assert rows[0]["products_count"] == 0


@pytest.mark.asyncio
class TestProductRecordsReport:

    async def test_counts_records(self, db_session, service_for, created_product_record, product_record_data):
        await service_for(definitions.PRODUCT_RECORD).create(dict(product_record_data, sale_price=16.0))
        repo = ProductRepository(db_session)

        rows = await repo.report_records()

        assert rows == [
            {
                "product_id": created_product_record.product_id,
                "description": "Frozen peas 1kg",
                "records_count": 2,
            }
        ]


@pytest.mark.asyncio
class TestPeopleReports:

    async def test_buyer_purchase_orders(self, db_session, created_purchase_order, created_buyer):
        repo = BuyerRepository(db_session)

        rows = await repo.report_purchase_orders(created_buyer.id)

        assert rows == [
            {
                "id": created_buyer.id,
                "card_number_id": "B-1001",
                "first_name": "Ana",
                "last_name": "Suarez",
                "purchase_order_count": 1,
            }
        ]

    async def test_employee_inbound_orders(self, db_session, service_for, created_inbound_order, employee_data):
        idle = await service_for(definitions.EMPLOYEE).create(dict(employee_data, card_number_id="E-2002"))
        repo = EmployeeRepository(db_session)

        rows = await repo.report_inbound_orders()

        counts = {row["card_number_id"]: row["inbound_orders_count"] for row in rows}
        assert counts == {"E-2001": 1, "E-2002": 0}
        assert all(row["warehouse_id"] == idle.warehouse_id for row in rows)
