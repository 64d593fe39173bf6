"""
Core pytest configuration for the entire test suite.

Only the database setup and logging installation live here; domain fixtures
are defined in tests/test_fixtures/ and imported at the bottom of this file
so every test module can use them without importing:

- tests/test_fixtures/entity_fixtures.py    sample payloads and created rows per entity
- tests/test_fixtures/api_fixtures.py       httpx client bound to the ASGI app
"""

from __future__ import annotations

import os
import logging
from urllib.parse import urlparse
from typing import AsyncGenerator

# Silence chatty third-party loggers before app modules import them
NOISY_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "aiosqlite",
    "asyncio",
    "httpx",
    "httpcore",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest
from pytest import FixtureRequest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.database.base import Base
from app.database.session import build_engine
import app.models  # noqa: F401  registers every table with Base.metadata
from app.config import get_settings

settings = get_settings()

from app.core.logging.builder import setup_logging, stop_queue_logging

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def configure_logging(request: FixtureRequest):
    """
    Install the application's dictConfig logging once for the test session.

    dictConfig replaces root handlers, so pytest's capture handler is attached
    again afterwards to keep `caplog.records` working.
    """
    setup_logging(settings)

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)

    yield

    stop_queue_logging()


# ------------------------------------------------------------------------------------------------
# Test database URL
# ------------------------------------------------------------------------------------------------


def safe_log_db_url(db_url: str) -> str:
    """Database URL without credentials, for logging."""
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname or ''}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url() -> str:
    """
    Pick the database used by the test run.

    1. TEST_DATABASE_URL environment variable (CI override)
    2. the app's DATABASE_URL when TESTING=true and TEST_DB_NAME is set
    3. a local SQLite file through aiosqlite
    """
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url

    if settings.TESTING and settings.TEST_DB_NAME:
        return settings.DATABASE_URL

    return "sqlite+aiosqlite:///./test_database.db"


TEST_DATABASE_URL = get_test_database_url()
logger.info(f"Using test DB: {safe_log_db_url(TEST_DATABASE_URL)}")


# ------------------------------------------------------------------------------------------------
# Database fixtures
# ------------------------------------------------------------------------------------------------


@pytest.fixture(scope="session")
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    # build_engine switches on SQLite foreign keys, same as the application
    engine = build_engine(TEST_DATABASE_URL)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture()
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    Transaction-per-test session.

    The session joins an outer transaction that is rolled back when the test
    ends. `join_transaction_mode="create_savepoint"` turns any commit() made by
    code under test into a SAVEPOINT release, so nothing ever reaches the
    database and tests stay isolated.
    """
    async with async_engine.connect() as connection:
        await connection.begin()

        session = AsyncSession(
            bind=connection,
            expire_on_commit=False,
            join_transaction_mode="create_savepoint",
        )
        try:
            yield session
        finally:
            await session.close()
            await connection.rollback()


# Domain fixtures
from .test_fixtures.entity_fixtures import (  # noqa: E402,F401
    service_for,
    locality_data,
    created_locality,
    warehouse_data,
    created_warehouse,
    product_type_data,
    created_product_type,
    seller_data,
    created_seller,
    product_data,
    created_product,
    section_data,
    created_section,
    product_batch_data,
    created_product_batch,
    product_record_data,
    created_product_record,
    buyer_data,
    created_buyer,
    purchase_order_data,
    created_purchase_order,
    carrier_data,
    created_carrier,
    employee_data,
    created_employee,
    inbound_order_data,
    created_inbound_order,
)
from .test_fixtures.api_fixtures import api_client  # noqa: E402,F401
