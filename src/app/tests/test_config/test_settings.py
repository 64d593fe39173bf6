import pytest

from app.config import Settings
from app.utils.pyproject import get_dependency_requirement, get_project_name


@pytest.mark.parametrize(
    "raw, expected",
    [("/api/v1", "/api/v1"), ("api/v1/", "/api/v1"), ("/", ""), ("", "")],
)
def test_api_prefix_is_normalized(raw, expected):
    assert Settings(API_PREFIX=raw).API_PREFIX == expected


def test_log_knobs_are_case_insensitive():
    settings = Settings(LOG_LEVEL="debug", LOG_FORMAT="JSON")

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "json"


def test_database_url_switches_to_test_database():
    base = dict(DB_USERNAME="wh", DB_PASSWORD="pw", DB_HOST="db", DB_PORT=5433, DB_NAME="warehouse")

    regular = Settings(**base)
    testing = Settings(**base, TESTING=True, TEST_DB_NAME="warehouse_test")

    assert regular.DATABASE_URL == "postgresql+asyncpg://wh:pw@db:5433/warehouse"
    assert testing.DATABASE_URL == "postgresql+asyncpg://wh:pw@db:5433/warehouse_test"


def test_project_metadata_from_pyproject():
    assert get_project_name() == "warehouse-api"
    assert get_dependency_requirement("fastapi").startswith("fastapi")


def test_env_is_case_insensitive():
    assert Settings(ENV=" Production").ENV == "production"
