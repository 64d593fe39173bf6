"""
Tests for the constraint classifier and the integrity-error mapper.

Driver errors are simulated with small fake exception objects carrying the
same attributes the real drivers expose (pgcode/diag, MySQL args, sqlite_errorcode),
wrapped in a real sqlalchemy IntegrityError.
"""

from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

import app.models  # noqa: F401  constraint names are resolved from Base.metadata
from app.exceptions.base import (
    DuplicateError,
    ReferencedEntityNotFoundError,
    RepositoryError,
    StorageError,
    ValidationFailedError,
)
from app.exceptions.integrity_classifier import (
    CheckConstraintError,
    ForeignKeyConstraintError,
    NotNullConstraintError,
    UniqueConstraintError,
    UnknownIntegrityError,
    classify_integrity_error,
)
from app.exceptions.mapper import (
    db_error_handler,
    raise_mapped_integrity_error,
    resolve_constraint,
)


class FakePostgresError(Exception):
    def __init__(self, message, pgcode, constraint_name=None):
        super().__init__(message)
        self.pgcode = pgcode
        self.diag = SimpleNamespace(constraint_name=constraint_name)


class FakeSQLiteError(Exception):
    def __init__(self, message, code):
        super().__init__(message)
        self.sqlite_errorcode = code


def integrity_error(orig) -> IntegrityError:
    return IntegrityError("INSERT INTO t VALUES (?)", {}, orig)


class TestClassifyIntegrityError:

    @pytest.mark.parametrize(
        "pgcode, expected",
        [
            ("23505", UniqueConstraintError),
            ("23502", NotNullConstraintError),
            ("23503", ForeignKeyConstraintError),
            ("23514", CheckConstraintError),
            ("23P01", UnknownIntegrityError),
        ],
    )
    def test_postgres_sqlstate(self, pgcode, expected):
        """
        Behavior:
                - SQLSTATE decides the kind; the constraint name comes from diag.

        Importance:
                - Classification must rely on native codes, not on message wording.
        """
        exc = integrity_error(FakePostgresError("boom", pgcode, constraint_name="some_constraint"))

        exc_cls, constraint = classify_integrity_error(exc)

        assert exc_cls is expected
        assert constraint == "some_constraint"

    def test_postgres_constraint_name_from_driver_cause(self):
        """
        Behavior:
                - asyncpg's adapter keeps the driver exception as __cause__; its
                  constraint_name is used when diag is missing.
        """

        class DriverError(Exception):
            constraint_name = "fk_sections_warehouse_id_warehouses"

        orig = Exception("insert or update violates foreign key constraint")
        orig.pgcode = "23503"
        orig.__cause__ = DriverError()

        exc_cls, constraint = classify_integrity_error(integrity_error(orig))

        assert exc_cls is ForeignKeyConstraintError
        assert constraint == "fk_sections_warehouse_id_warehouses"

    @pytest.mark.parametrize(
        "errno, message, expected, constraint",
        [
            (1062, "Duplicate entry '1' for key 'sellers.uq_sellers_cid'", UniqueConstraintError, "uq_sellers_cid"),
            (
                1452,
                "Cannot add or update a child row: a foreign key constraint fails "
                "(`db`.`employees`, CONSTRAINT `fk_employees_warehouse_id_warehouses` "
                "FOREIGN KEY (`warehouse_id`) REFERENCES `warehouses` (`id`))",
                ForeignKeyConstraintError,
                "fk_employees_warehouse_id_warehouses",
            ),
            (1048, "Column 'cid' cannot be null", NotNullConstraintError, None),
        ],
    )
    def test_mysql_errno(self, errno, message, expected, constraint):
        exc = integrity_error(Exception(errno, message))

        exc_cls, name = classify_integrity_error(exc)

        assert exc_cls is expected
        assert name == constraint

    @pytest.mark.parametrize(
        "code, message, expected",
        [
            (2067, "UNIQUE constraint failed: sellers.cid", UniqueConstraintError),
            (787, "FOREIGN KEY constraint failed", ForeignKeyConstraintError),
            (1299, "NOT NULL constraint failed: sellers.cid", NotNullConstraintError),
            (19, "CHECK constraint failed: positive", CheckConstraintError),
        ],
    )
    def test_sqlite_result_code(self, code, message, expected):
        exc_cls, name = classify_integrity_error(integrity_error(FakeSQLiteError(message, code)))

        assert exc_cls is expected
        assert name is None

    def test_message_fallback_when_no_native_code(self):
        """
        Behavior:
                - A driver without native codes is classified from its message text.
        """
        exc_cls, _ = classify_integrity_error(integrity_error(Exception("duplicate key value violates unique")))

        assert exc_cls is UniqueConstraintError


class TestResolveConstraint:

    def test_foreign_key_name_resolves_column_and_referenced_table(self):
        target = resolve_constraint("fk_sections_warehouse_id_warehouses")

        assert target is not None
        assert target.table == "sections"
        assert target.columns == ["warehouse_id"]
        assert target.referred_table == "warehouses"

    def test_unique_name_resolves_column(self):
        target = resolve_constraint("uq_sellers_cid")

        assert target is not None
        assert target.columns == ["cid"]
        assert target.referred_table is None

    def test_unknown_name(self):
        assert resolve_constraint("does_not_exist") is None
        assert resolve_constraint(None) is None


class TestRaiseMappedIntegrityError:

    def test_unique_violation_becomes_duplicate_with_fields(self):
        exc = integrity_error(FakePostgresError("dup", "23505", constraint_name="uq_sellers_cid"))

        with pytest.raises(DuplicateError) as exc_info:
            raise_mapped_integrity_error(exc, "Seller")

        assert exc_info.value.fields == ["cid"]
        assert exc_info.value.error_code == "duplicate"
        assert exc_info.value.__cause__ is exc

    def test_foreign_key_violation_names_the_reference(self):
        """
        Behavior:
                - With two foreign keys on sections, the constraint name tells which one failed.

        Importance:
                - The service turns this into "product type not found" rather than a generic error.
        """
        exc = integrity_error(
            FakePostgresError("fk", "23503", constraint_name="fk_sections_product_type_id_product_types")
        )

        with pytest.raises(ReferencedEntityNotFoundError) as exc_info:
            raise_mapped_integrity_error(exc, "Section")

        assert exc_info.value.fields == ["product_type_id"]
        assert exc_info.value.reference == "product_types"

    def test_not_null_violation_uses_message_columns(self):
        exc = integrity_error(FakeSQLiteError("NOT NULL constraint failed: sellers.address", 1299))

        with pytest.raises(ValidationFailedError) as exc_info:
            raise_mapped_integrity_error(exc, "Seller")

        assert exc_info.value.fields == ["address"]

    def test_unknown_violation_is_storage_error(self):
        exc = integrity_error(FakePostgresError("exclusion", "23P01"))

        with pytest.raises(StorageError):
            raise_mapped_integrity_error(exc, "Seller")


@pytest.mark.asyncio
class TestDbErrorHandler:

    async def test_maps_integrity_error(self):
        with pytest.raises(DuplicateError):
            async with db_error_handler("Seller"):
                raise integrity_error(FakeSQLiteError("UNIQUE constraint failed: sellers.cid", 2067))

    async def test_passes_repository_errors_through(self):
        original = ValidationFailedError("bad", fields=["cid"])

        with pytest.raises(ValidationFailedError) as exc_info:
            async with db_error_handler("Seller"):
                raise original

        assert exc_info.value is original

    async def test_wraps_unexpected_errors(self, caplog):
        with pytest.raises(StorageError) as exc_info:
            async with db_error_handler("Seller"):
                raise RuntimeError("connection reset")

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.http_status() == 500
        assert any("Unexpected DB error" in r.getMessage() for r in caplog.records)


class TestErrorPayloads:

    @pytest.mark.parametrize(
        "code, status",
        [
            ("not_found", 404),
            ("duplicate", 409),
            ("reference_not_found", 409),
            ("in_use", 409),
            ("identity_immutable", 400),
            ("invalid_id", 400),
            ("validation_failed", 422),
            ("invalid_field", 422),
            ("storage_error", 500),
            ("something_else", 400),
        ],
    )
    def test_status_table(self, code, status):
        assert RepositoryError("x", error_code=code).http_status() == status

    def test_payload_never_contains_constraint(self):
        error = DuplicateError("seller already exists", fields=["cid"], constraint="uq_sellers_cid")

        assert error.to_payload() == {"detail": "seller already exists", "code": "duplicate", "fields": ["cid"]}
        assert "uq_sellers_cid" in str(error)
