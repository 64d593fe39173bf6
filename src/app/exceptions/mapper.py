import re
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from app.database.base import Base
from .integrity_classifier import (
    classify_integrity_error,
    UniqueConstraintError,
    NotNullConstraintError,
    ForeignKeyConstraintError,
    CheckConstraintError,
)
from .base import (
    DuplicateError,
    ReferencedEntityNotFoundError,
    RepositoryError,
    StorageError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

# -----------------------
# Column extraction helpers
# -----------------------

def _split_columns(raw: str) -> list[str]:
    return [c.split(".")[-1].strip().strip('"`') for c in re.split(r",\s*", raw)]


def _extract_columns_postgres(msg: str) -> list[str] | None:
    """
    Try to extract involved column names from common Postgres messages:
      - 'null value in column "cid" violates not-null constraint'
      - 'DETAIL:  Key (cid)=(1) already exists.'
      - 'DETAIL:  Key (warehouse_id)=(99) is not present in table "warehouses".'
    """
    if not msg:
        return None

    m = re.search(r'null value in column "(?P<col>[^"]+)"', msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]

    m = re.search(r'key \((?P<cols>[^)]+)\)=', msg, flags=re.IGNORECASE)
    if m:
        return _split_columns(m.group("cols"))

    return None


def _extract_columns_sqlite(msg: str) -> list[str] | None:
    # SQLite: 'UNIQUE constraint failed: sellers.cid' / 'NOT NULL constraint failed: sellers.cid'
    m = re.search(r'(?:UNIQUE|NOT NULL) constraint failed: (?P<cols>.+)$', msg, flags=re.IGNORECASE)
    if m:
        return _split_columns(m.group("cols"))
    return None


def _extract_columns_mysql(msg: str) -> list[str] | None:
    # "... FOREIGN KEY (`warehouse_id`) REFERENCES `warehouses` (`id`))"
    m = re.search(r"FOREIGN KEY \((?P<cols>[^)]+)\)", msg, flags=re.IGNORECASE)
    if m:
        return _split_columns(m.group("cols"))
    # "Column 'cid' cannot be null"
    m = re.search(r"Column '(?P<col>[^']+)' cannot be null", msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]
    return None


def extract_columns_from_integrity(exc: IntegrityError) -> list[str] | None:
    """
    Best-effort extraction of column names from the DB message (Postgres, SQLite, MySQL).
    """
    orig = exc.orig
    msg = str(orig) if orig is not None else str(exc)

    for extractor in (_extract_columns_postgres, _extract_columns_sqlite, _extract_columns_mysql):
        cols = extractor(msg)
        if cols:
            return cols
    return None


# -----------------------
# Constraint name resolution
# -----------------------

@dataclass(frozen=True)
class ConstraintTarget:
    table: str
    columns: list[str]
    referred_table: str | None = None


def resolve_constraint(constraint_name: str | None) -> ConstraintTarget | None:
    """
    Look a constraint name up in the declared metadata.

    The naming convention on `Base` makes the name alone enough to recover
    the columns and, for foreign keys, the referenced table.
    """
    if not constraint_name:
        return None
    for table in Base.metadata.tables.values():
        for constraint in table.constraints:
            if constraint.name != constraint_name:
                continue
            referred = getattr(constraint, "referred_table", None)
            return ConstraintTarget(
                table=table.name,
                columns=[c.name for c in constraint.columns],
                referred_table=referred.name if referred is not None else None,
            )
    return None


def _referenced_table_from_message(msg: str) -> str | None:
    # Postgres: 'is not present in table "warehouses"'; MySQL: 'REFERENCES `warehouses`'
    m = re.search(r'is not present in table "(?P<t>[^"]+)"', msg) or re.search(r"REFERENCES `(?P<t>[^`]+)`", msg)
    return m.group("t") if m else None


# -----------------------
# Mapper
# -----------------------

def raise_mapped_integrity_error(exc: IntegrityError, model_name: str | None = None) -> None:
    """
    Map a SQLAlchemy IntegrityError to an app-level exception and raise it.
    Populates `.fields`, `.constraint` (and `.reference` for foreign keys) where possible.
    """
    exc_cls, constraint_name = classify_integrity_error(exc)
    target = resolve_constraint(constraint_name)
    columns = target.columns if target else extract_columns_from_integrity(exc)

    model_part = f"{model_name}" if model_name else "Record"

    if exc_cls is UniqueConstraintError:
        logger.info(
            "mapper.duplicate_detected",
            extra={"model": model_part, "fields": columns, "constraint": constraint_name},
        )
        if columns:
            raise DuplicateError(f"{model_part} already exists for field(s): {', '.join(columns)}",
                                 fields=columns, constraint=constraint_name) from exc
        raise DuplicateError(f"{model_part} already exists (unique constraint)",
                             constraint=constraint_name) from exc

    if exc_cls is NotNullConstraintError:
        logger.info(
            "mapper.not_null_violation",
            extra={"model": model_part, "fields": columns, "constraint": constraint_name},
        )
        if columns:
            raise ValidationFailedError(f"Missing required field(s): {', '.join(columns)} for {model_part}",
                                        fields=columns, constraint=constraint_name) from exc
        raise ValidationFailedError(f"Missing required field for {model_part}", constraint=constraint_name) from exc

    if exc_cls is ForeignKeyConstraintError:
        raw = str(exc.orig) if exc.orig is not None else str(exc)
        reference = target.referred_table if target else _referenced_table_from_message(raw)
        logger.info(
            "mapper.foreign_key_violation",
            extra={"model": model_part, "fields": columns, "constraint": constraint_name, "reference": reference},
        )
        if columns:
            raise ReferencedEntityNotFoundError(
                f"{model_part} referenced entity not found for field(s): {', '.join(columns)}",
                fields=columns, constraint=constraint_name, reference=reference,
            ) from exc
        raise ReferencedEntityNotFoundError(
            f"{model_part} referenced entity not found",
            constraint=constraint_name, reference=reference,
        ) from exc

    if exc_cls is CheckConstraintError:
        raw = str(exc.orig) if exc.orig is not None else str(exc)
        logger.debug(
            "mapper.check_constraint_failure",
            extra={"model": model_part, "raw": raw, "constraint": constraint_name},
        )
        raise ValidationFailedError(
            f"{model_part} business rule violated (check constraint).", constraint=constraint_name
        ) from exc

    raw = str(exc.orig) if exc.orig is not None else str(exc)
    logger.warning(
        "mapper.unknown_integrity_error",
        extra={"model": model_part, "constraint": constraint_name},
    )
    logger.debug("mapper.unknown_integrity_raw", extra={"model": model_part, "raw": raw})
    raise StorageError(f"{model_part} database integrity error.", constraint=constraint_name) from exc


# -----------------------
# Async context manager to DRY error handling in repositories
# -----------------------
@asynccontextmanager
async def db_error_handler(model_name: str | None = None):
    """
    Usage:
        async with db_error_handler(self.model.__name__):
            async with self.db.begin_nested():
                ... DB ops that may raise IntegrityError ...

    Writes run inside a SAVEPOINT, so the failed statement is already rolled
    back when the error reaches this handler; the outer transaction stays usable.
    App-level errors pass through untouched.
    """
    try:
        yield
    except IntegrityError as exc:
        raise_mapped_integrity_error(exc, model_name)
    except RepositoryError:
        raise
    except Exception as exc:
        logger.exception("Unexpected DB error for %s", model_name, extra={"model": model_name})
        raise StorageError(f"Failed to operate on {model_name or 'database'}") from exc
