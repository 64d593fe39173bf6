import re
import logging
from enum import Enum, IntEnum
from typing import Type
from sqlalchemy.exc import IntegrityError
from .base import RepositoryError

logger = logging.getLogger(__name__)

# =================================================================================================================
# Constraint-specific exceptions (internal classification only, never raised to callers)
# =================================================================================================================


class ConstraintViolationError(RepositoryError):
    """Base for integrity/constraint violations (subclass of RepositoryError)."""
    pass


class UniqueConstraintError(ConstraintViolationError):
    """Unique constraint / duplicate value."""
    pass


class NotNullConstraintError(ConstraintViolationError):
    """NOT NULL violation (missing required field)."""
    pass


class ForeignKeyConstraintError(ConstraintViolationError):
    """Foreign key constraint violated."""
    pass


class CheckConstraintError(ConstraintViolationError):
    """CHECK constraint violated."""
    pass


class UnknownIntegrityError(ConstraintViolationError):
    """Unrecognized integrity error."""
    pass


Classification = tuple[Type[ConstraintViolationError] | None, str | None]


# =================================================================================================================
# Native error codes
# =================================================================================================================

# https://www.postgresql.org/docs/current/errcodes-appendix.html
class PostgresErrorCodes(str, Enum):
    UNIQUE_VIOLATION = "23505"
    NOT_NULL_VIOLATION = "23502"
    FOREIGN_KEY_VIOLATION = "23503"
    CHECK_VIOLATION = "23514"


PGCODE_EXCEPTION_MAP = {
    PostgresErrorCodes.UNIQUE_VIOLATION: UniqueConstraintError,
    PostgresErrorCodes.NOT_NULL_VIOLATION: NotNullConstraintError,
    PostgresErrorCodes.FOREIGN_KEY_VIOLATION: ForeignKeyConstraintError,
    PostgresErrorCodes.CHECK_VIOLATION: CheckConstraintError,
}


# https://dev.mysql.com/doc/mysql-errors/8.0/en/server-error-reference.html
class MySQLErrorCodes(IntEnum):
    DUP_ENTRY = 1062
    DUP_ENTRY_WITH_KEY_NAME = 1586
    ROW_IS_REFERENCED = 1451
    NO_REFERENCED_ROW = 1452
    BAD_NULL = 1048
    NO_DEFAULT_FOR_FIELD = 1364
    CHECK_CONSTRAINT_VIOLATED = 3819


MYSQL_ERRNO_EXCEPTION_MAP = {
    MySQLErrorCodes.DUP_ENTRY: UniqueConstraintError,
    MySQLErrorCodes.DUP_ENTRY_WITH_KEY_NAME: UniqueConstraintError,
    MySQLErrorCodes.ROW_IS_REFERENCED: ForeignKeyConstraintError,
    MySQLErrorCodes.NO_REFERENCED_ROW: ForeignKeyConstraintError,
    MySQLErrorCodes.BAD_NULL: NotNullConstraintError,
    MySQLErrorCodes.NO_DEFAULT_FOR_FIELD: NotNullConstraintError,
    MySQLErrorCodes.CHECK_CONSTRAINT_VIOLATED: CheckConstraintError,
}


# https://www.sqlite.org/rescode.html (extended result codes)
class SQLiteErrorCodes(IntEnum):
    CONSTRAINT = 19
    CONSTRAINT_CHECK = 275
    CONSTRAINT_FOREIGNKEY = 787
    CONSTRAINT_NOTNULL = 1299
    CONSTRAINT_PRIMARYKEY = 1555
    CONSTRAINT_UNIQUE = 2067


SQLITE_ERRORCODE_EXCEPTION_MAP = {
    SQLiteErrorCodes.CONSTRAINT_CHECK: CheckConstraintError,
    SQLiteErrorCodes.CONSTRAINT_FOREIGNKEY: ForeignKeyConstraintError,
    SQLiteErrorCodes.CONSTRAINT_NOTNULL: NotNullConstraintError,
    SQLiteErrorCodes.CONSTRAINT_PRIMARYKEY: UniqueConstraintError,
    SQLiteErrorCodes.CONSTRAINT_UNIQUE: UniqueConstraintError,
}

# SQLite emits these exact texts for the primary SQLITE_CONSTRAINT code.
SQLITE_MESSAGE_PREFIXES = {
    "unique constraint failed": UniqueConstraintError,
    "foreign key constraint failed": ForeignKeyConstraintError,
    "not null constraint failed": NotNullConstraintError,
    "check constraint failed": CheckConstraintError,
}


# =================================================================================================================
# Integrity Error Classifiers
# =================================================================================================================

def _match_any(msg: str, keywords: list[str]) -> bool:
    return any(keyword in msg for keyword in keywords)


def _classify_from_postgres_diag(orig) -> Classification:
    """
    Classify Postgres integrity error based on SQLSTATE and diagnostics.

    psycopg2 exposes `pgcode` + `diag`, psycopg 3 `sqlstate` + `diag`; the
    asyncpg adapter exposes `pgcode`/`sqlstate` and keeps the asyncpg
    exception (with `constraint_name`) as `__cause__`.
    """
    pgcode = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if not pgcode:
        return None, None

    diag = getattr(orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None) if diag else None
    if constraint_name is None:
        constraint_name = getattr(getattr(orig, "__cause__", None), "constraint_name", None)

    try:
        exception_class = PGCODE_EXCEPTION_MAP.get(PostgresErrorCodes(pgcode))
    except ValueError:
        exception_class = None

    if exception_class:
        logger.debug("Postgres integrity diagnostic",
                     extra={"pgcode": pgcode, "constraint_name": constraint_name})
        return exception_class, constraint_name

    logger.warning(
        "Unknown Postgres integrity error code encountered",
        extra={"pgcode": pgcode, "constraint_name": constraint_name}
    )
    logger.debug("Postgres orig diagnostic (raw)", extra={"orig_repr": repr(orig)})
    return UnknownIntegrityError, constraint_name


_MYSQL_CONSTRAINT_PATTERNS = (
    re.compile(r"CONSTRAINT `(?P<name>[^`]+)`"),
    re.compile(r"for key '(?:[^'.]+\.)?(?P<name>[^']+)'"),
    re.compile(r"Check constraint '(?P<name>[^']+)'"),
)


def _mysql_constraint_name(msg: str) -> str | None:
    for pattern in _MYSQL_CONSTRAINT_PATTERNS:
        m = pattern.search(msg)
        if m:
            return m.group("name")
    return None


def _classify_from_mysql_errno(orig) -> Classification:
    """
    Classify MySQL/MariaDB integrity errors (pymysql, asyncmy, aiomysql) by errno.
    The driver error's args are `(errno, message)`.
    """
    args = getattr(orig, "args", None) or ()
    if len(args) < 1 or not isinstance(args[0], int) or isinstance(args[0], bool):
        return None, None

    errno = args[0]
    message = str(args[1]) if len(args) > 1 else ""
    try:
        exception_class = MYSQL_ERRNO_EXCEPTION_MAP.get(MySQLErrorCodes(errno))
    except ValueError:
        exception_class = None

    if exception_class is None:
        logger.warning("Unknown MySQL integrity errno encountered", extra={"errno": errno})
        return UnknownIntegrityError, None

    constraint_name = _mysql_constraint_name(message)
    logger.debug("MySQL integrity diagnostic", extra={"errno": errno, "constraint_name": constraint_name})
    return exception_class, constraint_name


def _classify_from_sqlite_errorcode(orig) -> Classification:
    """
    Classify sqlite3 errors by `sqlite_errorcode` (Python 3.11+). When only the
    primary SQLITE_CONSTRAINT code is reported, SQLite's fixed message prefix
    decides the kind. SQLite never names the constraint.
    """
    code = getattr(orig, "sqlite_errorcode", None)
    if code is None:
        return None, None

    exception_class = SQLITE_ERRORCODE_EXCEPTION_MAP.get(code)
    if exception_class is not None:
        return exception_class, None

    if code == SQLiteErrorCodes.CONSTRAINT:
        normalized = str(orig).lower()
        for prefix, candidate in SQLITE_MESSAGE_PREFIXES.items():
            if normalized.startswith(prefix):
                return candidate, None

    logger.warning("Unknown SQLite integrity error code encountered", extra={"sqlite_errorcode": code})
    return UnknownIntegrityError, None


def _classify_from_generic_message(msg: str) -> tuple[Type[ConstraintViolationError], None]:
    """
    Classify integrity error based on message content, for drivers that expose no native code.
    """
    normalized = msg.lower()

    if _match_any(normalized, ["unique constraint", "unique failed", "unique violation", "duplicate"]):
        return UniqueConstraintError, None

    if _match_any(normalized, ["not null constraint", "not null", "null value in column"]):
        return NotNullConstraintError, None

    if _match_any(normalized, ["foreign key constraint", "foreign key", "is not present in table"]):
        return ForeignKeyConstraintError, None

    if _match_any(normalized, ["check constraint", "check failed"]):
        return CheckConstraintError, None

    logger.warning("Unknown integrity error message encountered", extra={"message_snippet": (msg or "")[:200]})
    logger.debug("Unknown integrity raw message", extra={"raw": msg})
    return UnknownIntegrityError, None


_NATIVE_CLASSIFIERS = (
    _classify_from_postgres_diag,
    _classify_from_mysql_errno,
    _classify_from_sqlite_errorcode,
)


def classify_integrity_error(exc: IntegrityError) -> tuple[Type[ConstraintViolationError], str | None]:
    """
    Classify a SQLAlchemy IntegrityError into a ConstraintViolationError subclass.

    Native driver codes are consulted first (Postgres SQLSTATE, MySQL errno,
    SQLite extended result code); message parsing is only the last resort.

    Returns:
        A tuple of (ExceptionClass, constraint_name if available)
    """
    orig = exc.orig

    for classifier in _NATIVE_CLASSIFIERS:
        exception_class, constraint_name = classifier(orig)
        if exception_class is not None:
            return exception_class, constraint_name

    return _classify_from_generic_message(str(orig))
