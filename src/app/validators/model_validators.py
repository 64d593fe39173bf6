from typing import Any, Iterable

from sqlalchemy import Integer, UniqueConstraint, and_, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.base import Base


def get_primary_key_name(model) -> str:
    """Name of the (single-column) primary key attribute."""
    return sa_inspect(model).primary_key[0].key


def get_column_names(model) -> list[str]:
    return [col.key for col in sa_inspect(model).column_attrs]


def find_unknown_model_kwargs(model, kwargs: dict) -> list[str]:
    """
    Return list of unknown kwarg keys that are not part of the model's mapped attributes.
    - model: the SQLAlchemy model class (not instance)
    - kwargs: dict of incoming kwargs to validate
    """
    mapper = sa_inspect(model)
    allowed = {attr.key for attr in mapper.attrs}
    return [k for k in kwargs.keys() if k not in allowed]


def _is_generated_pk(col) -> bool:
    # Integer primary keys are assigned by the store; string keys (localities) are not.
    return col.primary_key and isinstance(col.type, Integer) and col.autoincrement in (True, "auto")


def get_required_columns(model) -> list[str]:
    """
    Columns that are NOT NULL, have no server/client default and are not store-generated PKs.
    """
    cols = []
    for col in model.__table__.columns:
        has_default = col.default is not None or col.server_default is not None
        if not col.nullable and not has_default and not _is_generated_pk(col):
            cols.append(col.name)
    return cols


def get_unique_column_sets(model) -> list[Iterable[str]]:
    """
    Return a list of unique column sets. Each item is an iterable of column names.
    Covers:
      - Column(unique=True)
      - UniqueConstraint in the table
      - Index(..., unique=True)
    """
    unique_sets = []

    for col in model.__table__.columns:
        if col.unique:
            unique_sets.append([col.name])

    for constraint in model.__table__.constraints:
        if isinstance(constraint, UniqueConstraint):
            cols = [c.name for c in constraint.columns]
            if cols not in unique_sets:
                unique_sets.append(cols)

    for idx in model.__table__.indexes:
        if idx.unique:
            cols = [c.name for c in idx.columns]
            if cols not in unique_sets:
                unique_sets.append(cols)

    return unique_sets


def get_foreign_key_columns(model) -> dict[str, tuple[str, str]]:
    """
    Map each foreign-key column to its (referenced table, referenced column).
    """
    refs = {}
    for col in model.__table__.columns:
        for fk in col.foreign_keys:
            refs[col.name] = (fk.column.table.name, fk.column.name)
    return refs


async def find_unique_conflicts(db: AsyncSession, model, kwargs: dict, exclude_id: Any = None) -> set[str]:
    """
    Run pre-write queries to detect existing rows that would violate unique constraints.
    When `exclude_id` is given, the row with that primary key is ignored, so a record
    keeping its own unique value is never reported as conflicting with itself.
    Returns a set of column names that conflict (best-effort).
    """
    conflicts = set()
    pk = getattr(model, get_primary_key_name(model))

    for cols in get_unique_column_sets(model):
        if not all(c in kwargs and kwargs[c] is not None for c in cols):
            continue

        conditions = [getattr(model, c) == kwargs[c] for c in cols]
        if exclude_id is not None:
            conditions.append(pk != exclude_id)
        q = select(pk).where(and_(*conditions)).limit(1)

        res = await db.execute(q)
        if res.first() is not None:
            conflicts.update(cols)

    return conflicts


async def find_dangling_references(db: AsyncSession, model, kwargs: dict) -> dict[str, str]:
    """
    Return {fk column: referenced table} for every provided foreign-key value
    that has no matching row in the referenced table.
    """
    dangling = {}
    for column, (table_name, ref_column) in get_foreign_key_columns(model).items():
        value = kwargs.get(column)
        if value is None:
            continue
        table = Base.metadata.tables[table_name]
        res = await db.execute(select(table.c[ref_column]).where(table.c[ref_column] == value).limit(1))
        if res.first() is None:
            dangling[column] = table_name
    return dangling
