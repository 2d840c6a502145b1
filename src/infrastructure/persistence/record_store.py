"""SQLAlchemy implementation of RecordStoreProtocol.

Each fetch runs two statements in one session: a COUNT over the filtered
set and the ordered limit/offset window. Tables are looked up by name in
BaseModel.metadata, so every mapped model is pageable without per-model
code. `count_by` answers GROUP BY counts over the same filters.

Search terms are matched with ILIKE against each search field, ORed, with
`%`, `_` and the escape character escaped so they match literally.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import ColumnElement, Table, false, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import StorePage
from src.infrastructure.persistence import models  # noqa: F401
from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.filter_values import parse_bool, parse_uuid

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.persistence.database import Database

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def _filter_condition(table: Table, field: str, value: Any) -> ColumnElement[bool]:
    """Build `column == value`, coercing query-string values to the column type.

    A value that cannot be coerced (e.g. "abc" for a UUID column) can never
    match, so the condition becomes FALSE instead of an error.
    """
    column = table.c[field]
    if value is None:
        return column.is_(None)
    if isinstance(value, str):
        try:
            python_type = column.type.python_type
        except NotImplementedError:
            python_type = str
        if python_type is bool:
            value = parse_bool(value)
        elif python_type is UUID:
            value = parse_uuid(value)
        if value is None:
            return false()
    return column == value


class SqlRecordStore:
    """Record store backed by a SQLAlchemy async engine.

    Attributes:
        _database: Database providing sessions.
        _logger: Structured logger.
    """

    def __init__(self, database: "Database", logger: "LoggerProtocol") -> None:
        self._database = database
        self._logger = logger

    def _unavailable(
        self, collection: str, message: str, **details: Any
    ) -> Failure[StoreUnavailableError]:
        return Failure(
            error=StoreUnavailableError(
                code=ErrorCode.STORE_UNAVAILABLE,
                message=message,
                collection=collection,
                details=details or None,
            )
        )

    async def fetch_page(
        self,
        collection: str,
        *,
        filters: Mapping[str, Any],
        search: str | None,
        search_fields: Sequence[str],
        order_by: Sequence[str],
        limit: int,
        offset: int,
    ) -> Result[StorePage, StoreUnavailableError]:
        """Fetch one ordered window of a collection plus its filtered total."""
        referenced = {*filters, *search_fields, *order_by}
        match self._resolve(collection, referenced):
            case Failure() as failure:
                return failure
            case Success(value=table):
                pass

        conditions = [
            _filter_condition(table, field, value) for field, value in filters.items()
        ]
        if search:
            pattern = f"%{escape_like(search)}%"
            conditions.append(
                or_(
                    *(
                        table.c[field].ilike(pattern, escape=LIKE_ESCAPE)
                        for field in search_fields
                    )
                )
            )

        query = select(table).where(*conditions)
        count_query = select(func.count()).select_from(query.subquery())
        page_query = (
            query.order_by(*(table.c[key].asc() for key in order_by))
            .limit(limit)
            .offset(offset)
        )

        try:
            async with self._database.async_session() as session:
                total = (await session.execute(count_query)).scalar_one()
                rows = (await session.execute(page_query)).mappings().all()
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            self._logger.error(
                "record_store_query_failed",
                error=e,
                collection=collection,
                limit=limit,
                offset=offset,
            )
            return self._unavailable(
                collection,
                "Backing store query failed",
                error_type=type(e).__name__,
            )

        return Success(
            value=StorePage(records=tuple(dict(row) for row in rows), total=int(total))
        )

    async def count_by(
        self,
        collection: str,
        *,
        group_by: str,
        filters: Mapping[str, Any],
    ) -> Result[dict[Any, int], StoreUnavailableError]:
        """Count filtered records per distinct value of `group_by`."""
        match self._resolve(collection, {group_by, *filters}):
            case Failure() as failure:
                return failure
            case Success(value=table):
                pass

        column = table.c[group_by]
        query = (
            select(column, func.count())
            .where(
                *(
                    _filter_condition(table, field, value)
                    for field, value in filters.items()
                )
            )
            .group_by(column)
        )

        try:
            async with self._database.async_session() as session:
                rows = (await session.execute(query)).all()
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            self._logger.error(
                "record_store_count_failed",
                error=e,
                collection=collection,
                group_by=group_by,
            )
            return self._unavailable(
                collection,
                "Backing store query failed",
                error_type=type(e).__name__,
            )

        return Success(value={value: int(count) for value, count in rows})

    def _resolve(
        self, collection: str, referenced: set[str]
    ) -> Result[Table, StoreUnavailableError]:
        """Look up the table backing a collection and check its columns."""
        table = BaseModel.metadata.tables.get(collection)
        if table is None:
            self._logger.error("record_store_unknown_table", collection=collection)
            return self._unavailable(
                collection, f"No table backs collection '{collection}'"
            )

        missing = sorted(name for name in referenced if name not in table.c)
        if missing:
            self._logger.error(
                "record_store_unknown_columns", collection=collection, columns=missing
            )
            return self._unavailable(
                collection,
                f"Collection '{collection}' has no column(s): {', '.join(missing)}",
                columns=missing,
            )
        return Success(value=table)
