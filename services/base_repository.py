"""
Shared search/sort/paging query logic for the entity repositories.

Every repository filters on one text column, orders by a column taken from
its own allow-list, and pushes LIMIT/OFFSET down to sqlite. User input only
ever reaches the query as a bound parameter; the ORDER BY clause is built
exclusively from allow-list values.
"""

import sqlite3
from typing import Dict, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from models import Page, PageOptions, InvalidArgumentError
from utils import get_logger

from .database_service import SQLITE_MAX_INTEGER, DatabaseService
from .pagination import build_page

logger = get_logger(__name__)

T = TypeVar("T")

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term is matched literally"""
    return (term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
                .replace("%", LIKE_ESCAPE + "%")
                .replace("_", LIKE_ESCAPE + "_"))


class BaseRepository(Generic[T]):
    """
    Base class for entity repositories.

    Subclasses set ``table``, ``search_column`` and ``sortable_columns`` (a
    mapping from accepted sortBy values to column names) and implement
    ``_rows_to_entities``.
    """

    table: str = ""
    search_column: str = ""
    sortable_columns: Dict[str, str] = {}

    def __init__(self, database_service: DatabaseService):
        self.db = database_service

    # Query building

    def resolve_order_by(self, options: PageOptions) -> str:
        """
        Translate validated sort options into an ORDER BY clause.
        Raises InvalidArgumentError for a sortBy outside the allow-list.
        """
        allowed_columns = {key.lower(): value for key, value in self.sortable_columns.items()}
        column = allowed_columns.get(options.sort_by.lower())
        if column is None:
            logger.warning(f"Rejected sortBy {options.sort_by!r} for {self.table}")
            allowed = ", ".join(sorted(self.sortable_columns))
            raise InvalidArgumentError(f"Cannot sort {self.table} by {options.sort_by!r}; allowed: {allowed}")

        direction = "DESC" if options.descending else "ASC"
        order_by = f"{column} {direction}"
        if column != "id":
            # Ties need a stable order or rows could move between pages
            order_by += ", id ASC"
        return order_by

    def _term_filter(self, term: Optional[str]) -> Tuple[str, List]:
        if not term:
            return "", []
        pattern = f"%{escape_like(term.casefold())}%"
        return f" WHERE casefold({self.search_column}) LIKE ? ESCAPE '{LIKE_ESCAPE}'", [pattern]

    @staticmethod
    def _entity_id(entity_or_id: Union[T, int]) -> int:
        """Accept either an entity or its id"""
        return getattr(entity_or_id, "id", entity_or_id)

    @staticmethod
    def _is_storable_id(entity_id: int) -> bool:
        """Ids outside sqlite's INTEGER range can never match a row"""
        return isinstance(entity_id, int) and -SQLITE_MAX_INTEGER <= entity_id <= SQLITE_MAX_INTEGER

    # Mapping

    def _rows_to_entities(self, rows: Sequence[sqlite3.Row]) -> List[T]:
        raise NotImplementedError

    def _row_to_entity(self, row: sqlite3.Row) -> T:
        return self._rows_to_entities([row])[0]

    # Queries

    def count(self, term: Optional[str] = None) -> int:
        where, params = self._term_filter(term)
        with self.db.get_connection() as conn:
            return conn.execute(f"SELECT COUNT(*) FROM {self.table}{where}", params).fetchone()[0]

    def search(self, term: Optional[str] = None) -> List[T]:
        """All rows whose search column contains term (case-insensitive), ordered by id"""
        where, params = self._term_filter(term)
        with self.db.get_connection() as conn:
            rows = conn.execute(f"SELECT * FROM {self.table}{where} ORDER BY id", params).fetchall()
        return self._rows_to_entities(rows)

    def search_page(self, term: Optional[str], options: PageOptions) -> Page[T]:
        """One page of the filtered, ordered result set"""
        order_by = self.resolve_order_by(options)
        where, params = self._term_filter(term)
        with self.db.get_connection() as conn:
            total = conn.execute(f"SELECT COUNT(*) FROM {self.table}{where}", params).fetchone()[0]
            if options.offset >= total:
                return build_page([], total, options)
            rows = conn.execute(
                f"SELECT * FROM {self.table}{where} ORDER BY {order_by} LIMIT ? OFFSET ?",
                params + [min(options.page_size, total - options.offset), options.offset]
            ).fetchall()
        return build_page(self._rows_to_entities(rows), total, options)

    def get_all(self) -> List[T]:
        return self.search(None)

    def get_page(self, options: PageOptions) -> Page[T]:
        return self.search_page(None, options)

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Point lookup; None when no row has this id"""
        if not self._is_storable_id(entity_id):
            return None
        with self.db.get_connection() as conn:
            row = conn.execute(f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,)).fetchone()
        if row is None:
            return None
        return self._row_to_entity(row)

    def exists(self, entity_id: int) -> bool:
        if not self._is_storable_id(entity_id):
            return False
        with self.db.get_connection() as conn:
            row = conn.execute(f"SELECT 1 FROM {self.table} WHERE id = ?", (entity_id,)).fetchone()
        return row is not None
