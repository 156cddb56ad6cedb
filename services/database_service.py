"""
Database service for the Chefs Table application.

Owns the sqlite row store: schema creation, connection handling and the
unit-of-work used by multi-statement mutations. Entity-specific SQL lives in
the repositories; this module only hands out connections and translates
sqlite errors into the application's error taxonomy.
"""

import sqlite3
import threading

from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Any

from models import ConflictError, StorageError
from utils import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS chef (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    email TEXT DEFAULT '',
    password TEXT NOT NULL,
    is_admin INTEGER DEFAULT 0
);

CREATE TABLE IF NOT EXISTS ingredient (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS recipe (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    instructions TEXT DEFAULT '',
    chef_id INTEGER REFERENCES chef(id)
);

CREATE TABLE IF NOT EXISTS recipe_ingredient (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    recipe_id INTEGER NOT NULL REFERENCES recipe(id),
    ingredient_id INTEGER NOT NULL REFERENCES ingredient(id),
    quantity REAL DEFAULT 0,
    unit TEXT DEFAULT ''
);

CREATE INDEX IF NOT EXISTS idx_recipe_chef ON recipe(chef_id);
CREATE INDEX IF NOT EXISTS idx_recipe_ingredient_recipe ON recipe_ingredient(recipe_id);
CREATE INDEX IF NOT EXISTS idx_recipe_ingredient_ingredient ON recipe_ingredient(ingredient_id);
"""

TABLES = ['chef', 'ingredient', 'recipe', 'recipe_ingredient']

# Largest value sqlite can bind as an INTEGER
SQLITE_MAX_INTEGER = 2 ** 63 - 1


def _casefold(value):
    return None if value is None else str(value).casefold()


class DatabaseService:
    """
    Centralized sqlite access for all repositories.

    A file database opens a fresh connection per operation, so concurrent
    request threads never share a connection. An in-memory database only
    exists as long as its connection, so it keeps one persistent connection
    and serializes access to it with a re-entrant lock.
    """

    def __init__(self, db_path: str = "chefs_table.db"):
        self.db_path = db_path
        self._lock = threading.RLock()
        self._persistent_conn = None
        if db_path == ":memory:":
            self._persistent_conn = self._connect(check_same_thread=False)
        else:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema_exists()

    def _connect(self, check_same_thread: bool = True) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, timeout=30.0, check_same_thread=check_same_thread)
        conn.row_factory = sqlite3.Row  # Enable dict-like access
        conn.execute("PRAGMA foreign_keys=ON")
        # sqlite lower() and LIKE only fold ASCII letters
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        return conn

    @contextmanager
    def get_connection(self):
        """Context manager for database connections with proper cleanup"""
        if self._persistent_conn is not None:
            with self._lock:
                try:
                    yield self._persistent_conn
                except sqlite3.Error as e:
                    self._rollback_quietly(self._persistent_conn)
                    raise self._translate_error(e) from e
                except Exception:
                    self._rollback_quietly(self._persistent_conn)
                    raise
        else:
            conn = None
            try:
                conn = self._connect()
                yield conn
            except sqlite3.Error as e:
                if conn:
                    self._rollback_quietly(conn)
                raise self._translate_error(e) from e
            except Exception:
                if conn:
                    self._rollback_quietly(conn)
                raise
            finally:
                if conn:
                    conn.close()

    @contextmanager
    def transaction(self):
        """
        Run several statements as one atomic unit of work.
        Commits when the block finishes, rolls back if it raises.
        """
        with self.get_connection() as conn:
            yield conn
            conn.commit()

    def _rollback_quietly(self, conn: sqlite3.Connection):
        try:
            conn.rollback()
        except sqlite3.Error as e:
            # Keep the error that triggered the rollback
            logger.debug(f"Rollback failed: {e}")

    def _translate_error(self, error: sqlite3.Error) -> Exception:
        if isinstance(error, sqlite3.IntegrityError) and "UNIQUE" in str(error).upper():
            logger.warning(f"Uniqueness violation: {error}")
            return ConflictError(str(error))
        logger.error(f"Database error: {error}")
        return StorageError(str(error))

    def _ensure_schema_exists(self):
        """Create database schema if it doesn't exist"""
        with self.get_connection() as conn:
            conn.executescript(SCHEMA_SQL)
            conn.commit()
        logger.info(f"Database ready: {self.db_path}")

    def get_database_stats(self) -> Dict[str, Any]:
        """Get row counts for every table"""
        with self.get_connection() as conn:
            stats = {}
            for table in TABLES:
                stats[table] = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
            return stats

    def is_empty(self) -> bool:
        return all(count == 0 for count in self.get_database_stats().values())

    def close(self):
        """Close the persistent connection of an in-memory database"""
        if self._persistent_conn is not None:
            with self._lock:
                self._persistent_conn.close()
