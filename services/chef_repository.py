"""
Chef persistence (raw SQL).
"""

import sqlite3
from typing import Dict, Iterable, List, Optional, Sequence, Union

from models import Chef
from utils import get_logger, log_operation

from .base_repository import BaseRepository

logger = get_logger(__name__)


class ChefRepository(BaseRepository[Chef]):
    """Chef rows; searched by username."""

    table = "chef"
    search_column = "username"
    sortable_columns = {
        'id': 'id',
        'username': 'username',
        'email': 'email',
        'isAdmin': 'is_admin',
        'is_admin': 'is_admin',
    }

    def _rows_to_entities(self, rows: Sequence[sqlite3.Row]) -> List[Chef]:
        return [self._row_to_chef(row) for row in rows]

    def _row_to_chef(self, row: sqlite3.Row) -> Chef:
        return Chef(
            id=row['id'],
            username=row['username'],
            email=row['email'] or '',
            password=row['password'],
            is_admin=bool(row['is_admin'])
        )

    def get_by_username(self, username: str) -> Optional[Chef]:
        """Exact, case-sensitive username lookup"""
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT * FROM chef WHERE username = ?", (username,)).fetchone()
        return self._row_to_chef(row) if row else None

    def get_by_ids(self, chef_ids: Iterable[int]) -> Dict[int, Chef]:
        """Resolve several chefs in one query, keyed by id"""
        ids = sorted({chef_id for chef_id in chef_ids if self._is_storable_id(chef_id)})
        if not ids:
            return {}
        placeholders = ','.join(['?'] * len(ids))
        with self.db.get_connection() as conn:
            rows = conn.execute(f"SELECT * FROM chef WHERE id IN ({placeholders})", ids).fetchall()
        return {row['id']: self._row_to_chef(row) for row in rows}

    def create(self, chef: Chef) -> int:
        """Insert a chef and set its store-assigned id"""
        with self.db.transaction() as conn:
            cursor = conn.execute("""
                INSERT INTO chef (username, email, password, is_admin)
                VALUES (?, ?, ?, ?)
            """, (chef.username, chef.email, chef.password, int(chef.is_admin)))
            chef.id = cursor.lastrowid
        return chef.id

    def update(self, chef: Chef) -> bool:
        with self.db.transaction() as conn:
            cursor = conn.execute("""
                UPDATE chef SET username = ?, email = ?, password = ?, is_admin = ?
                WHERE id = ?
            """, (chef.username, chef.email, chef.password, int(chef.is_admin), chef.id))
            return cursor.rowcount > 0

    def delete(self, chef_or_id: Union[Chef, int]) -> bool:
        """
        Delete a chef together with the recipes they authored.
        Join rows go first, then recipes, then the chef, in one transaction.
        """
        chef_id = self._entity_id(chef_or_id)
        if not self._is_storable_id(chef_id):
            return False
        with log_operation(logger, f"delete chef {chef_id}"):
            with self.db.transaction() as conn:
                conn.execute("""
                    DELETE FROM recipe_ingredient
                    WHERE recipe_id IN (SELECT id FROM recipe WHERE chef_id = ?)
                """, (chef_id,))
                conn.execute("DELETE FROM recipe WHERE chef_id = ?", (chef_id,))
                cursor = conn.execute("DELETE FROM chef WHERE id = ?", (chef_id,))
                return cursor.rowcount > 0
