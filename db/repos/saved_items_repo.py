from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

from db.rows import dumps_json, fetch_all, fetch_one, loads_json
from models.saved_item_record import SavedItemInput, SavedItemRecord


def _to_record(row: Dict[str, Any]) -> SavedItemRecord:
    return SavedItemRecord(
        id=row["id"],
        user_id=row["user_id"],
        item_type=row["item_type"],
        item_id=row["item_id"],
        item_data=loads_json(row["item_data_json"], {}),
        created_at=row["created_at"],
    )


class SavedItemsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, item_id: int) -> Optional[SavedItemRecord]:
        cur = self.conn.execute("SELECT * FROM saved_items WHERE id = ?;", (item_id,))
        row = fetch_one(cur)
        return _to_record(row) if row else None

    def list(self, user_id: int, item_type: Optional[str] = None) -> List[SavedItemRecord]:
        """Saved items of a user in insertion order, optionally of one type."""
        if item_type:
            cur = self.conn.execute(
                "SELECT * FROM saved_items WHERE user_id = ? AND item_type = ? ORDER BY id;",
                (user_id, item_type),
            )
        else:
            cur = self.conn.execute("SELECT * FROM saved_items WHERE user_id = ? ORDER BY id;", (user_id,))
        return [_to_record(row) for row in fetch_all(cur)]

    def create(self, user_id: int, item: SavedItemInput) -> SavedItemRecord:
        cur = self.conn.execute(
            "INSERT INTO saved_items (user_id, item_type, item_id, item_data_json) VALUES (?, ?, ?, ?);",
            (user_id, item.item_type, item.item_id, dumps_json(item.item_data)),
        )
        self.conn.commit()
        return self.get(int(cur.lastrowid))  # type: ignore[return-value]

    def delete(self, item_id: int) -> bool:
        cur = self.conn.execute("DELETE FROM saved_items WHERE id = ?;", (item_id,))
        self.conn.commit()
        return cur.rowcount > 0
