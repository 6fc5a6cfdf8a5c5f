from __future__ import annotations

import json
import sqlite3
from typing import Any, Dict, List, Optional


def fetch_one(cur: sqlite3.Cursor) -> Optional[Dict[str, Any]]:
    """Fetch the next row as a column-name dict (works with or without a row_factory)."""
    row = cur.fetchone()
    if row is None:
        return None
    names = [col[0] for col in cur.description]
    return dict(zip(names, tuple(row)))


def fetch_all(cur: sqlite3.Cursor) -> List[Dict[str, Any]]:
    names = [col[0] for col in cur.description]
    return [dict(zip(names, tuple(row))) for row in cur.fetchall()]


def dumps_json(value: Any) -> str:
    # Preserve non-ASCII characters (e.g., umlauts) in stored JSON text
    return json.dumps(value, ensure_ascii=False)


def loads_json(text: Optional[str], default: Any) -> Any:
    if not text:
        return default
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return default


def update_columns(conn: sqlite3.Connection, table: str, row_id: int, columns: Dict[str, Any]) -> None:
    """UPDATE the given columns of one row; column names come from repo whitelists only."""
    if not columns:
        return
    assignments = ", ".join(f"{name} = ?" for name in columns)
    conn.execute(f"UPDATE {table} SET {assignments} WHERE id = ?;", (*columns.values(), row_id))
    conn.commit()
