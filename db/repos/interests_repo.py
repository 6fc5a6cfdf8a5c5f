from __future__ import annotations

import sqlite3
from typing import Any, Dict, Optional

from db.rows import dumps_json, fetch_one, loads_json, update_columns
from models.interests_record import InterestsRecord

JSON_FIELDS = ("topics", "skills")


def _to_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {f"{key}_json": dumps_json(fields[key] or []) for key in JSON_FIELDS if key in fields}


def _to_record(row: Dict[str, Any]) -> InterestsRecord:
    return InterestsRecord(
        id=row["id"],
        user_id=row["user_id"],
        topics=loads_json(row["topics_json"], []),
        skills=loads_json(row["skills_json"], []),
        created_at=row["created_at"],
    )


class InterestsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, interests_id: int) -> Optional[InterestsRecord]:
        cur = self.conn.execute("SELECT * FROM interests WHERE id = ?;", (interests_id,))
        row = fetch_one(cur)
        return _to_record(row) if row else None

    def get_by_user(self, user_id: int) -> Optional[InterestsRecord]:
        cur = self.conn.execute("SELECT * FROM interests WHERE user_id = ?;", (user_id,))
        row = fetch_one(cur)
        return _to_record(row) if row else None

    def create(self, user_id: int, fields: Dict[str, Any]) -> InterestsRecord:
        columns = {"topics_json": "[]", "skills_json": "[]", **_to_columns(fields)}
        cur = self.conn.execute(
            "INSERT INTO interests (user_id, topics_json, skills_json) VALUES (?, ?, ?);",
            (user_id, columns["topics_json"], columns["skills_json"]),
        )
        self.conn.commit()
        return self.get(int(cur.lastrowid))  # type: ignore[return-value]

    def update(self, interests_id: int, fields: Dict[str, Any]) -> InterestsRecord:
        if self.get(interests_id) is None:
            raise KeyError(f"Interest with id {interests_id} not found")
        update_columns(self.conn, "interests", interests_id, _to_columns(fields))
        return self.get(interests_id)  # type: ignore[return-value]

    def upsert(self, user_id: int, fields: Dict[str, Any]) -> InterestsRecord:
        """Create the user's interests, or merge the given fields into the existing row."""
        existing = self.get_by_user(user_id)
        if existing:
            return self.update(existing.id, fields)
        return self.create(user_id, fields)
