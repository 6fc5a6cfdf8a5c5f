from __future__ import annotations

import sqlite3
from typing import Any, Dict, Optional

from db.rows import fetch_one, update_columns
from models.career_goals_record import CareerGoalsRecord

COLUMNS = ("desired_role", "industry", "location", "salary_range")


class CareerGoalsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, goals_id: int) -> Optional[CareerGoalsRecord]:
        cur = self.conn.execute("SELECT * FROM career_goals WHERE id = ?;", (goals_id,))
        row = fetch_one(cur)
        return CareerGoalsRecord(**row) if row else None

    def get_by_user(self, user_id: int) -> Optional[CareerGoalsRecord]:
        cur = self.conn.execute("SELECT * FROM career_goals WHERE user_id = ?;", (user_id,))
        row = fetch_one(cur)
        return CareerGoalsRecord(**row) if row else None

    def create(self, user_id: int, fields: Dict[str, Any]) -> CareerGoalsRecord:
        cur = self.conn.execute(
            "INSERT INTO career_goals (user_id, desired_role, industry, location, salary_range) "
            "VALUES (?, ?, ?, ?, ?);",
            (user_id, *(fields.get(col) for col in COLUMNS)),
        )
        self.conn.commit()
        return self.get(int(cur.lastrowid))  # type: ignore[return-value]

    def update(self, goals_id: int, fields: Dict[str, Any]) -> CareerGoalsRecord:
        if self.get(goals_id) is None:
            raise KeyError(f"Career goals with id {goals_id} not found")
        columns = {col: fields[col] for col in COLUMNS if col in fields}
        update_columns(self.conn, "career_goals", goals_id, columns)
        return self.get(goals_id)  # type: ignore[return-value]

    def upsert(self, user_id: int, fields: Dict[str, Any]) -> CareerGoalsRecord:
        existing = self.get_by_user(user_id)
        if existing:
            return self.update(existing.id, fields)
        return self.create(user_id, fields)
