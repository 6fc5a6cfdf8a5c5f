from __future__ import annotations

import sqlite3
from typing import Optional

from db.rows import fetch_one
from models.saved_item_record import UserRecord


class UsersRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, user_id: int) -> Optional[UserRecord]:
        cur = self.conn.execute("SELECT id, username FROM users WHERE id = ?;", (user_id,))
        row = fetch_one(cur)
        return UserRecord(**row) if row else None

    def get_by_username(self, username: str) -> Optional[UserRecord]:
        cur = self.conn.execute("SELECT id, username FROM users WHERE username = ?;", (username,))
        row = fetch_one(cur)
        return UserRecord(**row) if row else None

    def create(self, username: str) -> UserRecord:
        cur = self.conn.execute("INSERT INTO users (username) VALUES (?);", (username,))
        self.conn.commit()
        return UserRecord(id=int(cur.lastrowid), username=username)
