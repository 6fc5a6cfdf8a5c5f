from __future__ import annotations

import sqlite3
from typing import Any, Dict, Optional

from db.rows import dumps_json, fetch_one, loads_json, update_columns
from models.profile_record import ProfileRecord
from models.stored_profile import StoredProfile

TEXT_COLUMNS = (
    "name",
    "headline",
    "location",
    "industry",
    "current_job_title",
    "current_company",
    "summary",
    "avatar_url",
)
JSON_FIELDS = ("experience", "education", "skills", "certifications")


def _to_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Map profile field names to column values; unknown keys are dropped."""
    columns: Dict[str, Any] = {}
    for key, value in fields.items():
        if key in TEXT_COLUMNS:
            columns[key] = value
        elif key in JSON_FIELDS:
            columns[f"{key}_json"] = dumps_json(value if value is not None else [])
    return columns


def _to_profile(row: Dict[str, Any]) -> StoredProfile:
    data = {k: v for k, v in row.items() if not k.endswith("_json")}
    for key in JSON_FIELDS:
        data[key] = loads_json(row.get(f"{key}_json"), [])
    return StoredProfile(**data)


class ProfilesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, profile_id: int) -> Optional[StoredProfile]:
        cur = self.conn.execute("SELECT * FROM profiles WHERE id = ?;", (profile_id,))
        row = fetch_one(cur)
        return _to_profile(row) if row else None

    def get_by_user(self, user_id: int) -> Optional[StoredProfile]:
        cur = self.conn.execute("SELECT * FROM profiles WHERE user_id = ?;", (user_id,))
        row = fetch_one(cur)
        return _to_profile(row) if row else None

    def create(self, user_id: int, fields: Dict[str, Any]) -> StoredProfile:
        columns = _to_columns(fields)
        names = ", ".join(["user_id", *columns])
        marks = ", ".join("?" for _ in range(len(columns) + 1))
        cur = self.conn.execute(
            f"INSERT INTO profiles ({names}) VALUES ({marks});",
            (user_id, *columns.values()),
        )
        self.conn.commit()
        return self.get(int(cur.lastrowid))  # type: ignore[return-value]

    def update(self, profile_id: int, fields: Dict[str, Any]) -> StoredProfile:
        """Merge the given fields into an existing profile; raises KeyError if it is missing."""
        if self.get(profile_id) is None:
            raise KeyError(f"Profile with id {profile_id} not found")
        update_columns(self.conn, "profiles", profile_id, _to_columns(fields))
        return self.get(profile_id)  # type: ignore[return-value]

    def upsert(self, user_id: int, record: ProfileRecord) -> StoredProfile:
        """Create the user's profile or overwrite its extracted fields.

        Hand-edited fields the extractor does not produce (summary, certifications,
        avatar_url) and created_at survive a re-upload.
        """
        columns = _to_columns(record.model_dump())
        names = ", ".join(["user_id", *columns])
        marks = ", ".join("?" for _ in range(len(columns) + 1))
        updates = ", ".join(f"{name} = excluded.{name}" for name in columns)
        self.conn.execute(
            f"INSERT INTO profiles ({names}) VALUES ({marks}) "
            f"ON CONFLICT(user_id) DO UPDATE SET {updates};",
            (user_id, *columns.values()),
        )
        self.conn.commit()
        return self.get_by_user(user_id)  # type: ignore[return-value]
