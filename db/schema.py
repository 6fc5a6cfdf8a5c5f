from __future__ import annotations

import sqlite3

DEMO_USERNAME = "demo"


def bootstrap(conn: sqlite3.Connection, owner_user_id: int = 1) -> None:
    """Create tables and indexes, and seed the owner user (idempotent)."""
    cur = conn.cursor()

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS users (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  username TEXT NOT NULL UNIQUE\n"
            ")"
        )
    )

    # One profile per user; upserts key on user_id
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS profiles (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  user_id INTEGER NOT NULL UNIQUE,\n"
            "  name TEXT NOT NULL,\n"
            "  headline TEXT,\n"
            "  location TEXT,\n"
            "  industry TEXT,\n"
            "  current_job_title TEXT,\n"
            "  current_company TEXT,\n"
            "  summary TEXT,\n"
            "  experience_json TEXT NOT NULL DEFAULT '[]',\n"
            "  education_json TEXT NOT NULL DEFAULT '[]',\n"
            "  skills_json TEXT NOT NULL DEFAULT '[]',\n"
            "  certifications_json TEXT NOT NULL DEFAULT '[]',\n"
            "  avatar_url TEXT,\n"
            "  created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now')),\n"
            "  FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE\n"
            ")"
        )
    )

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS interests (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  user_id INTEGER NOT NULL UNIQUE,\n"
            "  topics_json TEXT NOT NULL DEFAULT '[]',\n"
            "  skills_json TEXT NOT NULL DEFAULT '[]',\n"
            "  created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now')),\n"
            "  FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE\n"
            ")"
        )
    )

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS career_goals (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  user_id INTEGER NOT NULL UNIQUE,\n"
            "  desired_role TEXT,\n"
            "  industry TEXT,\n"
            "  location TEXT,\n"
            "  salary_range TEXT,\n"
            "  created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now')),\n"
            "  FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE\n"
            ")"
        )
    )

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS saved_items (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  user_id INTEGER NOT NULL,\n"
            "  item_type TEXT NOT NULL,\n"
            "  item_id TEXT NOT NULL,\n"
            "  item_data_json TEXT NOT NULL DEFAULT '{}',\n"
            "  created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now')),\n"
            "  FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_saved_items_user_type ON saved_items(user_id, item_type);")

    # Single-tenant demo: one user owns every record
    username = DEMO_USERNAME if owner_user_id == 1 else f"{DEMO_USERNAME}-{owner_user_id}"
    cur.execute("INSERT OR IGNORE INTO users (id, username) VALUES (?, ?);", (owner_user_id, username))

    conn.commit()
