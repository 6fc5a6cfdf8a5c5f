from __future__ import annotations

import sqlite3
from typing import Optional


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open a SQLite connection for one request or CLI command.

    - check_same_thread off: FastAPI may resolve the dependency and run the
      handler on different worker threads, but never concurrently
    - WAL journal for fewer writer blocks
    """
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0, check_same_thread=False)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    conn.execute("PRAGMA foreign_keys=ON;")
    return conn
