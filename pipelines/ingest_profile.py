from __future__ import annotations

import sqlite3
from typing import Optional

from config.settings import Settings, get_settings
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import AcquireText, ExtractProfile, PersistProfile


def ingest_profile(
    conn: sqlite3.Connection,
    data: bytes,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> RunContext:
    """Run the upload flow: document bytes -> text -> ProfileRecord -> stored profile.

    Returns the final RunContext; ctx.stored holds the persisted profile.
    """
    settings = settings or get_settings()
    ctx = RunContext(document=data, filename=filename, content_type=content_type)
    ctx.meta["owner_id"] = settings.owner_user_id
    pipeline = Pipeline([
        AcquireText(settings),
        ExtractProfile(),
        PersistProfile(conn, settings.owner_user_id),
    ])
    return pipeline.run(ctx)
