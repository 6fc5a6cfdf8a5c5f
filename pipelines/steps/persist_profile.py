from __future__ import annotations

import sqlite3

from db.repos.profiles_repo import ProfilesRepo
from pipelines.runner import RunContext
from ports.repos import ProfilesRepoPort


class PersistProfile:
    """Create or overwrite the owner's profile from ctx.profile."""

    def __init__(self, conn: sqlite3.Connection, user_id: int) -> None:
        self.repo: ProfilesRepoPort = ProfilesRepo(conn)
        self.user_id = user_id

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.profile is None:
            raise ValueError("No extracted profile to persist")
        ctx.stored = self.repo.upsert(self.user_id, ctx.profile)
        ctx.meta["profile_id"] = ctx.stored.id
        return ctx
