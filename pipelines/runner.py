from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Protocol, List, Optional

from models.profile_record import ProfileRecord
from models.stored_profile import StoredProfile
from utils.logging_setup import init_logging


@dataclass
class RunContext:
    document: Optional[bytes] = None
    filename: Optional[str] = None
    content_type: Optional[str] = None
    raw_text: Optional[str] = None
    profile: Optional[ProfileRecord] = None
    stored: Optional[StoredProfile] = None
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        logger = logging.getLogger("pipeline")
        for step in self.steps:
            name = type(step).__name__
            owner_id = ctx.meta.get("owner_id", "-")
            started = time.perf_counter()
            try:
                ctx = step.run(ctx)
            except Exception as e:
                duration_ms = int((time.perf_counter() - started) * 1000)
                logger.error(
                    "step failed",
                    extra={
                        "step": name,
                        "status": "error",
                        "duration_ms": duration_ms,
                        "owner_id": owner_id,
                        "error": str(e),
                    },
                )
                raise
            duration_ms = int((time.perf_counter() - started) * 1000)
            logger.info(
                "step done",
                extra={"step": name, "status": "ok", "duration_ms": duration_ms, "owner_id": owner_id},
            )
        return ctx
