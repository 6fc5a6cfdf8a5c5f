from __future__ import annotations

from typing import Optional

from config.settings import Settings
from document_text import acquire_profile_text
from pipelines.runner import RunContext


class AcquireText:
    """Convert the uploaded document to plain text (sample text in demo mode)."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.raw_text is not None:
            return ctx
        ctx.raw_text = acquire_profile_text(
            ctx.document or b"",
            filename=ctx.filename,
            content_type=ctx.content_type,
            settings=self.settings,
        )
        ctx.meta["text_chars"] = len(ctx.raw_text)
        return ctx
