from __future__ import annotations

from pipelines.runner import RunContext
from profile_extractor import extract_profile, placeholder_fields


class ExtractProfile:
    def run(self, ctx: RunContext) -> RunContext:
        ctx.profile = extract_profile(ctx.raw_text or "")
        ctx.meta["placeholder_fields"] = placeholder_fields(ctx.profile)
        return ctx
