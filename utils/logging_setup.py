from __future__ import annotations

import logging
import sys

from config.settings import get_settings


# Structured fields the pipeline and API attach via `extra=`; rendered as key=value
EXTRA_FIELDS = ("step", "status", "duration_ms", "owner_id", "error")

_INITIALIZED: bool = False


class SafeExtraFormatter(logging.Formatter):
    """Formatter that renders a missing extra field as '-' instead of failing."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key in EXTRA_FIELDS:
            if not hasattr(record, key):
                setattr(record, key, "-")
        return super().format(record)


def _format_string() -> str:
    suffix = " ".join(f"{key}=%({key})s" for key in EXTRA_FIELDS)
    return f"%(asctime)s %(levelname)s %(name)s %(message)s {suffix}"


def init_logging(level: str | None = None) -> None:
    """Configure the root logger once; later calls are no-ops.

    Logs go to stderr so the CLI can keep stdout for JSON output.
    """
    global _INITIALIZED
    if _INITIALIZED:
        return

    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)
        handler.setFormatter(SafeExtraFormatter(fmt=_format_string()))
        root_logger.addHandler(handler)

    _INITIALIZED = True
