"""Structured Logging — formatters, setup and section timing for the demo runner.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Demo fields (section, elapsed_ms, digit_count, error_kind) surfaced when present,
      as JSON keys or as trailing key=value pairs in text mode
    - setup_logging replaces the handler it installed before, never duplicates it

The arithmetic core never logs; only the runner configures handlers.
"""

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterator, Optional, TextIO

DEMO_FIELDS = ("section", "elapsed_ms", "digit_count", "error_kind")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_HANDLER_MARK = "_bigint_demo_handler"


def _demo_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: record.__dict__[key]
        for key in DEMO_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record; timestamp taken from the record itself."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(_demo_fields(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class KeyValueFormatter(logging.Formatter):
    """Human-readable line with demo fields appended as key=value."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _demo_fields(record)
        if not fields:
            return line
        # Трассировка исключения (если есть) остаётся последней
        head, sep, tail = line.partition("\n")
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{head} {pairs}{sep}{tail}"


def setup_logging(
    level: str = "INFO", fmt: str = "text", stream: Optional[TextIO] = None
) -> logging.Handler:
    """Configure root logging for the runner and return the installed handler.

    Raises:
        ValueError: unknown level name or format
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    if fmt not in ("json", "text"):
        raise ValueError(f"Unknown log format: {fmt}")

    root = logging.getLogger()
    for old in [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]:
        root.removeHandler(old)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter() if fmt == "json" else KeyValueFormatter())
    setattr(handler, _HANDLER_MARK, True)

    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name))
    return handler


@dataclass
class SectionTiming:
    """Filled in by timed_section; extra holds fields added inside the block."""

    section: str
    elapsed_ms: float = 0.0
    extra: dict[str, Any] = field(default_factory=dict)


@contextmanager
def timed_section(logger: logging.Logger, section: str) -> Iterator[SectionTiming]:
    """Log "section completed" at INFO with elapsed_ms once the block succeeds.

    Exceptions propagate unlogged; the caller's boundary reports them.
    """
    timing = SectionTiming(section=section)
    start = time.perf_counter()
    yield timing
    timing.elapsed_ms = round((time.perf_counter() - start) * 1000.0, 3)
    logger.info(
        "section completed",
        extra={"section": section, "elapsed_ms": timing.elapsed_ms, **timing.extra},
    )
