"""JSON log lines carrying trace ids and engine context.

Engine log calls attach context through ``extra=``: ``doc_id`` for document
operations, ``search.index`` and ``search.total`` for index and search
operations. :class:`JsonFormatter` lifts those keys into the emitted object
next to the trace ids of the surrounding search span.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import sys
from typing import TYPE_CHECKING, Any

import orjson

from facet_search.observability.context import get_trace_context


if TYPE_CHECKING:
    from facet_search.config import Settings


# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__.keys() | {"message", "asctime"}
)


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    MAX_MESSAGE_LEN = 2000
    MAX_FIELD_LEN = 500

    def format(self, record: logging.LogRecord) -> str:
        ids = get_trace_context()
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._clip(record.getMessage(), self.MAX_MESSAGE_LEN),
            "trace_id": ids["trace_id"],
            "span_id": ids["span_id"],
        }
        if record.name.startswith("facet_search."):
            entry["component"] = record.name.rsplit(".", 1)[-1]

        entry.update(
            (key, self._clip(value, self.MAX_FIELD_LEN) if isinstance(value, str) else value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        )

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return orjson.dumps(entry, default=self._json_default).decode()

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        return text if len(text) <= limit else text[:limit] + "..."

    @staticmethod
    def _json_default(value: Any) -> Any:
        if isinstance(value, set | frozenset):
            try:
                return sorted(value)
            except TypeError:
                return list(value)
        return str(value)


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    *,
    logger_levels: dict[str, str] | None = None,
) -> None:
    """Replace the root handlers with a single stdout handler.

    Args:
        level: Root log level name; unknown names fall back to INFO.
        json_output: Use :class:`JsonFormatter` when True, plain text otherwise.
        logger_levels: Per-logger level overrides, e.g. ``{"facet_search.engine": "debug"}``.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for existing in root.handlers[:]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JsonFormatter() if json_output else logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    root.addHandler(handler)

    # Provider-override warnings from init_tracing
    logging.getLogger("opentelemetry").setLevel(logging.ERROR)

    for name, name_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(getattr(logging, name_level.upper(), logging.INFO))


def configure_logging_from_settings(settings: Settings) -> None:
    """Apply ``log_level`` and ``log_json`` from engine settings."""
    configure_logging(settings.log_level, settings.log_json)
