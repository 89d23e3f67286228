from __future__ import annotations

import logging
import sys
from contextvars import ContextVar

from app.core.config import settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(request_id)s] %(name)s : %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp every record with the id of the request being handled."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def configure_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    # Idempotent: the app module may be imported more than once under test runners
    for h in root.handlers:
        if getattr(h, "_yorez_handler", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    handler._yorez_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
