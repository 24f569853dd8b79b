"""Logging setup for the analysis pipeline.

Records carry the analysis ``request_id`` and the current pipeline ``stage`` so that the
fetch, extract, generate and parse lines of one request can be read together. Handlers
installed by :func:`configure_logging` also scrub ``key=`` query credentials, since the
Gemini endpoint takes its API key in the URL.
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
import re
from collections.abc import Iterator
from typing import Any

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s req=%(request_id)s stage=%(stage)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
REDACTED = "***"

# Loggers that print full request URLs at INFO.
_URL_LOGGERS = ("httpx", "httpcore")

_request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("skeptic_request_id", default="-")
_stage_var: contextvars.ContextVar[str] = contextvars.ContextVar("skeptic_stage", default="-")

_KEY_PARAM_RE = re.compile(r"([?&](?:key|api_key|apikey)=)[^&\s'\"]+", re.IGNORECASE)


def redact_secrets(text: str) -> str:
    """Mask credential query parameters in ``text``."""

    return _KEY_PARAM_RE.sub(rf"\g<1>{REDACTED}", text)


class _ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = _request_id_var.get()  # type: ignore[attr-defined]
        record.stage = _stage_var.get()  # type: ignore[attr-defined]
        return True


class _RedactFilter(logging.Filter):
    """Render the message once and mask any credentials in it."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        message = record.getMessage()
        cleaned = redact_secrets(message)
        if cleaned != message:
            record.msg = cleaned
            record.args = None
        return True


@contextlib.contextmanager
def analysis_context(*, request_id: str, stage: str | None = None) -> Iterator[None]:
    """Bind ``request_id`` (and optionally ``stage``) to every record logged inside."""

    token_request = _request_id_var.set(request_id)
    token_stage = _stage_var.set(stage or _stage_var.get())
    try:
        yield
    finally:
        _request_id_var.reset(token_request)
        _stage_var.reset(token_stage)


def set_stage(stage: str) -> None:
    _stage_var.set(stage)


def current_context() -> tuple[str, str]:
    """Return the bound ``(request_id, stage)``."""

    return _request_id_var.get(), _stage_var.get()


def _prepare(handler: logging.Handler) -> None:
    # Filters are replaced rather than appended so repeated configuration stays idempotent.
    for existing in list(handler.filters):
        if isinstance(existing, (_ContextFilter, _RedactFilter)):
            handler.removeFilter(existing)
    handler.addFilter(_ContextFilter())
    handler.addFilter(_RedactFilter())
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))


def configure_logging(level: str = "INFO") -> None:
    """Install a rich console handler on the root logger.

    Args:
        level: Logging level name.
    """

    root = logging.getLogger()
    root.setLevel(level)

    handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
    if not handlers:
        handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
        root.addHandler(handler)
        handlers = [handler]
    for handler in handlers:
        _prepare(handler)

    for name in _URL_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log the active exception with the pipeline stage it was raised in."""

    request_id, stage = current_context()
    context.setdefault("request_id", request_id)
    logger.exception("%s | stage=%s context=%s", msg, stage, context)
