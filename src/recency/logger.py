"""Root logging setup for applications and CLI runs that use the cache."""

import logging
import os
import sys
from typing import Optional, Union

from rich.logging import RichHandler

TRACE_LOGGER = "recency.trace"

DEBUG_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s"


def is_rich_enabled() -> bool:
    """True when RECENCY_RICH_UI asks for Rich-rendered log output."""
    return os.environ.get("RECENCY_RICH_UI", "false").lower() in ("true", "1", "yes")


def _env_level() -> Optional[str]:
    return os.environ.get("RECENCY_LOG_LEVEL") or os.environ.get("LOG_LEVEL")


def setup_logging(
    level: Union[int, str] = logging.INFO, stream=sys.stdout, fmt: Optional[str] = None
):
    """
    Attach a handler to the root logger unless one is already configured.

    Host applications that set up logging first keep their handlers; only the
    level override from RECENCY_LOG_LEVEL (or LOG_LEVEL) is still applied.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    if not root_logger.hasHandlers():
        if is_rich_enabled():
            handler = RichHandler(rich_tracebacks=True, show_path=False)
        else:
            handler = logging.StreamHandler(stream)
            if fmt is None:
                fmt = DEBUG_FORMAT if level == logging.DEBUG else DEFAULT_FORMAT
            handler.setFormatter(logging.Formatter(fmt))

        root_logger.setLevel(level)
        root_logger.addHandler(handler)

    env_level = _env_level()
    if env_level:
        root_logger.setLevel(env_level.upper())


def enable_trace(enabled: bool = True) -> None:
    """Open or close the trace logger.

    Caches only produce trace lines when built with ``trace=True``; this
    decides whether those lines get past the ``recency.trace`` logger.
    """
    logging.getLogger(TRACE_LOGGER).setLevel(
        logging.DEBUG if enabled else logging.WARNING
    )
