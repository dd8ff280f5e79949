"""
Workflow utilities: logging setup, structured logging, graceful shutdown.
"""
import json
import logging
import signal
from typing import Any

logger = logging.getLogger(__name__)

_shutdown_requested = False


def request_shutdown() -> bool:
    """Check if shutdown was requested (e.g. SIGTERM)."""
    return _shutdown_requested


def _set_shutdown_requested(*_args: Any) -> None:
    global _shutdown_requested
    _shutdown_requested = True


def setup_graceful_shutdown() -> None:
    """Register SIGTERM/SIGINT handlers for graceful exit."""
    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            signal.signal(sig, _set_shutdown_requested)
        except (AttributeError, ValueError):
            pass  # Windows or not main thread


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s: %(message)s",
    )


def log_structured(level: str, **kwargs: Any) -> None:
    """Emit structured (JSON) log line for request monitoring."""
    record = {"level": level, **kwargs}
    line = json.dumps(record, ensure_ascii=False)
    if level == "error":
        logger.error("%s", line)
    elif level == "warning":
        logger.warning("%s", line)
    else:
        logger.info("%s", line)
