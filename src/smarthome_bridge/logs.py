"""
Logging helpers: titled, pretty-printed JSON blocks for request tracing.
"""

import json
import logging
import os
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
REDACTED = "***"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler. Level defaults to $BRIDGE_LOG_LEVEL or INFO."""
    name = (level or os.environ.get("BRIDGE_LOG_LEVEL") or "INFO").upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(getattr(logging, name, logging.INFO))


def dumps(obj: Any) -> str:
    if isinstance(obj, (bytes, bytearray)):
        return obj.decode("utf-8", errors="replace")
    try:
        return json.dumps(obj, indent=2, sort_keys=True, default=str)
    except (TypeError, ValueError):
        return repr(obj)


def log_json(logger: logging.Logger, title: str, obj: Any, level: int = logging.INFO) -> None:
    if not logger.isEnabledFor(level):
        return
    logger.log(level, "%s\n%s", title, dumps(obj))


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {k: (REDACTED if k.lower() == "token" else v) for k, v in headers.items()}
