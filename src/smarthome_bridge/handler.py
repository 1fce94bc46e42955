"""
AWS Lambda entry point for the smart-home skill.
"""

from functools import lru_cache
from typing import Any, Optional

from smarthome_bridge.client import SmartHomeBridge
from smarthome_bridge.logs import configure_logging


@lru_cache(maxsize=1)
def _bridge() -> SmartHomeBridge:
    # configuration is read once per process
    configure_logging()
    return SmartHomeBridge()


def lambda_handler(event: dict[str, Any], context: Any = None) -> Optional[dict[str, Any]]:
    return _bridge().handle(event)
