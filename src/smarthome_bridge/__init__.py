"""
alexa-smarthome-bridge: voice-assistant smart-home adapter.

Translates v2/v3 smart-home directives into home-cloud HTTPS calls and
the cloud's JSON replies back into response envelopes.
"""

from smarthome_bridge.client import SmartHomeBridge, AsyncSmartHomeBridge
from smarthome_bridge.config import BridgeConfig
from smarthome_bridge.router import DirectiveRouter, parse_request, request_version
from smarthome_bridge.errors import (
    BridgeError,
    ConfigError,
    InvalidDirectiveError,
    DispatchError,
    BackendUnavailableError,
    BackendResponseError,
)
from smarthome_bridge.models.constants import ErrorType, MessageName, Namespace, PayloadVersion

__version__ = "0.1.0"
__all__ = [
    "SmartHomeBridge",
    "AsyncSmartHomeBridge",
    "BridgeConfig",
    "DirectiveRouter",
    "parse_request",
    "request_version",
    "BridgeError",
    "ConfigError",
    "InvalidDirectiveError",
    "DispatchError",
    "BackendUnavailableError",
    "BackendResponseError",
    "ErrorType",
    "MessageName",
    "Namespace",
    "PayloadVersion",
]
