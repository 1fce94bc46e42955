"""
Bridge error types.

Credential and transport failures are translated into response payloads by
the handlers; these exceptions only surface for broken configuration,
malformed directives and unparsable backend bodies.
"""

from typing import Any, Optional


class BridgeError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConfigError(BridgeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("config_error", message, details)


class InvalidDirectiveError(BridgeError):
    def __init__(self, message: str, code: str = "invalid_directive", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class DispatchError(BridgeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("dispatch_error", message, details)


class BackendUnavailableError(BridgeError):
    def __init__(self, message: str):
        super().__init__("backend_unavailable", message)


class BackendResponseError(BridgeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("backend_response_error", message, details)
