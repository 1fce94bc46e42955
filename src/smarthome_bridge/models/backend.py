"""
Home-cloud backend request/reply models.
"""

from typing import Any, Optional

from pydantic import BaseModel

from smarthome_bridge.models.constants import RES_CODE_UNAUTHORIZED


class BackendRequest(BaseModel):
    """Outbound request descriptor: one per inbound directive."""
    hostname: str
    port: int
    path: str
    method: str = "GET"
    headers: dict[str, str] = {}
    body: Optional[str] = None  # JSON-serialized inbound directive (POST only)


class BackendReply(BaseModel):
    status_code: int
    data: dict[str, Any] = {}

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @property
    def res_code(self) -> Optional[int]:
        value = self.data.get("res_code")
        try:
            return int(value) if value is not None else None
        except (TypeError, ValueError):
            return None

    @property
    def unauthorized(self) -> bool:
        return self.res_code == RES_CODE_UNAUTHORIZED
