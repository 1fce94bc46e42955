"""
Backend configuration, loaded once at process start and passed to the router.
"""

from typing import Mapping, Optional

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from smarthome_bridge.errors import ConfigError

DEFAULT_PORT = 443
DEFAULT_REGION = "NA"
DEFAULT_TIMEOUT_S = 8.0
BASE_PATH = "/v1"


class BridgeConfig(BaseSettings):
    model_config = SettingsConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    hostname: str = Field(min_length=1, validation_alias="HOME_CLOUD_HOSTNAME")
    auth_hostname: str = Field(default="", validation_alias="HOME_CLOUD_AUTH_HOSTNAME")
    port: int = Field(default=DEFAULT_PORT, validation_alias="HOME_CLOUD_PORT")
    region: str = Field(default=DEFAULT_REGION, validation_alias="ALEXA_REGION")
    timeout: float = Field(default=DEFAULT_TIMEOUT_S, gt=0, validation_alias="HOME_CLOUD_TIMEOUT")
    scheme: str = Field(default="https", validation_alias="HOME_CLOUD_SCHEME")

    @model_validator(mode="after")
    def _default_auth_hostname(self) -> "BridgeConfig":
        # v3 discovery/authorize share the generic host unless told otherwise
        if not self.auth_hostname:
            self.auth_hostname = self.hostname
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BridgeConfig":
        """Build the config from HOME_CLOUD_* / ALEXA_REGION variables.

        Reads the process environment unless an explicit mapping is given.
        Blank values count as unset.
        """
        try:
            if environ is None:
                return cls()
            return cls.model_validate({k: v for k, v in environ.items() if v.strip()})
        except ValidationError as e:
            raise ConfigError(f"Invalid backend configuration: {e}", details={"errors": e.errors()})
