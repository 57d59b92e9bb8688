"""
Client Configuration

Reads AWIN_* settings from the environment (and a local .env file).
"""

from dataclasses import dataclass
from typing import Optional

from .coreutils.env import env_get, env_get_bool
from .exceptions import AwinConfigError

DEFAULT_ENDPOINT = "https://api.awin.com"


def _int_setting(key: str, default: Optional[int]) -> Optional[int]:
    value = env_get(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise AwinConfigError(f"{key} must be an integer, got {value!r}")


@dataclass
class ClientConfig:
    """Per-client settings"""

    auth_token: str
    publisher_id: int
    timeout: int = 10
    api_calls_limit: int = 20
    verbose_commission_groups: bool = False
    endpoint: str = DEFAULT_ENDPOINT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from AWIN_* environment variables"""
        auth_token = env_get("AWIN_AUTH_TOKEN")
        if not auth_token:
            raise AwinConfigError("AWIN_AUTH_TOKEN environment variable is not set")

        publisher_id = _int_setting("AWIN_PUBLISHER_ID", None)
        if publisher_id is None:
            raise AwinConfigError("AWIN_PUBLISHER_ID environment variable is not set")

        return cls(
            auth_token=auth_token,
            publisher_id=publisher_id,
            timeout=_int_setting("AWIN_TIMEOUT", 10),
            api_calls_limit=_int_setting("AWIN_API_CALLS_LIMIT", 20),
            verbose_commission_groups=env_get_bool("AWIN_VERBOSE_COMMISSION_GROUPS"),
            endpoint=env_get("AWIN_ENDPOINT", DEFAULT_ENDPOINT),
        )
