"""
Configuration for the Dialpad client.

Settings can be passed explicitly or read from the environment:

    DIALPAD_API_KEY        API token
    DIALPAD_ENVIRONMENT    "live" or "sandbox" (default: sandbox)
    DIALPAD_BASE_URL       Explicit base address, overrides the environment
    DIALPAD_COMPANY_ID     Company ID sent as the DP-Company-ID header
    DIALPAD_TIMEOUT        Request timeout in seconds
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

HOSTS = {
    "live": "https://dialpad.com",
    "sandbox": "https://sandbox.dialpad.com",
}

DEFAULT_ENVIRONMENT = "sandbox"
API_VERSION = "v2"

ENV_PREFIX = "DIALPAD_"


@dataclass
class DialpadConfig:
    """Client configuration."""

    token: str = ""
    environment: str = DEFAULT_ENVIRONMENT
    base_url: Optional[str] = None
    company_id: Optional[Union[str, int]] = None
    timeout: Optional[float] = None
    verify_ssl: bool = True
    headers: Dict[str, str] = field(default_factory=dict)
    proxies: Dict[str, str] = field(default_factory=dict)

    @property
    def host(self) -> str:
        """Resolved base address; an explicit base_url wins over the environment."""
        if self.base_url:
            return self.base_url.rstrip("/")
        try:
            return HOSTS[self.environment]
        except KeyError:
            raise ConfigurationError(
                f"Unknown environment '{self.environment}'",
                details=f"Expected one of: {', '.join(HOSTS)}"
            ) from None

    @property
    def api_root(self) -> str:
        """Root URL of the versioned API."""
        return f"{self.host}/api/{API_VERSION}"

    def is_configured(self) -> bool:
        """Check if an API token is available."""
        return bool(self.token)

    @classmethod
    def from_env(cls, **overrides: Any) -> "DialpadConfig":
        """
        Build a configuration from DIALPAD_* environment variables.

        Keyword overrides take precedence; None values are ignored.
        """
        values: Dict[str, Any] = {}

        token = os.environ.get(f"{ENV_PREFIX}API_KEY")
        if token:
            values["token"] = token
        environment = os.environ.get(f"{ENV_PREFIX}ENVIRONMENT")
        if environment:
            values["environment"] = environment.lower()
        base_url = os.environ.get(f"{ENV_PREFIX}BASE_URL")
        if base_url:
            values["base_url"] = base_url
        company_id = os.environ.get(f"{ENV_PREFIX}COMPANY_ID")
        if company_id:
            values["company_id"] = company_id
        timeout = os.environ.get(f"{ENV_PREFIX}TIMEOUT")
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid {ENV_PREFIX}TIMEOUT value: {timeout!r}")

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def get_config(**overrides: Any) -> DialpadConfig:
    """Get a configuration from the environment."""
    return DialpadConfig.from_env(**overrides)
