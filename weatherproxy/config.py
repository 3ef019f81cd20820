"""Process-wide configuration handed to the request handling stack."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_PORT = 8081


@dataclass(frozen=True)
class ProxyConfig:
    """Values resolved once at startup.

    ``timeout`` of ``None`` leaves the upstream call unbounded, which is the
    transport default.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    port: int = DEFAULT_PORT
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Any) -> "ProxyConfig":
        return cls(
            api_key=settings.OWM_KEY,
            base_url=getattr(settings, "OWM_BASE_URL", DEFAULT_BASE_URL),
            port=int(getattr(settings, "PROXY_PORT", DEFAULT_PORT)),
            timeout=getattr(settings, "OWM_TIMEOUT", None),
        )

    def __repr__(self) -> str:
        return f"ProxyConfig(base_url={self.base_url!r}, port={self.port}, timeout={self.timeout})"
