"""OpenWeather current conditions client."""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, TypeVar

import requests

from weatherproxy.config import DEFAULT_BASE_URL, ProxyConfig
from weatherproxy.core.abstractions import (
    Coordinates,
    ProviderFailure,
    WeatherProvider,
    WeatherReport,
)
from weatherproxy.core.errors import InternalError, UpstreamError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class OpenWeatherProvider(WeatherProvider):
    """Integration with the OpenWeather current weather endpoint.

    One GET per call, no retries. Transport and decoding failures surface as
    :class:`InternalError`; a decodable error body surfaces as
    :class:`UpstreamError` carrying the provider's message.
    """

    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: ProxyConfig, session: Optional[requests.Session] = None) -> "OpenWeatherProvider":
        return cls(api_key=config.api_key, base_url=config.base_url, timeout=config.timeout, session=session)

    def get_weather(self, coordinates: Coordinates) -> WeatherReport:  # noqa: D401
        """Return current conditions from OpenWeather."""
        params = {
            "units": "metric",
            "lat": f"{coordinates.latitude:f}",
            "lon": f"{coordinates.longitude:f}",
            "appid": self.api_key,
        }
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout, stream=True)
        except requests.RequestException as exc:
            logger.error("get weather: %s", self._redact(exc))
            raise InternalError() from exc

        with response:
            try:
                body = response.content
            except requests.RequestException as exc:
                logger.error("read response body: %s", self._redact(exc))
                raise InternalError() from exc

        if response.status_code != requests.codes.ok:
            failure = self._decode(body, ProviderFailure.from_payload, "unmarshal error response body")
            logger.warning("non-200 response: %s %s", failure.code, failure.message)
            raise UpstreamError(failure.message)

        return self._decode(body, WeatherReport.from_payload, "unmarshal response body")

    def _decode(self, body: bytes, build: Callable[[Any], T], context: str) -> T:
        try:
            return build(json.loads(body))
        except (ValueError, OverflowError) as exc:
            logger.error("%s: %s", context, exc, exc_info=exc)
            raise InternalError() from exc

    def _redact(self, exc: Exception) -> str:
        # Transport errors echo the request URL, which carries the credential.
        return str(exc).replace(self.api_key, "***")


__all__ = ["OpenWeatherProvider"]
