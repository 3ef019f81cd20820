"""REST API view serving the temperature feel for a coordinate pair."""
from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache
import logging
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherproxy.config import ProxyConfig
from weatherproxy.core.abstractions import ErrorReport, WeatherService
from weatherproxy.core.errors import WeatherFeelError
from weatherproxy.core.providers.openweather import OpenWeatherProvider
from weatherproxy.core.services.feel_service import TemperatureFeelService
from weatherproxy.core.validation import parse_coordinates


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_proxy_config() -> ProxyConfig:
    return ProxyConfig.from_settings(settings)


@lru_cache(maxsize=1)
def get_feel_service() -> TemperatureFeelService:
    return TemperatureFeelService(OpenWeatherProvider.from_config(get_proxy_config()))


class WeatherFeelView(APIView):
    """Report the condition and temperature feel at the requested coordinates.

    Failures are answered with an error body but still with HTTP 200, which
    existing clients rely on.
    """

    permission_classes = [AllowAny]
    service: Optional[WeatherService] = None

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the temperature feel for ``lat``/``lon``."""
        if self.service is None:
            raise ImproperlyConfigured("WeatherFeelView requires a service")
        try:
            coordinates = parse_coordinates(request.query_params)
            report = self.service.describe(coordinates)
        except WeatherFeelError as exc:
            logger.info("%s", exc.message)
            return Response(asdict(ErrorReport(message=exc.message)), status=status.HTTP_200_OK)
        return Response(asdict(report), status=status.HTTP_200_OK)
