"""Service that turns current conditions into a temperature feel report."""
from __future__ import annotations

from weatherproxy.core.abstractions import Coordinates, FeelReport, WeatherProvider, WeatherService
from weatherproxy.core.classifier import classify_temperature


class TemperatureFeelService(WeatherService):
    """Ask a single provider for conditions and classify the temperature.

    Provider errors are not handled here; they reach the API layer unchanged.
    """

    def __init__(self, provider: WeatherProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> WeatherProvider:
        return self._provider

    def describe(self, coordinates: Coordinates) -> FeelReport:
        report = self._provider.get_weather(coordinates)
        return FeelReport(
            condition=report.condition,
            temperature_feel=classify_temperature(report.temperature_c),
        )


__all__ = ["TemperatureFeelService"]
