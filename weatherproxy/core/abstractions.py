"""Core abstractions for the temperature feel domain."""
from __future__ import annotations

from dataclasses import dataclass
import math
import re
import struct
from typing import Any, Protocol, Tuple


def to_float32(value: float) -> float:
    """Round ``value`` to single precision.

    Raises ``OverflowError`` when the value does not fit in a float32.
    """

    result = struct.unpack("f", struct.pack("f", value))[0]
    if math.isinf(result) and not math.isinf(value):
        raise OverflowError(f"{value!r} is out of float32 range")
    return result


# JSON number grammar; error codes may arrive as numeric text.
_NUMERIC_TEXT = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair at 32-bit precision. No range checks apply."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherCondition:
    main: str


@dataclass(frozen=True)
class WeatherReport:
    """Current conditions as returned by the provider's success body."""

    conditions: Tuple[WeatherCondition, ...]
    temperature_c: float

    @property
    def condition(self) -> str:
        return self.conditions[0].main

    @classmethod
    def from_payload(cls, payload: Any) -> "WeatherReport":
        if not isinstance(payload, dict):
            raise ValueError("response body must be an object")

        weather = payload.get("weather")
        if not isinstance(weather, list) or not weather:
            raise ValueError("missing weather conditions in response")
        conditions = []
        for entry in weather:
            main = entry.get("main") if isinstance(entry, dict) else None
            if not isinstance(main, str):
                raise ValueError("weather condition without main label")
            conditions.append(WeatherCondition(main=main))

        main = payload.get("main")
        temperature = main.get("temp") if isinstance(main, dict) else None
        if not _is_number(temperature):
            raise ValueError("missing main.temp in response")
        if not math.isfinite(temperature):
            raise ValueError("main.temp is not a finite number")

        return cls(conditions=tuple(conditions), temperature_c=to_float32(float(temperature)))


@dataclass(frozen=True)
class ProviderFailure:
    """Error body sent by the provider alongside a non-200 status."""

    code: str
    message: str

    @classmethod
    def from_payload(cls, payload: Any) -> "ProviderFailure":
        if not isinstance(payload, dict):
            raise ValueError("error body must be an object")
        code = payload.get("cod")
        message = payload.get("message")
        if isinstance(code, str):
            if not _NUMERIC_TEXT.fullmatch(code):
                raise ValueError("cod is not numeric text")
        elif not _is_number(code):
            raise ValueError("missing cod in error body")
        if not isinstance(message, str):
            raise ValueError("missing message in error body")
        return cls(code=str(code), message=message)


@dataclass(frozen=True)
class FeelReport:
    """Outbound success body. ``status`` stays empty on success."""

    status: str = ""
    condition: str = ""
    temperature_feel: str = ""


@dataclass(frozen=True)
class ErrorReport:
    """Outbound error body."""

    status: str = "error"
    message: str = ""


class WeatherProvider(Protocol):
    """A data source capable of returning current conditions."""

    name: str

    def get_weather(self, coordinates: Coordinates) -> WeatherReport:
        """Fetch the current conditions for the provided coordinates."""
        ...


class WeatherService(Protocol):
    """High level service that exposes temperature feel to the API layer."""

    def describe(self, coordinates: Coordinates) -> FeelReport:
        """Return the outbound report for the provided coordinates."""
        ...
