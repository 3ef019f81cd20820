"""Query parameter validation for inbound requests."""
from __future__ import annotations

from typing import Any, Mapping

from weatherproxy.core.abstractions import Coordinates, to_float32
from weatherproxy.core.errors import ValidationError

REQUIRED_PARAMS = ("lat", "lon")


def _first_value(params: Mapping[str, Any], key: str) -> str:
    getlist = getattr(params, "getlist", None)
    if callable(getlist):
        values = getlist(key)
    else:
        values = params[key]
        if isinstance(values, str):
            values = [values]
    return values[0] if values else ""


def _parse_float32(raw: str, key: str) -> float:
    # float() tolerates padding and digit separators; query values must not.
    if raw != raw.strip() or "_" in raw:
        raise ValidationError(f"invalid value: {key}")
    try:
        return to_float32(float(raw))
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValidationError(f"invalid value: {key}") from exc


def parse_coordinates(params: Mapping[str, Any]) -> Coordinates:
    """Build :class:`Coordinates` from raw query parameters.

    Both keys must be present before either value is parsed, so a request with
    a malformed ``lat`` and no ``lon`` reports the missing ``lon``.
    """

    for key in REQUIRED_PARAMS:
        if key not in params:
            raise ValidationError(f"missing query parameter: {key}")

    latitude = _parse_float32(_first_value(params, "lat"), "lat")
    longitude = _parse_float32(_first_value(params, "lon"), "lon")
    return Coordinates(latitude=latitude, longitude=longitude)


__all__ = ["parse_coordinates", "REQUIRED_PARAMS"]
