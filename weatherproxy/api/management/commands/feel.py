"""Management command to look up the temperature feel using the same stack as the API."""
from __future__ import annotations

from dataclasses import asdict
import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weatherproxy.api.views import get_feel_service
from weatherproxy.core.errors import WeatherFeelError
from weatherproxy.core.validation import parse_coordinates


class Command(BaseCommand):
    help = "Print the condition and temperature feel for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", required=True, help="Latitude")
        parser.add_argument("--lon", required=True, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            coordinates = parse_coordinates({"lat": options["lat"], "lon": options["lon"]})
            report = get_feel_service().describe(coordinates)
        except WeatherFeelError as exc:
            raise CommandError(exc.message) from exc
        self.stdout.write(json.dumps(asdict(report)))
