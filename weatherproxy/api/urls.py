"""API URL configuration."""
from __future__ import annotations

from django.urls import re_path

from weatherproxy.api.views import WeatherFeelView, get_feel_service

# Every path is served by the same handler.
urlpatterns = [
    re_path(r"^.*$", WeatherFeelView.as_view(service=get_feel_service()), name="weather-feel"),
]
