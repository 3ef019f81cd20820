from __future__ import annotations

import pytest
from django.conf import settings
from requests_mock import Mocker


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def owm_url() -> str:
    return settings.OWM_BASE_URL


@pytest.fixture
def clear_weather() -> dict:
    return {"weather": [{"main": "Clear"}], "main": {"temp": 18.5}}
