from __future__ import annotations

import logging

import pytest
import requests

from weatherproxy.config import ProxyConfig
from weatherproxy.core.abstractions import Coordinates, WeatherCondition
from weatherproxy.core.errors import INTERNAL_ERROR_MESSAGE, InternalError, UpstreamError
from weatherproxy.core.providers.openweather import OpenWeatherProvider


LOGGER = "weatherproxy.core.providers.openweather"
COORDINATES = Coordinates(latitude=55.75, longitude=37.61)


@pytest.fixture
def provider(owm_url: str) -> OpenWeatherProvider:
    return OpenWeatherProvider(api_key="secret-key", base_url=owm_url)


def _provider_logs(caplog) -> list[logging.LogRecord]:
    return [record for record in caplog.records if record.name == LOGGER]


class _UnreadableResponse:
    status_code = 200

    def __init__(self) -> None:
        self.closed = False

    def __enter__(self) -> "_UnreadableResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        self.closed = True

    @property
    def content(self) -> bytes:
        raise requests.exceptions.ChunkedEncodingError("connection broken")


class _SessionStub:
    def __init__(self, response) -> None:
        self.response = response

    def get(self, url, **kwargs):
        return self.response


def test_success_payload_is_normalized(requests_mock, provider, owm_url, clear_weather, caplog):
    requests_mock.get(owm_url, json=clear_weather)

    report = provider.get_weather(COORDINATES)

    assert report.condition == "Clear"
    assert report.conditions == (WeatherCondition(main="Clear"),)
    assert report.temperature_c == 18.5
    assert _provider_logs(caplog) == []


def test_request_carries_units_coordinates_and_key(requests_mock, provider, owm_url, clear_weather):
    requests_mock.get(owm_url, json=clear_weather)

    provider.get_weather(Coordinates(latitude=55.75, longitude=-33.5))

    assert requests_mock.call_count == 1
    request = requests_mock.last_request
    assert request.method == "GET"
    assert request.qs == {
        "units": ["metric"],
        "lat": ["55.750000"],
        "lon": ["-33.500000"],
        "appid": ["secret-key"],
    }
    assert request.timeout is None


def test_first_condition_wins(requests_mock, provider, owm_url):
    requests_mock.get(
        owm_url,
        json={"weather": [{"main": "Rain"}, {"main": "Mist"}], "main": {"temp": 3}},
    )

    report = provider.get_weather(COORDINATES)

    assert report.condition == "Rain"
    assert len(report.conditions) == 2
    assert report.temperature_c == 3.0


def test_timeout_is_forwarded(requests_mock, owm_url, clear_weather):
    config = ProxyConfig(api_key="k", base_url=owm_url, timeout=2.5)
    requests_mock.get(owm_url, json=clear_weather)

    OpenWeatherProvider.from_config(config).get_weather(COORDINATES)

    assert requests_mock.last_request.timeout == 2.5


def test_provider_error_message_is_surfaced(requests_mock, provider, owm_url, caplog):
    requests_mock.get(owm_url, status_code=404, json={"cod": "404", "message": "city not found"})

    with pytest.raises(UpstreamError) as excinfo:
        provider.get_weather(COORDINATES)

    assert excinfo.value.message == "city not found"
    records = _provider_logs(caplog)
    assert len(records) == 1
    assert "404" in records[0].getMessage()


def test_numeric_error_code_is_accepted(requests_mock, provider, owm_url):
    requests_mock.get(owm_url, status_code=401, json={"cod": 401, "message": "Invalid API key."})

    with pytest.raises(UpstreamError, match="Invalid API key."):
        provider.get_weather(COORDINATES)


@pytest.mark.parametrize(
    "body",
    [
        "<html>bad gateway</html>",
        '{"cod": "502"}',
        '{"message": "no code"}',
        '{"cod": "oops", "message": "bad code"}',
        '{"cod": "nan", "message": "bad code"}',
        '{"cod": " 404 ", "message": "padded code"}',
        "[]",
    ],
)
def test_unreadable_error_body_is_internal(requests_mock, provider, owm_url, body, caplog):
    requests_mock.get(owm_url, status_code=502, text=body)

    with pytest.raises(InternalError) as excinfo:
        provider.get_weather(COORDINATES)

    assert excinfo.value.message == INTERNAL_ERROR_MESSAGE
    assert "unmarshal error response body" in _provider_logs(caplog)[0].getMessage()


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        '{"weather": [], "main": {"temp": 10}}',
        '{"weather": [{"description": "no main"}], "main": {"temp": 10}}',
        '{"weather": [{"main": "Clear"}], "main": {}}',
        '{"weather": [{"main": "Clear"}], "main": {"temp": "hot"}}',
        '{"weather": [{"main": "Clear"}], "main": {"temp": true}}',
        '{"weather": [{"main": "Clear"}], "main": {"temp": 1e39}}',
        '{"weather": [{"main": "Clear"}], "main": {"temp": -1e39}}',
        '{"weather": [{"main": "Clear"}], "main": {"temp": Infinity}}',
        '{"weather": [{"main": "Clear"}], "main": {"temp": NaN}}',
    ],
)
def test_unreadable_success_body_is_internal(requests_mock, provider, owm_url, body, caplog):
    requests_mock.get(owm_url, text=body)

    with pytest.raises(InternalError):
        provider.get_weather(COORDINATES)

    assert "unmarshal response body" in _provider_logs(caplog)[0].getMessage()


def test_connection_failure_is_internal_and_logged(requests_mock, provider, owm_url, caplog):
    requests_mock.get(
        owm_url,
        exc=requests.exceptions.ConnectionError("Connection refused for /weather?appid=secret-key"),
    )

    with pytest.raises(InternalError) as excinfo:
        provider.get_weather(COORDINATES)

    assert excinfo.value.message == INTERNAL_ERROR_MESSAGE
    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)
    logged = _provider_logs(caplog)[0].getMessage()
    assert "Connection refused" in logged
    assert "secret-key" not in logged


def test_body_read_failure_is_internal_and_releases_response(caplog):
    response = _UnreadableResponse()
    provider = OpenWeatherProvider(api_key="stub-key", session=_SessionStub(response))

    with pytest.raises(InternalError):
        provider.get_weather(COORDINATES)

    assert response.closed
    assert "read response body" in _provider_logs(caplog)[0].getMessage()
