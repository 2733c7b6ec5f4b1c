# test/conftest.py
import json

import pytest
import requests
from fastapi.testclient import TestClient

from app.main import create_app
from app.service.weather_service import WeatherClient
from app.settings import GatewaySettings


class FakeResponse:
    def __init__(self, status_code=200, body=""):
        self.status_code = status_code
        self.text = body

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """代替 requests.Session，记录调用，不走网络"""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(
            200, json.dumps({"name": "London", "main": {"temp": 12.5}, "cod": 200})
        )
        self.error = None

    def reply(self, status_code, payload):
        body = payload if isinstance(payload, str) else json.dumps(payload)
        self.response = FakeResponse(status_code, body)

    def fail_with(self, error: requests.RequestException):
        self.error = error

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def config_file(tmp_path):
    path = tmp_path / ".apiConfig"
    path.write_text(json.dumps({"OpenWeatherMapApiKey": "test-key-123456"}))
    return path


@pytest.fixture()
def settings(config_file):
    return GatewaySettings(config_path=str(config_file))


@pytest.fixture()
def fake_session():
    return FakeSession()


@pytest.fixture()
def weather_client(settings, fake_session):
    return WeatherClient(settings, session=fake_session)


@pytest.fixture()
def client(settings, weather_client):
    return TestClient(create_app(settings, weather_client))
