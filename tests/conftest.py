"""Shared fixtures for the pysoaptest test suite."""

import os
from http import HTTPStatus
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from pysoaptest import template

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
REQUESTS_DIR = os.path.join(REPO_ROOT, "api", "requests")
RESPONSES_DIR = os.path.join(REPO_ROOT, "api", "responses")

WEATHER_RESPONSE = (
    "<GetWeatherResponse><cityCode>NYC</cityCode>"
    "<temperature>72</temperature><success>true</success></GetWeatherResponse>"
)


def make_response(status_code: int = 200, body: str = "", headers: dict | None = None) -> requests.Response:
    """Build a real requests.Response without network access."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = HTTPStatus(status_code).phrase
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {"Content-Type": "text/xml;charset=UTF-8"})
    response.url = "https://example.com/soap"
    return response


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep settings independent of the developer's environment and .env file."""
    for name in (
        "SOAP_ENDPOINT",
        "AUTH_TOKEN",
        "REQUESTS_DIR",
        "RESPONSES_DIR",
        "REQUEST_TIMEOUT",
        "EXTRA_HEADERS",
        "TEMPLATE_CACHE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    template._default_template.cache_clear()
    yield
    template._default_template.cache_clear()


@pytest.fixture
def session():
    """A requests.Session stand-in whose post() returns a 200 weather response."""
    mock_session = MagicMock(spec=requests.Session)
    mock_session.post.return_value = make_response(200, WEATHER_RESPONSE)
    return mock_session


@pytest.fixture
def templates_dir(tmp_path):
    """A scratch templates directory."""
    directory = tmp_path / "requests"
    directory.mkdir()
    return directory
