"""Render, send and inspect a weather request the way a SOAP test suite does."""

import pytest

from pysoaptest import SOAP, SoapSettings, SoapTemplate, XML, extract_xml_value, load_expected_response

from .conftest import REQUESTS_DIR, RESPONSES_DIR, WEATHER_RESPONSE, make_response

ENDPOINT = "https://soap.example.com/weather"
GET_WEATHER_ACTION = "http://example.com/weather/GetWeather"


@pytest.fixture
def soap(session):
    """A SOAP object bound to the mocked session."""
    settings = SoapSettings(soap_endpoint=ENDPOINT, auth_token="tok123", requests_dir=REQUESTS_DIR)
    return SOAP(settings=settings, session=session)


@pytest.fixture
def renderer():
    """A renderer for the shipped request templates."""
    return SoapTemplate(templates_dir=REQUESTS_DIR)


def test_get_weather_for_new_york(soap, renderer, session):
    """The weather for New York is requested and the response values are checked."""
    payload = renderer.render(
        "getWeatherRequest",
        {"cityCode": "NYC", "country": "US", "date": "2024-01-01", "sessionId": "s1"},
    )
    assert "NYC" in payload

    response = soap.send(payload, action=GET_WEATHER_ACTION)

    assert response.status_code == 200
    body = response.text
    assert extract_xml_value(body, "cityCode") == "NYC"
    assert extract_xml_value(body, "temperature") == "72"
    assert extract_xml_value(body, "success") == "true"
    assert "<GetWeatherResponse" in body
    assert "<temperature>" in body

    headers = session.post.call_args.kwargs["headers"]
    assert headers["Authorization"] == "Bearer tok123"
    assert headers["SOAPAction"] == GET_WEATHER_ACTION
    assert session.post.call_args.kwargs["data"] == payload.encode("utf-8")


def test_response_matches_expected(soap, renderer, session):
    """The actual response carries the same values as the expected response file."""
    session.post.return_value = make_response(200, WEATHER_RESPONSE)
    payload = renderer.render(
        "getWeatherRequest",
        {"cityCode": "NYC", "country": "US", "date": "2024-01-01", "sessionId": "s1"},
    )

    actual = XML.xml_to_dict(soap.send(payload).text)["GetWeatherResponse"]
    expected = XML.xml_to_dict(load_expected_response("getWeatherResponse", RESPONSES_DIR))["Envelope"]["Body"][
        "GetWeatherResponse"
    ]

    for key, value in actual.items():
        assert expected[key] == value


def test_invalid_city_returns_error(soap, renderer, session):
    """An error status is an ordinary response the test asserts on."""
    session.post.return_value = make_response(400, "<soap:Fault><faultstring>error: unknown city</faultstring>")
    payload = renderer.render(
        "getWeatherRequest",
        {"cityCode": "INVALID", "country": "US", "date": "2024-01-01", "sessionId": "s1"},
    )

    response = soap.send(payload)

    assert response.status_code == 400
    assert "error" in response.text
    assert extract_xml_value(response.text, "faultstring") == "error: unknown city"
