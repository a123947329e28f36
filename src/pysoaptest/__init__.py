"""pysoaptest - A python library to render, send and inspect SOAP requests in tests."""

from .exceptions import (
    FixtureNotFoundError,
    RenderError,
    SoapTestError,
    TemplateNotFoundError,
    TransportError,
)
from .fixtures import load_expected_response
from .helper import XML, extract_xml_value
from .settings import SoapSettings
from .soap import SOAP, USER_AGENT, SoapRequest, build_headers, log_response_details, send
from .template import SoapTemplate, load_template, render

__all__ = [
    "SOAP",
    "USER_AGENT",
    "XML",
    "FixtureNotFoundError",
    "RenderError",
    "SoapRequest",
    "SoapSettings",
    "SoapTemplate",
    "SoapTestError",
    "TemplateNotFoundError",
    "TransportError",
    "build_headers",
    "extract_xml_value",
    "load_expected_response",
    "load_template",
    "log_response_details",
    "render",
    "send",
]
