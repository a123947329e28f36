"""SOAP Module to send SOAP requests to a web service endpoint.

The module only builds the HTTP headers, issues a single POST and hands
the response back unchanged. It never interprets the HTTP status code,
never retries and never wraps transport errors.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import platform
import sys
from http import HTTPStatus
from importlib.metadata import version
from types import TracebackType
from typing import Any

import requests
from pydantic import BaseModel, Field

from .settings import SoapSettings

APP_NAME = "pysoaptest"
APP_VERSION = version("pysoaptest")
MODULE_NAME = APP_NAME + ".soap"

PYTHON_VERSION = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
OS_INFO = f"{platform.system()} {platform.release()}"
ARCH_INFO = platform.machine()
REQUESTS_VERSION = requests.__version__

USER_AGENT = (
    f"{APP_NAME}/{APP_VERSION} ({MODULE_NAME}/{APP_VERSION}; "
    f"Python/{PYTHON_VERSION}; {OS_INFO}; {ARCH_INFO}; Requests/{REQUESTS_VERSION})"
)

REQUEST_SOAP_HEADERS = {
    "Content-Type": "text/xml;charset=UTF-8",
    "Accept": "text/xml",
}

FORBIDDEN_HINTS = [
    "Check if your bearer token is valid and not expired",
    "Verify if additional headers are required",
    "Ensure your IP address is allowed to access the service",
]

RESPONSE_BODY_LOG_LIMIT = 500

default_logger = logging.getLogger(MODULE_NAME)


class SoapRequest(BaseModel):
    """Value object describing a single SOAP request."""

    endpoint: str = Field(min_length=1, description="URL of the SOAP endpoint")
    payload: str = Field(min_length=1, description="Rendered XML request body")
    bearer_token: str | None = Field(default=None, description="Token for the Authorization header")
    action: str = Field(default="", description="Value of the SOAPAction header")
    extra_headers: dict[str, str] | None = Field(default=None, description="Headers merged over the defaults")


def build_headers(
    bearer_token: str | None = None,
    action: str | None = None,
    extra_headers: dict | None = None,
) -> dict:
    """Build the HTTP headers of a SOAP request.

    Later entries override earlier ones: content type, accept, SOAPAction,
    user agent, authorization (only if a token is given) and finally the
    extra headers.

    Args:
        bearer_token (str | None, optional):
            The token for the "Authorization: Bearer ..." header. If empty
            or None no Authorization header is sent.
        action (str | None, optional):
            The SOAP action URI. Defaults to an empty SOAPAction header.
        extra_headers (dict | None, optional):
            Additional headers that are merged last.

    Returns:
        dict:
            The request headers.

    """

    headers = dict(REQUEST_SOAP_HEADERS)
    headers["SOAPAction"] = action or ""
    headers["User-Agent"] = USER_AGENT

    if bearer_token:
        headers["Authorization"] = "Bearer {}".format(bearer_token)

    if extra_headers:
        headers.update(extra_headers)

    return headers


def send(
    endpoint: str,
    payload: str,
    bearer_token: str | None = None,
    action: str | None = None,
    extra_headers: dict | None = None,
    session: Any = None,
    timeout: float | None = None,
    logger: logging.Logger = default_logger,
) -> requests.Response:
    """Send a SOAP request with a single HTTP POST.

    Args:
        endpoint (str):
            The URL of the SOAP endpoint.
        payload (str):
            The XML request body.
        bearer_token (str | None, optional):
            The bearer token. If None or empty no Authorization header is sent.
        action (str | None, optional):
            The SOAP action URI. Defaults to an empty SOAPAction header.
        extra_headers (dict | None, optional):
            Additional headers that may override the default headers.
        session (requests.Session | None, optional):
            The HTTP client to use. Anything with a requests compatible
            post() method works. Defaults to the requests module.
        timeout (float | None, optional):
            Timeout handed to the HTTP client. Defaults to None (no timeout).
        logger (logging.Logger, optional):
            The logging object to use for all log messages. Defaults to default_logger.

    Returns:
        requests.Response:
            The response of the HTTP client, unmodified. Error status codes
            are returned like any other response.

    Raises:
        ValueError:
            If endpoint or payload is empty.
        requests.RequestException:
            If the transport fails. The exception is logged and re-raised unchanged.

    """

    if not endpoint:
        message = "Cannot send SOAP request without an endpoint!"
        raise ValueError(message)
    if not payload:
        message = "Cannot send SOAP request with an empty payload!"
        raise ValueError(message)

    headers = build_headers(bearer_token=bearer_token, action=action, extra_headers=extra_headers)

    http_client = session if session is not None else requests

    logger.info("Sending SOAP request to -> %s", endpoint)
    logger.debug("SOAP request headers -> %s", {k: v for k, v in headers.items() if k != "Authorization"})

    try:
        response = http_client.post(
            endpoint,
            data=payload.encode("utf-8"),
            headers=headers,
            timeout=timeout,
        )
    except requests.RequestException as exception:
        logger.error("Error sending SOAP request to -> %s; error -> %s", endpoint, exception)
        raise

    if response.status_code == HTTPStatus.FORBIDDEN:
        logger.error("403 Forbidden Error Details:")
        for hint in FORBIDDEN_HINTS:
            logger.error("- %s", hint)
        logger.error("Response headers -> %s", list(response.headers.items()))

    return response


def log_response_details(
    response: requests.Response,
    logger: logging.Logger = default_logger,
    max_body: int = RESPONSE_BODY_LOG_LIMIT,
) -> None:
    """Log status, body and headers of a SOAP response for troubleshooting.

    Args:
        response (requests.Response):
            The response to log.
        logger (logging.Logger, optional):
            The logging object to use. Defaults to default_logger.
        max_body (int, optional):
            Maximum number of body characters to log. Longer bodies are
            truncated and get "..." appended. Defaults to 500.

    """

    body = response.text or ""

    logger.info("Response status -> %s", response.status_code)
    logger.info("Response status text -> %s", response.reason)
    logger.info("Response body -> %s%s", body[:max_body], "..." if len(body) > max_body else "")
    logger.info("Response headers -> %s", list(response.headers.items()))


class SOAP:
    """Class SOAP is used to send SOAP requests to a configured endpoint."""

    logger: logging.Logger = default_logger

    def __init__(
        self,
        settings: SoapSettings | None = None,
        session: requests.Session | None = None,
        logger: logging.Logger = default_logger,
    ) -> None:
        """Initialize the SOAP object.

        Args:
            settings (SoapSettings | None, optional):
                Endpoint, token, timeout and default headers. If None the
                settings are read from the environment.
            session (requests.Session | None, optional):
                The HTTP client. If None a new requests session is created
                and closed by close(). A session passed in stays open.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("soap")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self._settings = settings if settings is not None else SoapSettings()
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    # end method definition

    def __enter__(self) -> "SOAP":
        """Enable use with 'with' statement (context manager block)."""

        return self

    # end method definition

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback_obj: TracebackType | None
    ) -> None:
        """Close the session when leaving a context manager block ('with' statement).

        Args:
            exc_type (type[BaseException] | None):
                The class of the raised exception, if any.
            exc_value (BaseException | None):
                The exception instance raised, if any.
            traceback_obj (TracebackType | None):
                The traceback object associated with the exception, if any.

        """

        self.close()

    # end method definition

    def close(self) -> None:
        """Close the HTTP session if this SOAP object created it."""

        if self._owns_session:
            self.logger.debug("Closing HTTP session.")
            self._session.close()

    # end method definition

    def settings(self) -> SoapSettings:
        """Return the settings.

        Returns:
            SoapSettings:
                The settings of this SOAP object.

        """

        return self._settings

    # end method definition

    def send(
        self,
        payload: str,
        action: str | None = None,
        extra_headers: dict | None = None,
        endpoint: str | None = None,
        bearer_token: str | None = None,
    ) -> requests.Response:
        """Send a SOAP payload to the configured endpoint.

        Args:
            payload (str):
                The XML request body.
            action (str | None, optional):
                The SOAP action URI.
            extra_headers (dict | None, optional):
                Headers merged over the configured extra headers.
            endpoint (str | None, optional):
                Overrides the configured endpoint. An empty string is
                rejected like in send().
            bearer_token (str | None, optional):
                Overrides the configured token.

        Returns:
            requests.Response:
                The unmodified response.

        """

        headers = dict(self._settings.extra_headers)
        if extra_headers:
            headers.update(extra_headers)

        return send(
            endpoint=endpoint if endpoint is not None else self._settings.soap_endpoint,
            payload=payload,
            bearer_token=bearer_token if bearer_token is not None else self._settings.bearer_token(),
            action=action,
            extra_headers=headers or None,
            session=self._session,
            timeout=self._settings.request_timeout,
            logger=self.logger,
        )

    # end method definition

    def post(self, request: SoapRequest) -> requests.Response:
        """Send a SOAP request described by a SoapRequest object.

        Args:
            request (SoapRequest):
                The request descriptor. Its values are used as given,
                only the session and timeout come from the settings.

        Returns:
            requests.Response:
                The unmodified response.

        """

        return send(
            endpoint=request.endpoint,
            payload=request.payload,
            bearer_token=request.bearer_token,
            action=request.action,
            extra_headers=request.extra_headers,
            session=self._session,
            timeout=self._settings.request_timeout,
            logger=self.logger,
        )

    # end method definition
