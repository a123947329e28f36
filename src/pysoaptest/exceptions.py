"""Definition for all custom exceptions."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

from requests.exceptions import RequestException

# Transport failures are not wrapped. The HTTP client's own exception
# hierarchy is re-raised unchanged and exposed under this name.
TransportError = RequestException


class SoapTestError(Exception):
    """Base class of all pysoaptest exceptions."""


class TemplateNotFoundError(SoapTestError):
    """Custom exception if a SOAP request template does not exist."""

    def __init__(self, template_name: str, search_path: str) -> None:
        """Initialize the TemplateNotFoundError.

        Args:
            template_name (str):
                The name of the template that was requested.
            search_path (str):
                The directory the template was looked up in.

        """
        self.template_name = template_name
        self.search_path = search_path
        super().__init__(
            "SOAP template -> '{}' not found in directory -> '{}'".format(template_name, search_path),
        )


class RenderError(SoapTestError):
    """Custom exception if a SOAP request template cannot be rendered."""

    def __init__(self, template_name: str, message: str) -> None:
        """Initialize the RenderError.

        Args:
            template_name (str):
                The name of the template that failed to render.
            message (str):
                The error message.

        """
        self.template_name = template_name
        super().__init__("Cannot render SOAP template -> '{}'; error -> {}".format(template_name, message))


class FixtureNotFoundError(SoapTestError):
    """Custom exception if an expected response file does not exist."""

    def __init__(self, message: str) -> None:
        """Initialize the FixtureNotFoundError with a message.

        Args:
            message (str):
                The error message.

        """
        super().__init__(message)
