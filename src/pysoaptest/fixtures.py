"""Load expected SOAP responses that tests compare actual responses with."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import os

from .exceptions import FixtureNotFoundError
from .settings import SoapSettings

default_logger = logging.getLogger("pysoaptest.fixtures")


def load_expected_response(
    name: str,
    responses_dir: str | None = None,
    logger: logging.Logger = default_logger,
) -> str:
    """Read the expected response <responses_dir>/<name>.xml.

    Args:
        name (str):
            The name of the response file (without the .xml suffix).
        responses_dir (str | None, optional):
            The directory of the response files. Defaults to the
            configured responses directory.
        logger (logging.Logger, optional):
            The logging object used for all log messages.

    Returns:
        str:
            The file content.

    Raises:
        FixtureNotFoundError:
            If the file does not exist or cannot be read.

    """

    if responses_dir is None:
        responses_dir = SoapSettings().responses_dir

    file_path = os.path.join(responses_dir, name + ".xml")

    if not os.path.isfile(file_path):
        message = "Expected response file -> '{}' does not exist!".format(file_path)
        logger.error(message)
        raise FixtureNotFoundError(message)

    try:
        with open(file_path, encoding="utf-8") as response_file:
            content = response_file.read()
    except OSError as exception:
        message = "Cannot read expected response file -> '{}'; error -> {}".format(file_path, exception)
        logger.error(message)
        raise FixtureNotFoundError(message) from exception

    logger.debug("Loaded expected response -> '%s' (%s characters).", file_path, len(content))

    return content
