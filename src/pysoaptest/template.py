"""Template Renderer module to build SOAP request payloads from XML templates."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import os
from functools import cache
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
    meta,
)

from .exceptions import RenderError, TemplateNotFoundError
from .settings import SoapSettings

APP_NAME = "pysoaptest"
MODULE_NAME = APP_NAME + ".template"

TEMPLATE_SUFFIX = ".xml"

default_logger = logging.getLogger(MODULE_NAME)


class SoapTemplate:
    """Class SoapTemplate loads SOAP request templates and renders them with variables.

    Templates are UTF-8 XML files named `<template name>.xml` in the
    templates directory. Placeholders use the `{{ name }}` syntax. Every
    placeholder referenced by a template must be present in the variables,
    otherwise rendering fails with a RenderError (no empty-string fallback).
    Values are XML escaped (&, <, >, " and '). Use the `safe` filter,
    e.g. `{{ fragment | safe }}`, to insert a pre-built XML fragment as is.
    """

    logger: logging.Logger = default_logger

    def __init__(
        self,
        templates_dir: str,
        cache_size: int = 400,
        logger: logging.Logger = default_logger,
    ) -> None:
        """Initialize the SoapTemplate object.

        Args:
            templates_dir (str):
                The directory that holds the request templates.
            cache_size (int, optional):
                The number of compiled templates to keep. 0 means the template
                file is loaded again for each render call. Defaults to 400.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("template")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self._templates_dir = templates_dir
        self._env = Environment(
            loader=FileSystemLoader(templates_dir, encoding="utf-8"),
            undefined=StrictUndefined,
            autoescape=True,
            keep_trailing_newline=True,
            cache_size=cache_size,
        )

    # end method definition

    def templates_dir(self) -> str:
        """Return the templates directory.

        Returns:
            str:
                The directory the templates are loaded from.

        """

        return self._templates_dir

    # end method definition

    def template_path(self, template_name: str) -> str:
        """Return the file path a template name resolves to.

        Args:
            template_name (str):
                The name of the template (without the .xml suffix).

        Returns:
            str:
                The full path of the template file.

        """

        return os.path.join(self._templates_dir, template_name + TEMPLATE_SUFFIX)

    # end method definition

    def load_template(self, template_name: str) -> Template:
        """Load (and compile) a SOAP request template.

        Args:
            template_name (str):
                The name of the template (without the .xml suffix).

        Returns:
            Template:
                The compiled Jinja2 template.

        Raises:
            TemplateNotFoundError:
                If the template file does not exist or is not readable.
            RenderError:
                If the template has a syntax error.

        """

        self.logger.debug(
            "Load SOAP template -> '%s' from directory -> '%s'...",
            template_name,
            self._templates_dir,
        )

        try:
            return self._env.get_template(template_name + TEMPLATE_SUFFIX)
        except TemplateNotFound as exception:
            self.logger.error(
                "SOAP template -> '%s' does not exist in directory -> '%s'!",
                template_name,
                self._templates_dir,
            )
            raise TemplateNotFoundError(template_name, self._templates_dir) from exception
        except (OSError, UnicodeDecodeError) as exception:
            self.logger.error(
                "Cannot read SOAP template -> '%s'; error -> %s",
                self.template_path(template_name),
                exception,
            )
            raise TemplateNotFoundError(template_name, self._templates_dir) from exception
        except TemplateSyntaxError as exception:
            self.logger.error(
                "SOAP template -> '%s' has a syntax error in line %s; error -> %s",
                template_name,
                exception.lineno,
                exception.message,
            )
            raise RenderError(template_name, str(exception)) from exception

    # end method definition

    def placeholders(self, template_name: str) -> set[str]:
        """Return the names of all placeholders a template references.

        Args:
            template_name (str):
                The name of the template (without the .xml suffix).

        Returns:
            set[str]:
                The placeholder names.

        """

        try:
            source, _, _ = self._env.loader.get_source(self._env, template_name + TEMPLATE_SUFFIX)
        except TemplateNotFound as exception:
            raise TemplateNotFoundError(template_name, self._templates_dir) from exception
        except (OSError, UnicodeDecodeError) as exception:
            self.logger.error(
                "Cannot read SOAP template -> '%s'; error -> %s",
                self.template_path(template_name),
                exception,
            )
            raise TemplateNotFoundError(template_name, self._templates_dir) from exception

        try:
            parsed = self._env.parse(source)
        except TemplateSyntaxError as exception:
            raise RenderError(template_name, str(exception)) from exception

        return meta.find_undeclared_variables(parsed)

    # end method definition

    def render(self, template_name: str, variables: dict[str, Any]) -> str:
        """Render a SOAP request template with the given variables.

        Args:
            template_name (str):
                The name of the template (without the .xml suffix).
            variables (dict[str, Any]):
                Mapping of placeholder names to scalar values. Each value
                is emitted as its XML escaped string representation.

        Returns:
            str:
                The rendered XML payload.

        Raises:
            TemplateNotFoundError:
                If the template file does not exist.
            RenderError:
                If the template references a placeholder that is not in variables.

        """

        template = self.load_template(template_name)

        try:
            payload = template.render(**variables)
        except UndefinedError as exception:
            self.logger.error(
                "SOAP template -> '%s' references an undefined placeholder; error -> %s",
                template_name,
                exception.message,
            )
            raise RenderError(template_name, exception.message or str(exception)) from exception

        self.logger.debug("Rendered SOAP template -> '%s' (%s characters).", template_name, len(payload))

        return payload

    # end method definition


@cache
def _default_template() -> SoapTemplate:
    settings = SoapSettings()
    return SoapTemplate(templates_dir=settings.requests_dir, cache_size=settings.template_cache_size)


def load_template(template_name: str) -> Template:
    """Load a template from the configured requests directory."""

    return _default_template().load_template(template_name)


def render(template_name: str, variables: dict[str, Any]) -> str:
    """Render a template from the configured requests directory.

    Args:
        template_name (str):
            The name of the template (without the .xml suffix).
        variables (dict[str, Any]):
            Mapping of placeholder names to values.

    Returns:
        str:
            The rendered XML payload.

    """

    return _default_template().render(template_name, variables)
