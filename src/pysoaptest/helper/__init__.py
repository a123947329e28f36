"""pysoaptest helper classes and functions."""

from .xml import XML, extract_xml_value

__all__ = ["XML", "extract_xml_value"]
