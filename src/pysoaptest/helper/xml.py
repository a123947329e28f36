"""XML helper module to pick values out of SOAP responses."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import re

# we need lxml instead of standard xml.etree to have xpath capabilities!
from lxml import etree
from lxml.etree import Element

default_logger = logging.getLogger("pysoaptest.helper.xml")


def extract_xml_value(xml_text: str, tag_name: str) -> str | None:
    """Extract the text of the first <tag_name>...</tag_name> in an XML string.

    This is a plain regular expression match, not an XML parser. It finds
    the first opening tag without attributes or namespace prefix that is
    directly followed by at least one non-"<" character and the matching
    closing tag. Nested elements, attributes, namespace prefixes, CDATA
    sections, self-closing and empty elements are not matched. Malformed
    XML never raises.

    Args:
        xml_text (str):
            The XML text, e.g. the body of a SOAP response.
        tag_name (str):
            The bare local name of the element, e.g. "cityCode".

    Returns:
        str | None:
            The captured text or None if no such element is found.

    """

    pattern = "<{0}>([^<]+)</{0}>".format(re.escape(tag_name))
    match = re.search(pattern, xml_text)

    return match.group(1) if match else None


class XML:
    """Structural XML helpers for assertions that need more than extract_xml_value()."""

    logger: logging.Logger = default_logger

    @classmethod
    def remove_xml_namespace(cls, tag: str) -> str:
        """Remove namespace from XML tag.

        Args:
            tag (str):
                The XML tag with namespace.

        Returns:
            str:
                The tag without namespace.

        """

        # lxml puts the tag namespace into curly braces like "{namespace}element"
        return tag.split("}", 1)[-1]

    # end method definition

    @classmethod
    def parse(cls, xml_text: str | bytes) -> Element:
        """Parse an XML document into an lxml element tree.

        Args:
            xml_text (str | bytes):
                The XML text. Strings are encoded to UTF-8 first as lxml
                rejects strings that carry an encoding declaration.

        Returns:
            Element:
                The root element.

        Raises:
            etree.XMLSyntaxError:
                If the text is not well-formed XML.

        """

        if isinstance(xml_text, str):
            xml_text = xml_text.encode("utf-8")

        return etree.fromstring(xml_text)

    # end method definition

    @classmethod
    def xml_to_dict(cls, xml_text: str | bytes, include_attributes: bool = False) -> dict:
        """Parse an XML string and return a dictionary without namespaces.

        Repeated child elements become lists. Leaf elements become their
        stripped text (or None if empty).

        Args:
            xml_text (str | bytes):
                The XML string to process.
            include_attributes (bool, optional):
                True if XML attributes should be included as "@name" keys. Defaults to False.

        Returns:
            dict:
                The XML structure converted to a dictionary.

        """

        def xml_element_to_dict(element: Element) -> dict:
            tag = cls.remove_xml_namespace(element.tag)
            node_dict = {}

            if element.attrib and include_attributes:
                node_dict.update({"@{}".format(cls.remove_xml_namespace(k)): v for k, v in element.attrib.items()})

            for child in element:
                # skip comments and processing instructions
                if not isinstance(child.tag, str):
                    continue
                child_tag = cls.remove_xml_namespace(child.tag)
                value = xml_element_to_dict(child)[child_tag]

                if child_tag in node_dict:
                    if not isinstance(node_dict[child_tag], list):
                        node_dict[child_tag] = [node_dict[child_tag]]
                    node_dict[child_tag].append(value)
                else:
                    node_dict[child_tag] = value

            text = element.text.strip() if element.text and element.text.strip() else None
            if text:
                if node_dict:
                    node_dict["#text"] = text
                else:
                    return {tag: text}

            return {tag: node_dict if node_dict else text}

        return xml_element_to_dict(cls.parse(xml_text))

    # end method definition

    @classmethod
    def get_text(
        cls,
        xml_text: str | bytes,
        tag_name: str,
        logger: logging.Logger = default_logger,
    ) -> str | None:
        """Return the text of the first element with the given local name.

        Unlike extract_xml_value() this parses the document, so namespace
        prefixes, attributes and CDATA sections are handled.

        Args:
            xml_text (str | bytes):
                The XML document.
            tag_name (str):
                The local name of the element (without namespace prefix).
            logger (logging.Logger, optional):
                The logging object used for all log messages.

        Returns:
            str | None:
                The text of the element ("" for an empty element) or None
                if the element does not exist or the document is not well-formed.

        """

        try:
            root = cls.parse(xml_text)
        except etree.XMLSyntaxError as exception:
            logger.warning("Cannot parse XML to look up element -> '%s'; error -> %s", tag_name, exception)
            return None

        elements = root.xpath("//*[local-name() = $name]", name=tag_name)
        if not elements:
            logger.debug("XML element -> '%s' not found.", tag_name)
            return None

        return elements[0].text or ""

    # end method definition
