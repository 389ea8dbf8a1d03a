"""XML parsing wrapper with consistent error handling.

Wraps ElementTree so every malformed-input failure surfaces as a
``ValueError`` with the source named in the message.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from tweenr.core.utils.logging import get_logger

logger = get_logger(__name__)


class XMLParser:
    """Generic XML parser.

    Example:
        >>> parser = XMLParser()
        >>> root = parser.parse_string('<attributeanimation/>')
        >>> root.tag
        'attributeanimation'
    """

    def parse(self, file_path: Path | str) -> ET.Element:
        """Parse an XML file and return its root element.

        Raises:
            FileNotFoundError: If file does not exist
            ValueError: If XML is malformed
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"XML file does not exist: {path}")

        logger.debug(f"Parsing XML file: {path}")
        try:
            return ET.parse(path).getroot()
        except ET.ParseError as e:
            raise ValueError(f"Malformed XML in {path}: {e}") from e

    def parse_string(self, xml_str: str) -> ET.Element:
        """Parse XML from a string and return its root element.

        Raises:
            ValueError: If XML is malformed
        """
        try:
            return ET.fromstring(xml_str)
        except ET.ParseError as e:
            raise ValueError(f"Malformed XML string: {e}") from e
