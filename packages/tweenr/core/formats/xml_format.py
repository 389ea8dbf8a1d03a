"""XML curve format.

Layout::

    <attributeanimation interpolation="linear" tension="0.5">
      <keyframe time="0.0" type="Vector3" value="0.0 1.0 0.0" />
      <eventframe time="0.5" eventtype="1234567">
        <eventdata>
          <variant name="volume" type="Float" value="0.8" />
        </eventdata>
      </eventframe>
    </attributeanimation>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tweenr.core.animation.curve import Curve
from tweenr.core.animation.errors import MalformedCurveDataError
from tweenr.core.formats.convert import curve_from_document, document_from_curve, load_into
from tweenr.core.formats.models import CurveDocument
from tweenr.core.parsers.xml import XMLParser
from tweenr.core.utils.logging import get_logger

logger = get_logger(__name__)

ROOT_TAG = "attributeanimation"


class CurveXMLParser:
    """Parse curve XML into a ``CurveDocument``.

    Example:
        >>> document = CurveXMLParser().parse("fade.xml")
        >>> len(document.keyframes)
        2
    """

    def __init__(self) -> None:
        self._xml_parser = XMLParser()

    def parse(self, file_path: Path | str) -> CurveDocument:
        """Parse a curve XML file.

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedCurveDataError: If the XML or its fields are invalid
        """
        try:
            root = self._xml_parser.parse(file_path)
        except ValueError as e:
            raise MalformedCurveDataError(str(e)) from e
        return self._parse_root(root)

    def parse_string(self, xml_content: str) -> CurveDocument:
        """Parse curve XML from a string.

        Raises:
            MalformedCurveDataError: If the XML or its fields are invalid
        """
        try:
            root = self._xml_parser.parse_string(xml_content)
        except ValueError as e:
            raise MalformedCurveDataError(str(e)) from e
        return self._parse_root(root)

    def _parse_root(self, root: ET.Element) -> CurveDocument:
        if root.tag != ROOT_TAG:
            raise MalformedCurveDataError(f"Expected <{ROOT_TAG}> root, got <{root.tag}>")

        data: dict[str, Any] = {
            "keyframes": [self._parse_keyframe(elem) for elem in root.findall("keyframe")],
            "eventframes": [self._parse_eventframe(elem) for elem in root.findall("eventframe")],
        }
        if "interpolation" in root.attrib:
            data["interpolation"] = root.get("interpolation")
        if "tension" in root.attrib:
            data["tension"] = root.get("tension")

        try:
            return CurveDocument.model_validate(data)
        except ValidationError as e:
            raise MalformedCurveDataError(f"Invalid curve XML: {e}") from e

    def _parse_keyframe(self, elem: ET.Element) -> dict[str, Any]:
        return {"time": elem.get("time"), "type": elem.get("type"), "value": elem.get("value")}

    def _parse_eventframe(self, elem: ET.Element) -> dict[str, Any]:
        eventdata: dict[str, Any] = {}
        data_elem = elem.find("eventdata")
        if data_elem is not None:
            for variant in data_elem.findall("variant"):
                name = variant.get("name")
                if not name:
                    raise MalformedCurveDataError("Event payload entry without a name")
                eventdata[name] = {"type": variant.get("type"), "value": variant.get("value")}
        return {"time": elem.get("time"), "eventtype": elem.get("eventtype"), "eventdata": eventdata}


class CurveXMLExporter:
    """Write a ``CurveDocument`` as XML."""

    def export(self, document: CurveDocument, file_path: Path | str, pretty: bool = True) -> None:
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        tree = self._build_tree(document)
        if pretty:
            ET.indent(tree, space="  ", level=0)
        tree.write(str(file_path), encoding="UTF-8", xml_declaration=True)
        logger.debug(f"Wrote curve XML: {file_path}")

    def to_string(self, document: CurveDocument, pretty: bool = True) -> str:
        tree = self._build_tree(document)
        if pretty:
            ET.indent(tree, space="  ", level=0)
        return ET.tostring(tree.getroot(), encoding="unicode")

    def _build_tree(self, document: CurveDocument) -> ET.ElementTree:
        root = ET.Element(ROOT_TAG)
        if document.interpolation is not None:
            root.set("interpolation", document.interpolation.value)
        if document.tension is not None:
            root.set("tension", repr(document.tension))

        for keyframe in document.keyframes:
            ET.SubElement(
                root,
                "keyframe",
                {"time": repr(keyframe.time), "type": keyframe.type, "value": keyframe.value},
            )

        for frame in document.eventframes:
            frame_elem = ET.SubElement(
                root, "eventframe", {"time": repr(frame.time), "eventtype": str(frame.eventtype)}
            )
            data_elem = ET.SubElement(frame_elem, "eventdata")
            for name, record in frame.eventdata.items():
                ET.SubElement(
                    data_elem, "variant", {"name": name, "type": record.type, "value": record.value}
                )

        return ET.ElementTree(root)


def parse_curve_xml(xml_content: str, into: Curve | None = None) -> Curve:
    """Build a curve from XML text; with ``into``, replace that curve's contents."""
    document = CurveXMLParser().parse_string(xml_content)
    return load_into(into, document) if into is not None else curve_from_document(document)


def load_curve_xml(file_path: Path | str, into: Curve | None = None) -> Curve:
    """Load a curve XML file; with ``into``, replace that curve's contents."""
    document = CurveXMLParser().parse(file_path)
    return load_into(into, document) if into is not None else curve_from_document(document)


def dump_curve_xml(curve: Curve) -> str:
    return CurveXMLExporter().to_string(document_from_curve(curve))


def save_curve_xml(curve: Curve, file_path: Path | str) -> None:
    CurveXMLExporter().export(document_from_curve(curve), file_path)
