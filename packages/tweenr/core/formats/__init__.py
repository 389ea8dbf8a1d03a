"""Curve persistence: document schema plus JSON and XML adapters."""

from tweenr.core.formats.convert import (
    curve_from_document,
    decode_value,
    document_from_curve,
    encode_value,
    load_into,
)
from tweenr.core.formats.json_format import (
    dump_curve_json,
    load_curve_json,
    parse_curve_json,
    save_curve_json,
)
from tweenr.core.formats.models import (
    CurveDocument,
    EventFrameRecord,
    KeyframeRecord,
    PayloadRecord,
)
from tweenr.core.formats.xml_format import (
    CurveXMLExporter,
    CurveXMLParser,
    dump_curve_xml,
    load_curve_xml,
    parse_curve_xml,
    save_curve_xml,
)

__all__ = [
    "CurveDocument",
    "CurveXMLExporter",
    "CurveXMLParser",
    "EventFrameRecord",
    "KeyframeRecord",
    "PayloadRecord",
    "curve_from_document",
    "decode_value",
    "document_from_curve",
    "dump_curve_json",
    "dump_curve_xml",
    "encode_value",
    "load_curve_json",
    "load_curve_xml",
    "load_into",
    "parse_curve_json",
    "parse_curve_xml",
    "save_curve_json",
    "save_curve_xml",
]
