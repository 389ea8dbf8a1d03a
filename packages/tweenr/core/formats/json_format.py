"""JSON curve format.

The JSON form is the ``CurveDocument`` model dumped as-is::

    {
      "interpolation": "spline",
      "tension": 0.5,
      "keyframes": [{"time": 0.0, "type": "Float", "value": "0.0"}],
      "eventframes": [{"time": 1.0, "eventtype": 42, "eventdata": {}}]
    }
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from tweenr.core.animation.curve import Curve
from tweenr.core.animation.errors import MalformedCurveDataError
from tweenr.core.formats.convert import curve_from_document, document_from_curve, load_into
from tweenr.core.formats.models import CurveDocument
from tweenr.core.utils.logging import get_logger

logger = get_logger(__name__)


def parse_document_json(text: str) -> CurveDocument:
    """Validate JSON text as a curve document.

    Raises:
        MalformedCurveDataError: Invalid JSON or schema violations.
    """
    try:
        return CurveDocument.model_validate_json(text)
    except ValidationError as e:
        raise MalformedCurveDataError(f"Invalid curve JSON: {e}") from e


def parse_curve_json(text: str, into: Curve | None = None) -> Curve:
    """Build a curve from JSON text; with ``into``, replace that curve's contents."""
    document = parse_document_json(text)
    return load_into(into, document) if into is not None else curve_from_document(document)


def load_curve_json(file_path: Path | str, into: Curve | None = None) -> Curve:
    """Load a curve JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedCurveDataError: If the content is invalid
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Curve file does not exist: {path}")
    logger.debug(f"Loading curve JSON: {path}")
    return parse_curve_json(path.read_text(encoding="utf-8"), into=into)


def dump_curve_json(curve: Curve, indent: int | None = 2) -> str:
    return document_from_curve(curve).model_dump_json(indent=indent)


def save_curve_json(curve: Curve, file_path: Path | str) -> None:
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_curve_json(curve), encoding="utf-8")
