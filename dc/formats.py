"""Export format registration.

Formats are registered by name with the function producing them.  The
built-in ``xml``, ``dc_xml`` and ``oai_dc_xml`` formats are aliases of the
same OAI Dublin Core serialiser.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from .document import ExportableDocument
from .errors import UnknownExportFormat
from .mapper import export_oai_dc_xml

Exporter = Callable[..., str]

# Registry mapping format name -> (exporter, mime type)
_FORMATS: Dict[str, Tuple[Exporter, Optional[str]]] = {}


def register_export_format(name: str, func: Exporter, mime_type: Optional[str] = None) -> None:
    """Register ``func`` as the exporter for the format ``name``."""

    _FORMATS[name] = (func, mime_type)


def export_formats() -> List[str]:
    """Return the registered format names in registration order."""

    return list(_FORMATS)


def mime_type_for(name: str) -> Optional[str]:
    if name not in _FORMATS:
        raise UnknownExportFormat(name)
    return _FORMATS[name][1]


def export_as(document: ExportableDocument, name: str, **kwargs: Any) -> str:
    """Export ``document`` in the format registered as ``name``.

    Raises
    ------
    UnknownExportFormat
        If no exporter is registered for ``name``.
    """

    if name not in _FORMATS:
        raise UnknownExportFormat(name)
    func, _ = _FORMATS[name]
    return func(document, **kwargs)


def _register_default_formats() -> None:
    register_export_format("xml", export_oai_dc_xml, "application/xml")
    register_export_format("dc_xml", export_oai_dc_xml, "text/xml")
    register_export_format("oai_dc_xml", export_oai_dc_xml, "text/xml")


_register_default_formats()

__all__ = ["export_as", "export_formats", "mime_type_for", "register_export_format"]
