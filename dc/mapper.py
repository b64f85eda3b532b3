"""OAI Dublin Core serialisation of semantic documents.

Each allow-listed field is dispatched to the handler of its
:class:`~dc.fields.FieldRule`.  Fields are visited in the order the document
returns them and values in their own order.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional
from xml.etree.ElementTree import Element, SubElement, tostring

from .document import ExportableDocument
from .errors import ExportError
from .fields import FieldRule, element_for, rule_for
from .identifiers import IdentifierRecord
from .normalize import language_code, language_vocabulary
from .rights import rights_uri
from .settings import DEFAULT_SETTINGS, ExportSettings

OAI_DC_NAMESPACE = "http://www.openarchives.org/OAI/2.0/oai_dc/"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
OAI_DC_SCHEMA_LOCATION = f"{OAI_DC_NAMESPACE} http://www.openarchives.org/OAI/2.0/oai_dc.xsd"

# Characters outside the XML 1.0 Char production
_XML_ILLEGAL = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
XML_REPLACEMENT_CHAR = "*"

ROOT_ELEMENT = "oai_dc:dc"
ROOT_ATTRIBUTES: Dict[str, str] = {
    "xmlns:oai_dc": OAI_DC_NAMESPACE,
    "xmlns:dc": DC_NAMESPACE,
    "xmlns:xsi": XSI_NAMESPACE,
    "xsi:schemaLocation": OAI_DC_SCHEMA_LOCATION,
}


def xml_text(value: str) -> str:
    """Replace characters that cannot appear in an XML 1.0 document."""

    return _XML_ILLEGAL.sub(XML_REPLACEMENT_CHAR, value)


class _Context:
    """Per-export state shared by the rule handlers."""

    def __init__(
        self,
        root: Element,
        document: ExportableDocument,
        settings: ExportSettings,
        languages: Mapping[str, str],
    ):
        self.root = root
        self.document = document
        self.settings = settings
        self.languages = languages

    def add(self, tag: str, text: str, **attrib: str) -> Element:
        element = SubElement(self.root, tag, {k: xml_text(v) for k, v in attrib.items()})
        element.text = xml_text(text)
        return element


def _identifier_record(ctx: _Context, field: str, value: str) -> None:
    record = IdentifierRecord.parse(value)
    identifier = record.identifier_uri(ctx.settings.identifier_prefix)
    if identifier is None:
        ctx.add(element_for(field), record.display_name())
    else:
        ctx.add(element_for(field), record.display_name(), id=identifier)


def _classification_anchor(ctx: _Context, field: str, value: str) -> None:
    # Classification entries also carry the access rights and the
    # self-identifier of the document, once per classification value.
    ctx.add(element_for(field), f"{ctx.settings.classification_prefix}{value}")
    ctx.add("dc:rights", rights_uri(ctx.document.access_level(), ctx.settings.rights_prefix))
    ctx.add("dc:identifier", ctx.document.canonical_url(ctx.settings.base_url))


def _passthrough(ctx: _Context, field: str, value: str) -> None:
    ctx.add(element_for(field), value)


def _lowercase(ctx: _Context, field: str, value: str) -> None:
    ctx.add(element_for(field), value.lower())


def _vocabulary_lookup(ctx: _Context, field: str, value: str) -> None:
    ctx.add(element_for(field), language_code(value, ctx.languages))


RULE_HANDLERS: Dict[FieldRule, Callable[[_Context, str, str], None]] = {
    FieldRule.IDENTIFIER_RECORD: _identifier_record,
    FieldRule.CLASSIFICATION_ANCHOR: _classification_anchor,
    FieldRule.PASSTHROUGH: _passthrough,
    FieldRule.DESCRIPTION_COLLAPSE: _passthrough,
    FieldRule.LOWERCASE: _lowercase,
    FieldRule.VOCABULARY_LOOKUP: _vocabulary_lookup,
    FieldRule.GENERIC: _passthrough,
}


def _values(values: Any) -> list:
    if values is None:
        return []
    if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
        return [values]
    return list(values)


def build_oai_dc(
    document: ExportableDocument,
    settings: Optional[ExportSettings] = None,
    languages: Optional[Mapping[str, str]] = None,
) -> Element:
    """Return the ``oai_dc:dc`` element tree for ``document``.

    Parameters
    ----------
    document:
        Any object implementing :class:`~dc.document.ExportableDocument`.
    settings:
        Repository specific prefixes; defaults to the packaged settings.
    languages:
        Language name to ISO 639-2 code table.  Defaults to the table named
        by ``settings.language_rules``.

    Raises
    ------
    LanguageLookupError
        If a ``language`` value is not in the vocabulary.
    """

    settings = settings or DEFAULT_SETTINGS
    if languages is None:
        languages = language_vocabulary(settings.language_rules)
    root = Element(ROOT_ELEMENT, dict(ROOT_ATTRIBUTES))
    ctx = _Context(root, document, settings, languages)
    for field, values in document.semantic_fields().items():
        rule = rule_for(field)
        if rule is None:
            continue
        handler = RULE_HANDLERS[rule]
        for value in _values(values):
            handler(ctx, str(field), str(value))
    return root


def export_oai_dc_xml(
    document: ExportableDocument,
    settings: Optional[ExportSettings] = None,
    languages: Optional[Mapping[str, str]] = None,
) -> str:
    """Serialise ``document`` as an OAI Dublin Core XML string.

    No partial output is produced: errors raised by a rule handler propagate
    to the caller.
    """

    logger = logging.getLogger(__name__)
    url = document.canonical_url((settings or DEFAULT_SETTINGS).base_url)
    try:
        root = build_oai_dc(document, settings, languages)
    except ExportError as exc:
        logger.error(f"Dublin Core export failed for {url}: {exc}")
        raise
    logger.debug(f"Exported {len(root)} Dublin Core elements for {url}")
    return tostring(root, encoding="unicode")


__all__ = [
    "DC_NAMESPACE",
    "OAI_DC_NAMESPACE",
    "OAI_DC_SCHEMA_LOCATION",
    "RULE_HANDLERS",
    "build_oai_dc",
    "export_oai_dc_xml",
    "xml_text",
]
