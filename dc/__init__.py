from .errors import ExportError, LanguageLookupError, UnknownExportFormat
from .rights import AccessLevel, access_rights, rights_uri
from .identifiers import (
    IdentifierRecord,
    IdentifierScheme,
    parse_identifier_record,
)
from .fields import (
    DESCRIPTION_FIELDS,
    DUBLIN_CORE_FIELDS,
    FIELD_RULES,
    FieldRule,
    is_dublin_core_field,
    rule_for,
)
from .normalize import language_code, language_vocabulary
from .settings import DEFAULT_SETTINGS, ExportSettings
from .document import ExportableDocument, SemanticDocument
from .mapper import build_oai_dc, export_oai_dc_xml
from .formats import export_as, export_formats, mime_type_for, register_export_format

__all__ = [
    "ExportError",
    "LanguageLookupError",
    "UnknownExportFormat",
    "AccessLevel",
    "access_rights",
    "rights_uri",
    "IdentifierRecord",
    "IdentifierScheme",
    "parse_identifier_record",
    "DESCRIPTION_FIELDS",
    "DUBLIN_CORE_FIELDS",
    "FIELD_RULES",
    "FieldRule",
    "is_dublin_core_field",
    "rule_for",
    "language_code",
    "language_vocabulary",
    "DEFAULT_SETTINGS",
    "ExportSettings",
    "ExportableDocument",
    "SemanticDocument",
    "build_oai_dc",
    "export_oai_dc_xml",
    "export_as",
    "export_formats",
    "mime_type_for",
    "register_export_format",
]
