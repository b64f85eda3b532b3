from .assignor import (
    ENRICHED_FIELDS,
    AssignorJob,
    AuthorRegistry,
    StaticAuthorRegistry,
    enrich_document,
    format_identifier_record,
    lookup_identifier_records,
    query_name,
    transliterate,
)

__all__ = [
    "ENRICHED_FIELDS",
    "AssignorJob",
    "AuthorRegistry",
    "StaticAuthorRegistry",
    "enrich_document",
    "format_identifier_record",
    "lookup_identifier_records",
    "query_name",
    "transliterate",
]
