"""Author registry enrichment.

Looks up every ``creator`` and ``contributor`` of a document in the national
author registry and stores the first match as identifier-record text in
``creator_conacyt`` / ``contributor_conacyt``, the fields read by the Dublin
Core export.

The registry client is supplied by the caller through the
:class:`AuthorRegistry` protocol.
"""

from __future__ import annotations

import json
import logging
import re
import unicodedata
from pathlib import Path
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Protocol,
    runtime_checkable,
)

from dc.document import SemanticDocument
from dc.identifiers import SEPARATOR
from dc.normalize import ascii_approximations

# Source field -> field receiving the identifier records
ENRICHED_FIELDS: Dict[str, str] = {
    "creator": "creator_conacyt",
    "contributor": "contributor_conacyt",
}

_NON_QUERY_CHARS = re.compile(r"[^0-9A-Za-z ]")


@runtime_checkable
class AuthorRegistry(Protocol):
    """Protocol for author registry lookups."""

    def find_by_full_name(self, name: str) -> List[Dict[str, Any]]:
        """Return registry entries matching ``name``, best match first."""
        ...


class StaticAuthorRegistry:
    """Registry answering from a fixed ``{query name: [entries]}`` mapping."""

    def __init__(self, entries: Optional[Mapping[str, List[Dict[str, Any]]]] = None):
        self.entries = dict(entries or {})

    @classmethod
    def from_json(cls, path: Path) -> "StaticAuthorRegistry":
        with path.open("r", encoding="utf-8") as fh:
            return cls(json.load(fh))

    def find_by_full_name(self, name: str) -> List[Dict[str, Any]]:
        return list(self.entries.get(name, []))


def transliterate(text: str) -> str:
    """Return an ASCII approximation of ``text``.

    Accents are removed through NFKD decomposition (``"Peña"`` -> ``"Pena"``);
    letters without a decomposition are replaced from the approximation
    table (``"Łukasz"`` -> ``"Lukasz"``, ``"Strauß"`` -> ``"Strauss"``).
    """

    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    approximations = ascii_approximations()
    return "".join(approximations.get(ch, ch) for ch in stripped)


def query_name(name: str) -> str:
    """Return the registry query for a ``"Surname, Given names"`` value.

    Given names are moved first, accents are removed and any character
    other than ASCII letters, digits and spaces is dropped.
    """

    parts = name.split(", ")
    if len(parts) > 1:
        full_name = f"{parts[1]} {parts[0]}"
    else:
        full_name = parts[0]
    return _NON_QUERY_CHARS.sub("", transliterate(full_name))


def format_identifier_record(entry: Mapping[str, Any]) -> str:
    """Render a registry entry as ``key: value`` lines."""

    return "".join(f"{key}{SEPARATOR}{value}\n" for key, value in entry.items())


def lookup_identifier_records(names: Iterable[str], registry: AuthorRegistry) -> List[str]:
    """Return one identifier record for each name found in ``registry``."""

    logger = logging.getLogger(__name__)
    records: List[str] = []
    for name in names:
        query = query_name(name)
        matches = registry.find_by_full_name(query)
        if not matches:
            logger.info(f"No registry match for '{name}'")
            continue
        records.append(format_identifier_record(matches[0]))
    return records


def enrich_document(document: SemanticDocument, registry: AuthorRegistry) -> SemanticDocument:
    """Return a copy of ``document`` with registry identifier records attached.

    Existing ``creator_conacyt`` and ``contributor_conacyt`` values are
    replaced.  Registry errors propagate.
    """

    fields = dict(document.fields)
    for source, target in ENRICHED_FIELDS.items():
        fields[target] = lookup_identifier_records(fields.get(source, []), registry)
    return document.model_copy(update={"fields": fields})


class AssignorJob:
    """Batch job enriching documents from an author registry."""

    def __init__(self, registry: AuthorRegistry):
        self.registry = registry
        self.logger = logging.getLogger(__name__)
        self.processed = 0
        self.matched = 0

    def run(self, documents: Iterable[SemanticDocument]) -> Iterator[SemanticDocument]:
        """Yield each document enriched with identifier records."""

        for document in documents:
            enriched = enrich_document(document, self.registry)
            self.processed += 1
            found = sum(len(enriched.fields[target]) for target in ENRICHED_FIELDS.values())
            self.matched += found
            self.logger.info(f"Document {document.id}: {found} identifier record(s) assigned")
            yield enriched
        self.logger.info(
            f"Enrichment finished: {self.processed} document(s), {self.matched} record(s)"
        )
