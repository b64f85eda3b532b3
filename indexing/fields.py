"""Field groups that share one indexing treatment.

Each group lists the semantic field names that are indexed the same way.
The groups are applied in the order of :data:`FIELD_GROUPS` when the index
schema is composed, so a field listed twice ends up with the treatment of
the last group that lists it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple


class IndexBehavior(str, Enum):
    """Indexing behaviours understood by the search index builder."""

    STORED_SEARCHABLE = "stored_searchable"
    FACETABLE = "facetable"
    SYMBOL = "symbol"
    STORED_SORTABLE = "stored_sortable"
    DISPLAYABLE = "displayable"
    SEARCHABLE = "searchable"
    SORTABLE = "sortable"
    DATEABLE = "dateable"


STORED_AND_FACETABLE_FIELDS: Tuple[str, ...] = (
    "other_title",
    "alternate_title",
    "resource_type",
    "creator",
    "contributor",
    "keyword",
    "publisher",
    "language",
    "based_near",
    "geographic_coverage",
    "temporary_coverage",
    "gender_or_form",
    "subject_person",
    "subject_family",
    "subject_work",
    "subject",
    "subject_corporate",
    "notes",
    "classification",
    "item_access_restrictions",
    "digital_resource_generation_information",
    "interviewer",
    "interviewee",
    "organizer_collective_agent",
    "photographer",
    "collective_title",
    "part_of_place",
    "provenance",
    "curator_collective_agent_of",
    "project",
    "owner_agent_of",
    "custodian_agent_of",
    "file_type_details",
    "depository_collective_agent",
    "depository_agent",
    "corporate_body",
    "collective_agent",
    "supplementary_content_or_bibliography",
    "responsibility_statement",
    "other_related_persons",
    "table_of_contents",
    "type_of_content",
    "item_use_restrictions",
    "encoding_format_details",
    "type_of_illustrations",
    "center",
    "license",
    "rights_statement",
    "date_created",
    "bibliographic_citation",
    "source",
    "reviewer",
    "mode_of_issuance",
    "edition",
    "dimensions",
    "extension",
    "system_requirements",
    "editor",
    "translator",
    "compiler",
    "commentator",
    "contained_in",
)

STORED_FIELDS: Tuple[str, ...] = ("description", "identifier", "doi", "isbn", "related_url")

SYMBOL_FIELDS: Tuple[str, ...] = ("import_url",)


@dataclass(frozen=True)
class FieldGroup:
    """A named set of fields indexed with the same behaviours."""

    name: str
    fields: Tuple[str, ...]
    behaviors: Tuple[IndexBehavior, ...]


FIELD_GROUPS: Tuple[FieldGroup, ...] = (
    FieldGroup(
        "stored_and_facetable",
        STORED_AND_FACETABLE_FIELDS,
        (IndexBehavior.STORED_SEARCHABLE, IndexBehavior.FACETABLE),
    ),
    FieldGroup("stored", STORED_FIELDS, (IndexBehavior.STORED_SEARCHABLE,)),
    FieldGroup("symbol", SYMBOL_FIELDS, (IndexBehavior.SYMBOL,)),
)


def _as_fields(values: Optional[Iterable[str]], default: Tuple[str, ...]) -> Tuple[str, ...]:
    if values is None:
        return default
    # Keep the first occurrence of each name, preserving declaration order
    return tuple(dict.fromkeys(str(v) for v in values))


def field_groups_from_config(cfg: Optional[Dict[str, Any]] = None) -> Tuple[FieldGroup, ...]:
    """Return field groups with any lists from an ``[index]`` section applied.

    Keys ``stored_and_facetable``, ``stored`` and ``symbol`` replace the
    corresponding default lists.  Missing keys keep the defaults.
    """

    cfg = cfg or {}
    return tuple(
        FieldGroup(group.name, _as_fields(cfg.get(group.name), group.fields), group.behaviors)
        for group in FIELD_GROUPS
    )


__all__ = [
    "FieldGroup",
    "IndexBehavior",
    "FIELD_GROUPS",
    "STORED_AND_FACETABLE_FIELDS",
    "STORED_FIELDS",
    "SYMBOL_FIELDS",
    "field_groups_from_config",
]
