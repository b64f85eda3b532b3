"""Dublin Core field allow-list and per-field export rules.

Every exportable field maps to exactly one :class:`FieldRule`.  Fields that
are not listed in :data:`DUBLIN_CORE_FIELDS` are left out of the export.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class FieldRule(Enum):
    """Transformation applied to each value of a field."""

    PASSTHROUGH = "passthrough"
    IDENTIFIER_RECORD = "identifier_record"
    CLASSIFICATION_ANCHOR = "classification_anchor"
    DESCRIPTION_COLLAPSE = "description_collapse"
    LOWERCASE = "lowercase"
    VOCABULARY_LOOKUP = "vocabulary_lookup"
    GENERIC = "generic"


DUBLIN_CORE_FIELDS: Tuple[str, ...] = (
    "contributor_conacyt",
    "creator_conacyt",
    "date",
    "description",
    "subject",
    "subject_person",
    "subject_work",
    "subject_family",
    "themes",
    "identifier",
    "language",
    "publisher",
    "source",
    "title",
    "subject_conacyt",
    "rights",
    "type",
    "audience",
)

# Fields rendered as dc:description
DESCRIPTION_FIELDS: Tuple[str, ...] = (
    "description",
    "subject",
    "subject_work",
    "subject_person",
    "subject_family",
    "themes",
)

_RULES = {name: FieldRule.GENERIC for name in DUBLIN_CORE_FIELDS}
_RULES.update(
    {
        "creator_conacyt": FieldRule.IDENTIFIER_RECORD,
        "contributor_conacyt": FieldRule.IDENTIFIER_RECORD,
        "subject_conacyt": FieldRule.CLASSIFICATION_ANCHOR,
        "type": FieldRule.PASSTHROUGH,
        "rights": FieldRule.PASSTHROUGH,
        "audience": FieldRule.LOWERCASE,
        "language": FieldRule.VOCABULARY_LOOKUP,
    }
)
_RULES.update({name: FieldRule.DESCRIPTION_COLLAPSE for name in DESCRIPTION_FIELDS})

FIELD_RULES: Mapping[str, FieldRule] = MappingProxyType(_RULES)

_ELEMENTS = {name: name for name in DUBLIN_CORE_FIELDS}
_ELEMENTS.update(
    {
        "creator_conacyt": "creator",
        "contributor_conacyt": "contributor",
        "subject_conacyt": "subject",
    }
)
_ELEMENTS.update({name: "description" for name in DESCRIPTION_FIELDS})

# Local name of the dc: element each field is written to
FIELD_ELEMENTS: Mapping[str, str] = MappingProxyType(_ELEMENTS)


def is_dublin_core_field(field: object) -> bool:
    return str(field) in FIELD_RULES


def rule_for(field: object) -> Optional[FieldRule]:
    """Return the rule for ``field`` or ``None`` if it is not exported."""

    return FIELD_RULES.get(str(field))


def element_for(field: object) -> str:
    """Return the ``dc:`` element name ``field`` is written to."""

    return f"dc:{FIELD_ELEMENTS[str(field)]}"


__all__ = [
    "DESCRIPTION_FIELDS",
    "DUBLIN_CORE_FIELDS",
    "FIELD_ELEMENTS",
    "FIELD_RULES",
    "FieldRule",
    "element_for",
    "is_dublin_core_field",
    "rule_for",
]
