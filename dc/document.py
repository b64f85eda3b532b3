"""Documents that can be exported as Dublin Core.

The export mapper only needs the small read-only surface described by
:class:`ExportableDocument`.  :class:`SemanticDocument` is the concrete
model used by the CLI, the enrichment job and the tests.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .rights import AccessLevel
from .settings import DEFAULT_BASE_URL


@runtime_checkable
class ExportableDocument(Protocol):
    """Protocol for documents handed to the Dublin Core exporter."""

    def semantic_fields(self) -> Mapping[str, Sequence[str]]:
        """Field name to values, in the document's own field order."""
        ...

    def access_level(self) -> AccessLevel:
        """Visibility of the document."""
        ...

    def canonical_url(self, base_url: Optional[str] = None) -> str:
        """Public URL of the document in the repository.

        ``base_url`` is the repository URL to use when the document does not
        carry one of its own.
        """
        ...

    def type_label(self) -> str:
        """Human readable resource type, e.g. ``"Article"``."""
        ...


# English plural inflections, checked in order; the first match wins
_PLURAL_RULES = (
    (re.compile(r"(?i)(quiz)$"), r"\1zes"),
    (re.compile(r"(?i)^(oxen)$"), r"\1"),
    (re.compile(r"(?i)^(ox)$"), r"\1en"),
    (re.compile(r"(?i)^(m|l)ice$"), r"\1ice"),
    (re.compile(r"(?i)^(m|l)ouse$"), r"\1ice"),
    (re.compile(r"(?i)(matr|vert|ind)(?:ix|ex)$"), r"\1ices"),
    (re.compile(r"(?i)(x|ch|ss|sh)$"), r"\1es"),
    (re.compile(r"(?i)([^aeiouy]|qu)y$"), r"\1ies"),
    (re.compile(r"(?i)(hive)$"), r"\1s"),
    (re.compile(r"(?i)(?:([^f])fe|([lr])f)$"), r"\1\2ves"),
    (re.compile(r"(?i)sis$"), "ses"),
    (re.compile(r"(?i)([ti])a$"), r"\1a"),
    (re.compile(r"(?i)([ti])um$"), r"\1a"),
    (re.compile(r"(?i)(buffal|tomat)o$"), r"\1oes"),
    (re.compile(r"(?i)(bu)s$"), r"\1ses"),
    (re.compile(r"(?i)(alias|status)$"), r"\1es"),
    (re.compile(r"(?i)(octop|vir)i$"), r"\1i"),
    (re.compile(r"(?i)(octop|vir)us$"), r"\1i"),
    (re.compile(r"(?i)^(ax|test)is$"), r"\1es"),
    (re.compile(r"(?i)s$"), "s"),
)

_IRREGULAR_PLURALS = {
    "person": "people",
    "man": "men",
    "child": "children",
    "sex": "sexes",
    "move": "moves",
    "zombie": "zombies",
}

_UNCOUNTABLE = frozenset(
    [
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "jeans",
        "police",
    ]
)


def pluralize(word: str) -> str:
    """Return the English plural of ``word`` (``Thesis`` -> ``Theses``).

    Only the last word of a multi-word label is inflected, so
    ``"Book Chapter"`` becomes ``"Book Chapters"``.
    """

    head, sep, last = word.rpartition(" ")
    lower = last.lower()
    if not last or lower in _UNCOUNTABLE:
        return word
    if lower in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lower]
        return f"{head}{sep}{last[0]}{plural[1:]}"
    for pattern, replacement in _PLURAL_RULES:
        if pattern.search(last):
            return f"{head}{sep}{pattern.sub(replacement, last)}"
    return f"{word}s"


def _as_values(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


class SemanticDocument(BaseModel):
    """A repository work reduced to its semantic field values.

    Field values are always lists; scalars are wrapped and ``None`` becomes
    an empty list.  Field order is preserved as given.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    resource_type_label: str = Field("Work", alias="type")
    visibility: Optional[str] = None
    base_url: Optional[str] = None
    fields: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("fields", mode="before")
    @classmethod
    def _wrap_values(cls, value: Any) -> Dict[str, List[str]]:
        if value is None:
            return {}
        return {str(name): _as_values(values) for name, values in dict(value).items()}

    def semantic_fields(self) -> Mapping[str, Sequence[str]]:
        return self.fields

    def access_level(self) -> AccessLevel:
        return AccessLevel.parse(self.visibility)

    def type_label(self) -> str:
        return self.resource_type_label

    def canonical_url(self, base_url: Optional[str] = None) -> str:
        base = self.base_url or base_url or DEFAULT_BASE_URL
        segment = pluralize(self.resource_type_label).lower().replace(" ", "_")
        return f"{base.rstrip('/')}/{segment}/{self.id}"


__all__ = ["ExportableDocument", "SemanticDocument", "pluralize"]
