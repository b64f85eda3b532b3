"""Index schema composition.

The schema maps each semantic field to the behaviours the search index
applies to it.  :func:`build_schema` starts from a base schema supplied by
the indexing framework and layers the configured field groups on top of it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from .fields import FIELD_GROUPS, FieldGroup, IndexBehavior, field_groups_from_config


@dataclass(frozen=True)
class IndexObject:
    """Treatment descriptor for a single field."""

    name: str
    behaviors: Tuple[str, ...] = ()

    def as_list(self) -> list[str]:
        return list(self.behaviors)


def index_object_for(
    name: str, behaviors: Iterable[Union[str, IndexBehavior]] = ()
) -> IndexObject:
    """Return an :class:`IndexObject` for ``name`` indexed ``as`` the given behaviours."""

    values = (b.value if isinstance(b, IndexBehavior) else str(b) for b in behaviors)
    return IndexObject(name, tuple(dict.fromkeys(values)))


class IndexSchema(Mapping[str, IndexObject]):
    """Read-only mapping of field name to :class:`IndexObject`."""

    def __init__(self, entries: Optional[Mapping[str, IndexObject]] = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, key: str) -> IndexObject:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"IndexSchema({dict(self._entries)!r})"

    def to_dict(self) -> Dict[str, list[str]]:
        """Return a plain ``{field: [behaviour, ...]}`` dictionary."""

        return {name: obj.as_list() for name, obj in self._entries.items()}


BaseSchema = Mapping[str, Union[IndexObject, Iterable[str]]]


def _coerce_base(base: Optional[BaseSchema]) -> Dict[str, IndexObject]:
    entries: Dict[str, IndexObject] = {}
    for name, value in (base or {}).items():
        if isinstance(value, IndexObject):
            entries[name] = value
        elif isinstance(value, str):
            entries[name] = index_object_for(name, [value])
        else:
            entries[name] = index_object_for(name, value)
    return entries


def merge_config(
    first: Mapping[str, IndexObject], second: Mapping[str, IndexObject]
) -> IndexSchema:
    """Return ``first`` updated with every entry of ``second``.

    Entries of ``second`` replace entries of ``first`` with the same name;
    behaviours are not combined.
    """

    merged = dict(first)
    merged.update(second)
    return IndexSchema(merged)


def group_index_config(group: FieldGroup) -> Dict[str, IndexObject]:
    """Return the sub-schema assigning ``group.behaviors`` to each of its fields."""

    return {name: index_object_for(name, group.behaviors) for name in group.fields}


def build_schema(
    base: Optional[BaseSchema] = None,
    groups: Iterable[FieldGroup] = FIELD_GROUPS,
) -> IndexSchema:
    """Compose the index schema from ``base`` and the field ``groups``.

    Parameters
    ----------
    base:
        Inherited schema from the indexing framework.  Values may be
        :class:`IndexObject` instances or iterables of behaviour names.
    groups:
        Field groups applied in order; later groups win on name collisions.
    """

    logger = logging.getLogger(__name__)
    schema = IndexSchema(_coerce_base(base))
    for group in groups:
        sub = group_index_config(group)
        overridden = [name for name in sub if name in schema]
        if overridden:
            logger.debug(f"Group '{group.name}' overrides {len(overridden)} field(s): {overridden}")
        schema = merge_config(schema, sub)
    logger.debug(f"Built index schema with {len(schema)} fields")
    return schema


def configured_schema(
    cfg: Optional[Dict[str, Any]] = None, base: Optional[BaseSchema] = None
) -> IndexSchema:
    """Build the schema using the field groups of an ``[index]`` config section."""

    return build_schema(base, field_groups_from_config(cfg))


__all__ = [
    "IndexObject",
    "IndexSchema",
    "build_schema",
    "configured_schema",
    "group_index_config",
    "index_object_for",
    "merge_config",
]
