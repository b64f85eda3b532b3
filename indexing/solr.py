from __future__ import annotations

from typing import Any, Dict, List, Mapping

from .fields import IndexBehavior
from .schema import IndexObject, IndexSchema

# Dynamic-field suffixes of the repository Solr schema
SOLR_SUFFIXES: Dict[IndexBehavior, str] = {
    IndexBehavior.STORED_SEARCHABLE: "_tesim",
    IndexBehavior.FACETABLE: "_sim",
    IndexBehavior.SYMBOL: "_ssim",
    IndexBehavior.STORED_SORTABLE: "_ssi",
    IndexBehavior.DISPLAYABLE: "_ssm",
    IndexBehavior.SEARCHABLE: "_teim",
    IndexBehavior.SORTABLE: "_si",
    IndexBehavior.DATEABLE: "_dtsim",
}


def solr_names(index_object: IndexObject) -> List[str]:
    """Return the Solr field names produced by ``index_object``.

    Raises
    ------
    ValueError
        If one of the behaviours has no Solr suffix.
    """

    names = []
    for behavior in index_object.behaviors:
        try:
            suffix = SOLR_SUFFIXES[IndexBehavior(behavior)]
        except (KeyError, ValueError):
            raise ValueError(
                f"No Solr suffix for behavior '{behavior}' of field '{index_object.name}'"
            ) from None
        names.append(f"{index_object.name}{suffix}")
    return names


def to_solr(schema: IndexSchema, fields: Mapping[str, Any]) -> Dict[str, List[str]]:
    """Build a Solr document from semantic ``fields`` using ``schema``.

    Fields unknown to the schema and fields without values are skipped.
    """

    doc: Dict[str, List[str]] = {}
    for name, values in fields.items():
        if name not in schema:
            continue
        if values is None:
            continue
        if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
            values = [values]
        values = [str(v) for v in values]
        if not values:
            continue
        for solr_name in solr_names(schema[name]):
            doc[solr_name] = list(values)
    return doc
