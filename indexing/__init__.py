from .fields import (
    FIELD_GROUPS,
    STORED_AND_FACETABLE_FIELDS,
    STORED_FIELDS,
    SYMBOL_FIELDS,
    FieldGroup,
    IndexBehavior,
    field_groups_from_config,
)
from .schema import (
    IndexObject,
    IndexSchema,
    build_schema,
    configured_schema,
    index_object_for,
    merge_config,
)
from .solr import SOLR_SUFFIXES, solr_names, to_solr

__all__ = [
    "FIELD_GROUPS",
    "STORED_AND_FACETABLE_FIELDS",
    "STORED_FIELDS",
    "SYMBOL_FIELDS",
    "FieldGroup",
    "field_groups_from_config",
    "IndexBehavior",
    "IndexObject",
    "IndexSchema",
    "build_schema",
    "configured_schema",
    "index_object_for",
    "merge_config",
    "SOLR_SUFFIXES",
    "solr_names",
    "to_solr",
]
