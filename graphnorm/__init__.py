# ==============================================
# graphnorm: cycle-safe record graph normalization
# ==============================================
#
# Package Structure:
#
# graphnorm/
# ├── traversal/        # Identity-set visitor, reducer, for-each walker
# ├── normalization/    # Record ids, id rewriting, attribute cleaning
# ├── export/           # JSON rendering of (possibly cyclic) graphs
# ├── persistence/      # Snapshots of normalized graphs on disk
# ├── config.py         # Configuration management
# ├── errors.py         # Exception hierarchy
# └── cli.py            # Command line entry point
#
# ==============================================

from .normalization import (
    RecordId,
    match_record_id,
    replace_key_for_id,
    rewrite_ids,
    rewrite_ids_recursive,
    clean_orient_attributes,
    get_attribute_as_object,
)
from .traversal import (
    ProcessedSet,
    reduce_nested_objects,
    for_each_nested,
    remove_circular_references,
)
from .errors import GraphNormError, IdentifierFieldError

__version__ = "0.1.0"

__all__ = [
    "ProcessedSet",
    "reduce_nested_objects",
    "for_each_nested",
    "remove_circular_references",
    "RecordId",
    "match_record_id",
    "replace_key_for_id",
    "rewrite_ids",
    "rewrite_ids_recursive",
    "clean_orient_attributes",
    "get_attribute_as_object",
    "GraphNormError",
    "IdentifierFieldError",
]
