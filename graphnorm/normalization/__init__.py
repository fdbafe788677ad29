# ==============================================
# NORMALIZATION
# ==============================================
#
# Rewrites store-specific records into the shape consumers expect.
#
# Modules:
# --------
# - record_id.py     → RecordId value type, record id matching
# - type_detector.py → Classify values (container, opaque leaf, scalar)
# - schema.py        → Read-only helpers over collection schemas
# - identifiers.py   → @rid/rid → id, foreign keys → strings
# - attributes.py    → Strip "@" attributes and unexpanded edges
#
# ==============================================

from .record_id import RecordId, match_record_id, is_temporary_id
from .type_detector import NodeKindDetector
from .schema import get_attribute_as_object, foreign_key_columns, is_junction_table_through
from .identifiers import replace_key_for_id, rewrite_ids, rewrite_ids_recursive
from .attributes import clean_orient_attributes

__all__ = [
    "RecordId",
    "match_record_id",
    "is_temporary_id",
    "NodeKindDetector",
    "get_attribute_as_object",
    "foreign_key_columns",
    "is_junction_table_through",
    "replace_key_for_id",
    "rewrite_ids",
    "rewrite_ids_recursive",
    "clean_orient_attributes",
]
