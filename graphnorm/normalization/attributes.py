# ==============================================
# clean_orient_attributes
# ==============================================
#
# Strips driver bookkeeping from a fetched record:
#   - attributes starting with "@" (@rid, @version, @class, ...)
#   - "@" attributes one level down inside dict values
#   - edge attributes ("in_*", "out_*") unless the schema declares
#     an attribute with exactly that name
#
# Single level only, in place.
#
# ==============================================

from typing import Any, Optional

RESERVED_PREFIX = "@"
EDGE_PREFIXES = ("in_", "out_")


def clean_orient_attributes(record: Any, schema: Optional[dict] = None) -> None:
    """
    Clean a record from edges and attributes starting with "@".

    Args:
        record: Record to clean
        schema: Collection schema; edge-named attributes it declares are kept
    """
    if not record or not isinstance(record, dict):
        return

    for key in list(record.keys()):
        name = key if isinstance(key, str) else ""
        if name.startswith(RESERVED_PREFIX):
            del record[key]
            continue

        value = record[key]
        if isinstance(value, dict):
            for nested_key in list(value.keys()):
                if isinstance(nested_key, str) and nested_key.startswith(RESERVED_PREFIX):
                    del value[nested_key]

        if name.startswith(EDGE_PREFIXES):
            if schema and schema.get(key):
                continue
            del record[key]
