# ==============================================
# Schema helpers
# ==============================================
#
# A collection schema maps attribute names to either a bare
# type string ("string", "integer", ...) or a dict that may
# carry:
#   type        → attribute type
#   foreignKey  → True for a relation attribute
#   model       → related model name (also a relation)
#   columnName  → name of the attribute in stored records
#
# Schemas are only read, never modified.
#
# ==============================================

import re
from typing import Any, Dict, Optional

JUNCTION_NAME_PATTERN = re.compile(r'^\w+_\w+__\w+_\w+$')


def get_attribute_as_object(schema: Optional[dict], column_name: Optional[str]) -> Optional[dict]:
    """
    Look up an attribute definition by attribute name or column name.

    Args:
        schema: Collection schema
        column_name: Attribute name, or the columnName of an attribute

    Returns:
        The attribute definition as a dict ({"type": ...} for bare
        type strings), or None if not found
    """
    if not schema or not column_name:
        return None

    if schema.get(column_name):
        attribute = schema[column_name]
        return {"type": attribute} if isinstance(attribute, str) else attribute

    for attribute in schema.values():
        if isinstance(attribute, dict) and attribute.get("columnName") == column_name:
            return attribute
    return None


def foreign_key_columns(schema: Optional[dict]) -> Dict[str, str]:
    """Map column name -> attribute name for every relation attribute."""
    columns: Dict[str, str] = {}
    if not schema:
        return columns

    for key, attribute in schema.items():
        if not isinstance(attribute, dict):
            continue
        if attribute.get("foreignKey") or attribute.get("model"):
            columns[attribute.get("columnName") or key] = key
    return columns


def is_junction_table_through(collection: Dict[str, Any]) -> bool:
    """
    Check if a collection definition describes a user-declared
    "through" junction table (as opposed to a generated one).
    """
    if not collection.get("junctionTable"):
        return False

    if collection.get("tables"):
        return False

    identity = collection.get("identity")
    table_name = collection.get("tableName")
    if identity and table_name and identity != table_name:
        return True

    name = identity or table_name or ""
    # generated junction tables are named like "user_pets__pet_owners"
    return not JUNCTION_NAME_PATTERN.match(name)
