# ==============================================
# TRAVERSAL
# ==============================================
#
# Generic, cycle-safe walks over nested dict/list graphs.
#
# Modules:
# --------
# - visitor.py  → ProcessedSet: "seen already?" by object identity
# - reducer.py  → reduce_nested_objects: fold over every container, pre-order
# - walker.py   → for_each_nested: visit every leaf, report repeated containers
#                 remove_circular_references: collapse back-edges
#
# ==============================================

from .visitor import ProcessedSet
from .reducer import reduce_nested_objects
from .walker import for_each_nested, remove_circular_references

__all__ = [
    "ProcessedSet",
    "reduce_nested_objects",
    "for_each_nested",
    "remove_circular_references",
]
