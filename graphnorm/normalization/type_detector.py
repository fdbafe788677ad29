from datetime import date, datetime
from typing import Any

from .record_id import RecordId


class NodeKindDetector:
    """
    Classifies values of a fetched record graph.

    Only dicts and lists are containers. Timestamps and record ids are
    opaque leaves even when they carry internal structure.
    """
    CONTAINER_KINDS = {"object", "array"}
    OPAQUE_KINDS = {"timestamp", "record_id"}

    @classmethod
    def detect(cls, value: Any) -> str:
        if value is None:
            return "null"

        if isinstance(value, bool):
            return "bool"

        if isinstance(value, int):
            return "int"

        if isinstance(value, float):
            return "float"

        if isinstance(value, str):
            return "str"

        if isinstance(value, (datetime, date)):
            return "timestamp"

        if isinstance(value, RecordId):
            return "record_id"

        if isinstance(value, list):
            return "array"

        if isinstance(value, dict):
            return "object"

        return "other"

    @classmethod
    def is_container(cls, value: Any) -> bool:
        return cls.detect(value) in cls.CONTAINER_KINDS

    @classmethod
    def is_opaque_leaf(cls, value: Any) -> bool:
        return cls.detect(value) in cls.OPAQUE_KINDS

    @classmethod
    def children(cls, node: Any):
        """Yield (key, value) pairs of a container in natural order."""
        if isinstance(node, dict):
            return iter(list(node.items()))
        if isinstance(node, list):
            return iter(list(enumerate(node)))
        return iter(())
