# ==============================================
# JSON export
# ==============================================
#
# PURPOSE:
#   Fetched graphs may be cyclic and may hold RecordId and
#   datetime values, none of which json can encode. These
#   helpers collapse cycles (in place, see
#   remove_circular_references) and render opaque leaves as
#   strings.
#
# ==============================================

import json
from datetime import date, datetime
from typing import Any, Optional

from ..normalization.record_id import RecordId
from ..traversal.walker import CIRCULAR_PLACEHOLDER, remove_circular_references


def _encode_leaf(value: Any) -> Any:
    if isinstance(value, RecordId):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_serializable(graph: Any, placeholder: str = CIRCULAR_PLACEHOLDER) -> Any:
    """
    Make a graph JSON-safe: cycles are collapsed in place, then a
    plain copy with RecordId/datetime rendered as strings is returned.
    """
    remove_circular_references(graph, placeholder)
    return json.loads(json.dumps(graph, default=_encode_leaf))


def dumps(graph: Any, indent: Optional[int] = 2, placeholder: str = CIRCULAR_PLACEHOLDER) -> str:
    """Serialize a (possibly cyclic) graph to a JSON string."""
    remove_circular_references(graph, placeholder)
    return json.dumps(graph, default=_encode_leaf, indent=indent)
