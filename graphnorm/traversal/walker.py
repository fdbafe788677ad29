# ==============================================
# for_each_nested / remove_circular_references
# ==============================================
#
# PURPOSE:
#   for_each_nested calls callback(value, key, parent) for every
#   leaf of a nested graph. Timestamps and record ids are leaves.
#   When a container is reached that was already entered during
#   this walk, circular_callback(value, key, parent) is called
#   instead and the walk does not descend into it again.
#
#   remove_circular_references uses the walker to replace those
#   repeated references in their parent, either with the node's
#   "id" or with a placeholder string, leaving an acyclic graph.
#
# ==============================================

import logging
from typing import Any, Callable, Optional

from ..normalization.type_detector import NodeKindDetector
from .visitor import ProcessedSet

logger = logging.getLogger(__name__)

CIRCULAR_PLACEHOLDER = "[Circular]"

Callback = Callable[[Any, Any, Any], Any]


def _noop(value, key, parent):
    return None


def for_each_nested(
    collection: Any,
    callback: Callback,
    processed: Optional[ProcessedSet] = None,
    circular_callback: Optional[Callback] = None
) -> None:
    """
    For each leaf, including nested properties.

    Args:
        collection: Root of the graph
        callback: function(value, key, parent) called for every leaf
        processed: Identity set shared with an enclosing traversal, if any
        circular_callback: function(value, key, parent) called for every
            reference to an already visited container (default: ignore)
    """
    if processed is None:
        processed = ProcessedSet()
    if circular_callback is None:
        circular_callback = _noop
    if collection is None:
        return

    processed.mark(collection)
    stack = [(collection, NodeKindDetector.children(collection))]

    while stack:
        parent, items = stack[-1]
        entry = next(items, None)
        if entry is None:
            stack.pop()
            continue

        key, value = entry
        if not NodeKindDetector.is_container(value):
            callback(value, key, parent)
            continue

        if processed.seen(value):
            logger.debug("for_each: repeated reference at key %r", key)
            circular_callback(value, key, parent)
            continue

        processed.mark(value)
        stack.append((value, NodeKindDetector.children(value)))


def remove_circular_references(collection: Any, placeholder: str = CIRCULAR_PLACEHOLDER) -> Any:
    """
    Replace every repeated reference with the referenced record's id,
    or with ``placeholder`` when it has none. Mutates in place.

    Returns:
        The same collection, now acyclic
    """
    def _replace(value, key, parent):
        node_id = value.get("id") if isinstance(value, dict) else None
        parent[key] = node_id if node_id else placeholder

    for_each_nested(collection, _noop, ProcessedSet(), _replace)
    return collection
