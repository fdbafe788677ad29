# ==============================================
# reduce_nested_objects
# ==============================================
#
# PURPOSE:
#   Fold a callback over every container of a nested graph,
#   the root included, in pre-order (a node before its children,
#   children in natural key/index order).
#
#   callback(accumulator, node, key) -> accumulator
#
#   Only dicts and lists are visited. Scalars, timestamps and
#   record ids are skipped. A container reached a second time
#   (shared or circular reference) is skipped silently and the
#   accumulator passes through unchanged.
#
#   The walk uses an explicit stack, so deep graphs do not hit
#   the interpreter's recursion limit.
#
# ==============================================

import logging
from typing import Any, Callable, Optional

from ..normalization.type_detector import NodeKindDetector
from .visitor import ProcessedSet

logger = logging.getLogger(__name__)

ROOT_KEY = "_root"


def reduce_nested_objects(
    collection: Any,
    callback: Callable[[Any, Any, Any], Any],
    accumulator: Any = None,
    root_key: Any = ROOT_KEY,
    processed: Optional[ProcessedSet] = None
) -> Any:
    """
    Reduce nested objects: runs ``callback`` on the root and on every
    nested dict/list exactly once.

    Args:
        collection: Root of the graph
        callback: function(accumulator, node, key) returning the new accumulator
        accumulator: Initial accumulator (a new dict if omitted)
        root_key: Key reported for the root node
        processed: Identity set shared with an enclosing traversal, if any

    Returns:
        The final accumulator
    """
    if accumulator is None:
        accumulator = {}
    if processed is None:
        processed = ProcessedSet()
    if collection is None:
        return accumulator

    stack = [(root_key, collection)]
    while stack:
        key, node = stack.pop()
        if not processed.visit(node):
            logger.debug("reduce: skipping already processed node at key %r", key)
            continue

        accumulator = callback(accumulator, node, key)

        nested = [
            (child_key, child)
            for child_key, child in NodeKindDetector.children(node)
            if NodeKindDetector.is_container(child)
        ]
        # reversed so the first child is popped first
        stack.extend(reversed(nested))

    return accumulator
