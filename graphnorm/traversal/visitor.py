# ==============================================
# ProcessedSet
# ==============================================
#
# PURPOSE:
#   Remember which containers a traversal has already entered.
#   Membership is by object identity, never by equality: two
#   distinct dicts with the same content are two nodes.
#
#   Every marked node is kept referenced by the set, so its id()
#   cannot be reused by a new object while the traversal runs.
#   Lookups are O(1).
#
#   A ProcessedSet lives for one top-level call and is threaded
#   through every nested step of that call.
#
# ==============================================

from typing import Any, Dict, Iterator


class ProcessedSet:
    """Set of visited containers, keyed by object identity."""
    def __init__(self):
        self._nodes: Dict[int, Any] = {}

    def seen(self, node: Any) -> bool:
        return id(node) in self._nodes

    def mark(self, node: Any) -> None:
        self._nodes[id(node)] = node

    def visit(self, node: Any) -> bool:
        """
        Mark ``node`` as processed.

        Returns:
            True the first time the node is visited, False afterwards
        """
        if self.seen(node):
            return False
        self.mark(node)
        return True

    def __contains__(self, node: Any) -> bool:
        return self.seen(node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes.values())
