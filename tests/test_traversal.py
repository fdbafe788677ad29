# ==============================================
# Tests for Traversal Module
# ==============================================

from datetime import datetime

from graphnorm.normalization import RecordId
from graphnorm.traversal import (
    ProcessedSet,
    reduce_nested_objects,
    for_each_nested,
    remove_circular_references,
)


def _collect_keys(acc, node, key):
    acc.append(key)
    return acc


class TestProcessedSet:
    def test_visit_only_once(self):
        processed = ProcessedSet()
        node = {"a": 1}
        assert processed.visit(node) is True
        assert processed.visit(node) is False
        assert node in processed
        assert len(processed) == 1

    def test_documented(self):
        assert ProcessedSet.__doc__ == "Set of visited containers, keyed by object identity."

    def test_identity_not_equality(self):
        processed = ProcessedSet()
        processed.mark({"a": 1})
        assert {"a": 1} not in processed

    def test_marked_nodes_are_kept_alive(self):
        processed = ProcessedSet()
        processed.mark([1, 2])
        assert list(processed) == [[1, 2]]


class TestReduceNestedObjects:
    def test_pre_order_with_root_key(self):
        graph = {"a": {"b": [1, {"c": 2}]}, "d": 3}
        keys = reduce_nested_objects(graph, _collect_keys, [])
        assert keys == ["_root", "a", "b", 1]

    def test_custom_root_key(self):
        keys = reduce_nested_objects({"a": {}}, _collect_keys, [], "top")
        assert keys == ["top", "a"]

    def test_parent_visited_before_children(self):
        graph = {"x": {"y": {"z": {}}}}
        seen = reduce_nested_objects(graph, lambda acc, node, key: acc + [sorted(node)], [])
        assert seen == [["x"], ["y"], ["z"], []]

    def test_self_reference_visited_once(self):
        node = {"name": "x"}
        node["self"] = node
        keys = reduce_nested_objects(node, _collect_keys, [])
        assert keys == ["_root"]

    def test_shared_node_visited_once(self):
        shared = {"v": 1}
        keys = reduce_nested_objects({"p": shared, "q": shared}, _collect_keys, [])
        assert keys == ["_root", "p"]

    def test_equal_but_distinct_nodes_both_visited(self):
        keys = reduce_nested_objects({"p": {"v": 1}, "q": {"v": 1}}, _collect_keys, [])
        assert keys == ["_root", "p", "q"]

    def test_opaque_leaves_not_visited(self):
        graph = {"when": datetime(2024, 1, 1), "rid": RecordId(1, 2), "n": 5}
        keys = reduce_nested_objects(graph, _collect_keys, [])
        assert keys == ["_root"]

    def test_default_accumulator_is_dict(self):
        result = reduce_nested_objects({"a": [1]}, lambda acc, node, key: acc)
        assert result == {}

    def test_none_collection_returns_accumulator(self):
        assert reduce_nested_objects(None, _collect_keys, ["start"]) == ["start"]

    def test_deep_graph_does_not_exhaust_stack(self):
        root = {}
        node = root
        for _ in range(5000):
            child = {}
            node["next"] = child
            node = child
        count = reduce_nested_objects(root, lambda acc, node, key: acc + 1, 0)
        assert count == 5001


class TestForEachNested:
    def test_leaves_in_natural_order(self):
        calls = []
        graph = {"a": 1, "b": [2, 3], "c": {"d": 4}}
        for_each_nested(graph, lambda value, key, parent: calls.append((value, key)))
        assert calls == [(1, "a"), (2, 0), (3, 1), (4, "d")]

    def test_parent_is_passed(self):
        parents = []
        inner = {"d": 4}
        for_each_nested({"c": inner}, lambda value, key, parent: parents.append(parent))
        assert parents[0] is inner

    def test_opaque_leaves_are_leaves(self):
        values = []
        when = datetime(2024, 1, 1)
        rid = RecordId(3, 1)
        for_each_nested({"when": when, "rid": rid}, lambda value, key, parent: values.append(value))
        assert values == [when, rid]

    def test_cycle_callback_called_once(self):
        container = {"name": "n"}
        container["x"] = container
        leaves = []
        cycles = []

        for_each_nested(
            container,
            lambda value, key, parent: leaves.append((value, key)),
            ProcessedSet(),
            lambda value, key, parent: cycles.append((value, key, parent)),
        )

        assert leaves == [("n", "name")]
        assert len(cycles) == 1
        value, key, parent = cycles[0]
        assert value is container
        assert key == "x"
        assert parent is container

    def test_cycles_ignored_by_default(self):
        a = {"v": 1}
        b = {"a": a}
        a["b"] = b
        values = []
        for_each_nested(a, lambda value, key, parent: values.append(value))
        assert values == [1]

    def test_none_collection(self):
        for_each_nested(None, lambda value, key, parent: None)


class TestRemoveCircularReferences:
    def test_back_edge_replaced_by_id(self):
        parent = {"id": "#1:1", "name": "a"}
        child = {"name": "b", "parent": parent}
        parent["child"] = child

        result = remove_circular_references(parent)

        assert result is parent
        assert parent["child"]["parent"] == "#1:1"

    def test_back_edge_without_id_uses_placeholder(self):
        node = {"name": "a"}
        node["self"] = node
        remove_circular_references(node)
        assert node == {"name": "a", "self": "[Circular]"}

    def test_custom_placeholder(self):
        items = [1]
        items.append(items)
        remove_circular_references(items, placeholder="<cycle>")
        assert items == [1, "<cycle>"]

    def test_acyclic_graph_untouched(self):
        graph = {"a": [1, {"b": 2}]}
        remove_circular_references(graph)
        assert graph == {"a": [1, {"b": 2}]}
