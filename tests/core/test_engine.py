"""Tests for xray.core.engine: traversal, cycles and collapse together."""

import pytest

import xray
from xray import Kind, XRayEngine
from xray.testing import (
    get_deep_cycle,
    get_nested,
    get_self_dict,
    get_self_instance,
    get_self_list,
    get_shared,
)


@pytest.fixture(autouse=True)
def clear_config():
    xray.config.clear()
    yield
    xray.config.clear()


def paths_of(node):
    return [n.path for n in node.walk()]


class TestPaths:
    def test_nested_example(self):
        node = XRayEngine(get_nested()).describe()
        assert node.kind is Kind.PLAIN_OBJECT
        assert [row.path for row in node.children] == ["$.x", "$.y"]

        y = node.child("y").node
        assert y.kind is Kind.ARRAY
        assert [row.path for row in y.children] == ["$.y[0]", "$.y[1]"]

    def test_paths_are_deterministic(self):
        first = paths_of(XRayEngine(get_nested()).describe())
        second = paths_of(XRayEngine(get_nested()).describe())
        assert first == second

    def test_redescribe_same_engine(self):
        engine = XRayEngine(get_shared())
        first = engine.describe()
        second = engine.describe()
        assert paths_of(first) == paths_of(second)
        assert Kind.CIRCULAR_REFERENCE not in {n.kind for n in second.walk()}

    def test_classify_without_reset_is_rerender_safe(self):
        engine = XRayEngine(get_nested())
        engine.classify(engine.obj)
        node = engine.classify(engine.obj)
        assert node.kind is Kind.PLAIN_OBJECT
        assert Kind.CIRCULAR_REFERENCE not in {n.kind for n in node.walk()}


class TestCycles:
    def test_self_dict(self):
        node = XRayEngine(get_self_dict()).describe()
        assert node.kind is Kind.PLAIN_OBJECT
        loop = node.child("self").node
        assert loop.kind is Kind.CIRCULAR_REFERENCE
        assert loop.path == "$.self"

    def test_self_instance(self):
        node = XRayEngine(get_self_instance()).describe()
        assert node.kind is Kind.PLAIN_OBJECT
        assert node.child("self").node.kind is Kind.CIRCULAR_REFERENCE

    def test_self_list(self):
        node = XRayEngine(get_self_list()).describe()
        assert node.kind is Kind.ARRAY
        assert node.child(1).node.kind is Kind.CIRCULAR_REFERENCE
        assert node.child(1).path == "$[1]"

    def test_class_instance_cycle(self):
        class Tree:
            pass

        tree = Tree()
        tree.parent = tree
        node = XRayEngine(tree).describe()
        assert node.kind is Kind.CLASS_INSTANCE
        assert node.child("parent").node.kind is Kind.CIRCULAR_REFERENCE

    @pytest.mark.parametrize("depth", [1, 2, 5, 50])
    def test_indirect_cycle_terminates(self, depth):
        node = XRayEngine(get_deep_cycle(depth)).describe()
        kinds = [n.kind for n in node.walk()]
        assert kinds.count(Kind.CIRCULAR_REFERENCE) == 1
        circular = [n for n in node.walk() if n.kind is Kind.CIRCULAR_REFERENCE][0]
        assert circular.path == "$" + ".next" * depth

    def test_cycle_through_nested_value(self):
        inner = {}
        outer = {"inner": inner}
        inner["outer"] = outer
        node = XRayEngine({"start": outer}).describe()
        circular = node.child("start").node.child("inner").node.child("outer").node
        assert circular.kind is Kind.CIRCULAR_REFERENCE
        assert circular.path == "$.start.inner.outer"

    def test_cycle_through_set_member(self):
        class Holder:
            def __hash__(self):
                return 1

        holder = Holder()
        members = {holder}
        holder.members = members
        node = XRayEngine(members).describe()
        assert node.kind is Kind.SET
        member = node.children[0].node
        assert member.kind is Kind.CLASS_INSTANCE
        assert member.child("members").node.kind is Kind.CIRCULAR_REFERENCE

    def test_shared_value_is_not_circular(self):
        node = XRayEngine(get_shared()).describe()
        left = node.child("left").node
        inner = node.child("right").node.child("inner").node
        assert left.kind is Kind.ARRAY
        assert inner.kind is Kind.ARRAY
        assert inner.path == "$.right.inner"

    def test_shared_value_twice_in_list(self):
        shared = {"a": 1}
        node = XRayEngine([shared, shared]).describe()
        assert [row.node.kind for row in node.children] == [
            Kind.PLAIN_OBJECT,
            Kind.PLAIN_OBJECT,
        ]


class TestCollapse:
    def test_collapsed_child_is_placeholder(self):
        engine = XRayEngine(get_nested(), collapse=["y"])
        node = engine.describe()
        row = node.child("y")
        assert row.collapsed
        assert row.node is None
        assert row.value == [1, 2]
        assert node.child("x").node.kind is Kind.NUMBER

    def test_toggle_expands(self):
        engine = XRayEngine(get_nested(), collapse=["y"])
        assert engine.toggle("$.y") is False
        row = engine.describe().child("y")
        assert not row.collapsed
        assert row.node.kind is Kind.ARRAY

    def test_collapse_true(self):
        engine = XRayEngine(get_nested(), collapse=True)
        node = engine.describe()
        assert all(row.node is None for row in node.children)

        engine.toggle("$.y")
        node = engine.describe()
        assert node.child("x").node is None
        y = node.child("y").node
        assert y.kind is Kind.ARRAY
        assert all(row.collapsed for row in y.children)

    def test_collapse_top(self):
        engine = XRayEngine({"a": {"b": {"c": 1}}, "d": [1]}, collapse="top")
        assert engine.is_collapsed("$.a")
        assert engine.is_collapsed("$.d")
        assert not engine.is_collapsed("$.a.b")

    def test_collapse_top_list_root(self):
        engine = XRayEngine([[1], [2]], collapse="top")
        assert engine.is_collapsed("$[0]")
        assert engine.is_collapsed("$[1]")

    def test_collapse_listed_int_keys(self):
        node = XRayEngine({1: [1], 2: [2]}, collapse=[1]).describe()
        assert [row.path for row in node.children] == ["$.1", "$.2"]
        assert [row.collapsed for row in node.children] == [True, False]

    def test_collapse_listed_list_indices_from_env(self):
        collapse = xray.config.parse_collapse("0,1")
        node = XRayEngine([[1], [2], [3]], collapse=collapse).describe()
        assert [row.collapsed for row in node.children] == [True, True, False]

    def test_collapse_except(self):
        engine = XRayEngine({"a": 1, "b": 2, "c": 3}, collapse_except=["b"])
        node = engine.describe()
        assert [row.collapsed for row in node.children] == [True, False, True]

    def test_invalid_option_means_no_collapsing(self, caplog):
        engine = XRayEngine(get_nested(), collapse="everything")
        assert "invalid option" in caplog.text
        assert not any(row.collapsed for row in engine.describe().children)

    def test_set_members_follow_their_set(self):
        engine = XRayEngine({"tags": {"a"}}, collapse=True)
        engine.toggle("$.tags")
        tags = engine.describe().child("tags").node
        assert tags.kind is Kind.SET
        assert tags.children[0].node.kind is Kind.STRING
        assert tags.children[0].path == "$.tags"

    def test_collapse_survives_reset(self):
        engine = XRayEngine(get_nested())
        engine.toggle("$.y")
        engine.reset()
        assert engine.is_collapsed("$.y")


class TestRobustness:
    def test_failing_property_does_not_abort_siblings(self):
        class Flaky:
            def __init__(self):
                self.ok = 1

            @property
            def broken(self):
                raise RuntimeError("no")

        node = XRayEngine(Flaky()).describe()
        assert node.child("ok").node.kind is Kind.NUMBER
        broken = node.child("broken").node
        assert broken.kind is Kind.ERROR
        assert broken.text == "RuntimeError: no"

    def test_failing_child_description_becomes_unknown(self, caplog):
        class Exploding(dict):
            def items(self):
                raise RuntimeError("cannot iterate")

        node = XRayEngine({"bad": Exploding(a=1), "good": 2}).describe()
        assert node.child("bad").node.kind is Kind.UNKNOWN
        assert node.child("bad").node.text == "unknown"
        assert node.child("good").node.kind is Kind.NUMBER
        assert "could not describe $.bad" in caplog.text


def test_describe_helper():
    node = xray.describe({"a": [1]}, collapse=["a"])
    assert node.child("a").node is None
