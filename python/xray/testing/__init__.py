"""Testing helpers for the xray package.

This module exposes small value factories used in unit tests: flat
containers, shared (DAG) structures, self-referencing structures and a small
class hierarchy.
"""

from __future__ import annotations

from types import SimpleNamespace

__all__ = [
    "Base",
    "Middle",
    "Derived",
    "get_dict",
    "get_list",
    "get_set",
    "get_tuple",
    "get_nested",
    "get_shared",
    "get_self_dict",
    "get_self_list",
    "get_self_instance",
    "get_deep_cycle",
]


class Base:
    def a(self):
        return "base"


class Middle(Base):
    def b(self):
        return "middle"


class Derived(Middle):
    def a(self):
        return "derived"

    def c(self):
        return "derived"


def get_dict() -> dict[str, object]:
    return {
        "int": 1,
        "float": 1.0,
        "str": "str",
    }


def get_list() -> list[object]:
    return [
        1,
        1.0,
        "str",
    ]


def get_tuple() -> tuple[object, object, object]:
    return (
        1,
        1.0,
        "str",
    )


def get_set() -> set[object]:
    return {
        1,
        "str",
        None,
    }


def get_nested() -> dict[str, object]:
    return {"x": 1, "y": [1, 2]}


def get_shared() -> dict[str, object]:
    """The same list reachable from two unrelated keys."""
    shared = [1, 2]
    return {"left": shared, "right": {"inner": shared}}


def get_self_dict() -> dict[str, object]:
    value: dict[str, object] = {"name": "loop"}
    value["self"] = value
    return value


def get_self_list() -> list[object]:
    value: list[object] = [1]
    value.append(value)
    return value


def get_self_instance() -> SimpleNamespace:
    value = SimpleNamespace(name="loop")
    value.self = value
    return value


def get_deep_cycle(depth: int = 5) -> dict[str, object]:
    """A chain of ``depth`` dicts whose last link points back to the first."""
    root: dict[str, object] = {}
    node = root
    for _ in range(depth - 1):
        node["next"] = {}
        node = node["next"]
    node["next"] = root
    return root
