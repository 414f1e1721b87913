import enum
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, List, Tuple

from xray.core import path as xpath
from xray.core.kinds import UNDEFINED

# Immutable scalars; the interpreter shares their instances freely, so their
# identity says nothing about the shape of the inspected structure.
PRIMITIVE_TYPES = (bool, int, float, complex, str, Decimal, Fraction)


def is_primitive(value) -> bool:
    """True for values that never take part in cycle detection.

    >>> is_primitive(1), is_primitive("a"), is_primitive(None)
    (True, True, True)
    >>> is_primitive([]), is_primitive(len)
    (False, False)
    """
    return (
        value is None
        or value is UNDEFINED
        or isinstance(value, PRIMITIVE_TYPES)
        or isinstance(value, enum.Enum)
    )


class CircularChecker:
    """Tracks the paths at which each object was seen during one pass.

    A value seen again at a path inside the subtree of one of its earlier
    paths is a circular reference. A value seen at an unrelated path is
    shared (the structure is a DAG), and a value seen again at the very same
    path is a re-inspection of an unchanged tree.
    """

    def __init__(self):
        # id -> (value, paths); holding the value keeps the id from being reused
        self.seen: Dict[int, Tuple[Any, List[str]]] = {}

    def check(self, obj, path: str) -> bool:
        if is_primitive(obj):
            return False

        record = self.seen.get(id(obj))
        if record is None:
            self.seen[id(obj)] = (obj, [path])
            return False

        paths = record[1]
        for seen in paths:
            if seen == path:
                return False
            if xpath.is_descendant(path, seen):
                return True

        paths.append(path)
        return False

    def paths(self, obj) -> List[str]:
        record = self.seen.get(id(obj))
        return list(record[1]) if record is not None else []

    def reset(self):
        self.seen.clear()

    def __len__(self):
        return len(self.seen)
