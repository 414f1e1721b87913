import enum
from dataclasses import dataclass, field
from typing import Any, List, Optional


class Kind(enum.Enum):
    """Closed set of node variants a value can classify as."""

    NULL = "Null"
    UNDEFINED = "Undefined"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    BIGINT = "BigInt"
    STRING = "String"
    SYMBOL = "Symbol"
    ARRAY = "Array"
    PLAIN_OBJECT = "PlainObject"
    CLASS_INSTANCE = "ClassInstance"
    FUNCTION = "Function"
    MAP = "Map"
    SET = "Set"
    DATE = "Date"
    REGEXP = "RegExp"
    ERROR = "Error"
    PROMISE = "Promise"
    WEAKMAP = "WeakMap"
    WEAKSET = "WeakSet"
    BINARY_BUFFER = "BinaryBuffer"
    CIRCULAR_REFERENCE = "CircularReference"
    UNKNOWN = "Unknown"

    @property
    def is_container(self) -> bool:
        return self in CONTAINER_KINDS


CONTAINER_KINDS = frozenset(
    [
        Kind.ARRAY,
        Kind.PLAIN_OBJECT,
        Kind.CLASS_INSTANCE,
        Kind.FUNCTION,
        Kind.MAP,
        Kind.SET,
    ]
)


class _Undefined:
    """Value of a member that could not be read."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


@dataclass
class Child:
    """One row of a container node."""

    key: Optional[str]
    """Display key; None for set members, which have no key."""

    value: Any
    path: str

    collapsed: bool = False
    """Collapse flag at the time the parent was classified."""

    node: Optional["Node"] = None
    """Described child, or None if it was collapsed and not descended into."""


@dataclass
class Node:
    """Classified description of one value at one path."""

    kind: Kind
    path: str
    text: str = ""
    label: str = ""
    empty: bool = False
    children: List[Child] = field(default_factory=list)

    def child(self, key) -> Child:
        """Look up a child row by its display key."""
        key = str(key)
        for row in self.children:
            if row.key == key:
                return row
        raise KeyError(key)

    def walk(self):
        """Yield this node and every expanded descendant, depth first."""
        yield self
        for row in self.children:
            if row.node is not None:
                yield from row.node.walk()
