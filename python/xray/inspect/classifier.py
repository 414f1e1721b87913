"""Value classification.

Decides which ``Kind`` a value is, builds its display payload and, for
containers, enumerates its children, extending the path and honouring the
engine's collapse state before descending.
"""

import array
import concurrent.futures
import datetime
import enum
import functools
import inspect
import logging
import re
import types
import weakref
from collections import namedtuple
from collections.abc import Mapping, Set as AbstractSet
from decimal import Decimal
from fractions import Fraction
from typing import Callable, Dict, Iterator, List, Optional

from xray.core import path as xpath
from xray.core.circular import is_primitive
from xray.core.kinds import UNDEFINED, Child, Kind, Node
from xray.inspect.sniffers import function_sniffer, instance_sniffer, member_value
from xray.utils.py import _loaded_module, _safe_str, _type_name

logger = logging.getLogger(__name__)

UNKNOWN_TEXT = "unknown"

PLAIN_OBJECT_TYPES = (dict, types.SimpleNamespace, object)

Entry = namedtuple("Entry", ["key", "path", "get", "collapsible"])

_buffer_types: Dict[type, Callable[[object], str]] = {}


def register_buffer_type(cls: type, name: Optional[Callable[[object], str]] = None):
    """Treat instances of ``cls`` as binary buffers.

    Args:
        cls: Buffer class, e.g. a tensor type.
        name: Callable returning the display type name of a value; defaults
            to the class name.
    """
    _buffer_types[cls] = name or _type_name


def unregister_buffer_type(cls: type):
    _buffer_types.pop(cls, None)


def buffer_name(value) -> Optional[str]:
    """Concrete type name of a binary buffer, or None for anything else.

    >>> buffer_name(b"abc")
    'bytes'
    >>> buffer_name(array.array("d", [1.0]))
    "array('d')"
    >>> buffer_name([1, 2]) is None
    True
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _type_name(value)
    if isinstance(value, array.array):
        return f"array('{value.typecode}')"

    np = _loaded_module("numpy")
    if np is not None and isinstance(value, np.ndarray):
        return f"ndarray[{value.dtype}]"

    for cls, namer in _buffer_types.items():
        if isinstance(value, cls):
            try:
                return namer(value)
            except Exception as exc:
                logger.debug("Buffer name of %s failed: %r", _type_name(value), exc)
                return _type_name(value)
    return None


def _has_members(value) -> bool:
    try:
        if isinstance(getattr(value, "__dict__", None), Mapping):
            return True
    except Exception:
        return False
    return any("__slots__" in vars(klass) for klass in type(value).__mro__[:-1])


def kind_of(value) -> Kind:
    """Classify a value by its type alone.

    >>> kind_of(None), kind_of(True), kind_of(1.5)
    (<Kind.NULL: 'Null'>, <Kind.BOOLEAN: 'Boolean'>, <Kind.NUMBER: 'Number'>)
    >>> kind_of({"a": 1}), kind_of([1]), kind_of({1})
    (<Kind.PLAIN_OBJECT: 'PlainObject'>, <Kind.ARRAY: 'Array'>, <Kind.SET: 'Set'>)
    >>> kind_of(len), kind_of(ValueError("x"))
    (<Kind.FUNCTION: 'Function'>, <Kind.ERROR: 'Error'>)
    """
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, enum.Enum):
        return Kind.SYMBOL
    if isinstance(value, (int, float, complex)):
        return Kind.NUMBER
    if isinstance(value, (Decimal, Fraction)):
        return Kind.BIGINT
    if isinstance(value, str):
        return Kind.STRING

    if buffer_name(value) is not None:
        return Kind.BINARY_BUFFER
    if isinstance(value, (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)):
        return Kind.WEAKMAP
    if isinstance(value, weakref.WeakSet):
        return Kind.WEAKSET
    if type(value) in PLAIN_OBJECT_TYPES:
        return Kind.PLAIN_OBJECT
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, AbstractSet):
        return Kind.SET
    if isinstance(value, (datetime.date, datetime.time)):
        return Kind.DATE
    if isinstance(value, re.Pattern):
        return Kind.REGEXP
    if isinstance(value, BaseException):
        return Kind.ERROR
    if isinstance(value, concurrent.futures.Future) or inspect.isawaitable(value):
        return Kind.PROMISE
    if (
        inspect.isroutine(value)
        or inspect.isclass(value)
        or isinstance(value, functools.partial)
    ):
        return Kind.FUNCTION
    if _has_members(value):
        return Kind.CLASS_INSTANCE
    return Kind.UNKNOWN


def function_type(fn) -> str:
    """Flavour of a callable, as shown in its label.

    >>> function_type(len), function_type(kind_of), function_type(Node)
    ('BuiltinFunction', 'Function', 'Class')
    """
    if inspect.isclass(fn):
        return "Class"
    if inspect.isasyncgenfunction(fn):
        return "AsyncGeneratorFunction"
    if inspect.iscoroutinefunction(fn):
        return "AsyncFunction"
    if inspect.isgeneratorfunction(fn):
        return "GeneratorFunction"
    if inspect.ismethod(fn):
        return "Method"
    if inspect.isbuiltin(fn):
        return "BuiltinFunction"
    return "Function"


def function_name(fn) -> str:
    if isinstance(fn, functools.partial):
        return f"partial({function_name(fn.func)})"
    name = getattr(fn, "__name__", None)
    if not isinstance(name, str) or not name or name == "<lambda>":
        return "[Anonymous]"
    return name


def error_text(exc: BaseException) -> str:
    """
    >>> error_text(ValueError("bad value"))
    'ValueError: bad value'
    >>> error_text(KeyError())
    'KeyError'
    """
    message = _safe_str(exc, "")
    name = _type_name(exc)
    return f"{name}: {message}" if message else name


def _const(value):
    return lambda: value


def entries(kind: Kind, value, path: str) -> Iterator[Entry]:
    """Yield the children of a container as (key, path, getter, collapsible).

    Values are read lazily through ``getter`` so that listing keys does not
    evaluate properties.
    """
    if kind is Kind.ARRAY:
        for index, elem in enumerate(value):
            yield Entry(str(index), xpath.item(path, index), _const(elem), True)
    elif kind is Kind.PLAIN_OBJECT:
        if isinstance(value, dict):
            items = value.items()
        elif type(value) is object:
            items = ()
        else:
            items = vars(value).items()
        for key, elem in items:
            yield Entry(str(key), xpath.member(path, key), _const(elem), True)
    elif kind is Kind.MAP:
        for key, elem in value.items():
            yield Entry(str(key), xpath.entry(path, key), _const(elem), True)
    elif kind is Kind.SET:
        # members are unordered and share the set's own path
        for elem in value:
            yield Entry(None, xpath.set_member(path), _const(elem), False)
    elif kind in (Kind.CLASS_INSTANCE, Kind.FUNCTION):
        sniffer = instance_sniffer if kind is Kind.CLASS_INSTANCE else function_sniffer
        for name in sniffer(value):
            yield Entry(
                name,
                xpath.member(path, name),
                functools.partial(member_value, value, name),
                True,
            )


def _container_label(kind: Kind, value) -> str:
    if kind is Kind.MAP:
        return "Map"
    if kind is Kind.SET:
        return "Set"
    if kind is Kind.CLASS_INSTANCE:
        name = getattr(type(value), "__name__", None) or "anonymous"
        return f"{name} instance"
    if kind is Kind.FUNCTION:
        return f"{function_type(value)} {function_name(value)}"
    return ""


def _leaf(kind: Kind, value, path: str) -> Node:
    if kind is Kind.STRING:
        return Node(kind, path, text=value, empty=not value)
    if kind is Kind.NULL:
        return Node(kind, path, text="None")
    if kind is Kind.UNDEFINED:
        return Node(kind, path, text="undefined")
    if kind in (Kind.NUMBER, Kind.BOOLEAN):
        return Node(kind, path, text=_safe_str(value))
    if kind is Kind.BIGINT:
        return Node(kind, path, text=_safe_str(value), label="BigInt")
    if kind is Kind.SYMBOL:
        return Node(kind, path, text=f"{_type_name(value)}.{value.name}", label="Symbol")
    if kind is Kind.DATE:
        return Node(kind, path, text=_safe_str(value), label="Date")
    if kind is Kind.REGEXP:
        return Node(kind, path, text=repr(value), label="RegExp")
    if kind is Kind.ERROR:
        return Node(kind, path, text=error_text(value), label="Error")
    if kind in (Kind.PROMISE, Kind.WEAKMAP, Kind.WEAKSET):
        return Node(kind, path, label=kind.value)
    if kind is Kind.BINARY_BUFFER:
        return Node(kind, path, label=buffer_name(value))
    return Node(Kind.UNKNOWN, path, text=_safe_str(value, UNKNOWN_TEXT), label="?")


def _describe_child(value, path: str, engine) -> Node:
    try:
        return classify(value, path, engine)
    except Exception as exc:
        logger.warning("XRay could not describe %s: %r", path, exc)
        return Node(Kind.UNKNOWN, path, text=UNKNOWN_TEXT, label="?")


def classify(value, path: str, engine) -> Node:
    """Describe ``value`` found at ``path``.

    ``engine`` supplies the cycle detector (``engine.circular``) and the
    collapse state (``engine.is_collapsed``). Collapsed children are listed
    with ``node=None`` and are not descended into.
    """
    if not is_primitive(value) and engine.circular.check(value, path):
        return Node(Kind.CIRCULAR_REFERENCE, path, label=Kind.CIRCULAR_REFERENCE.value)

    kind = kind_of(value)
    if not kind.is_container:
        return _leaf(kind, value, path)

    children: List[Child] = []
    for key, child_path, get, collapsible in entries(kind, value, path):
        collapsed = collapsible and engine.is_collapsed(child_path)
        child_value = get()
        node = None if collapsed else _describe_child(child_value, child_path, engine)
        children.append(Child(key, child_value, child_path, collapsed, node))

    return Node(
        kind,
        path,
        label=_container_label(kind, value),
        empty=not children,
        children=children,
    )
