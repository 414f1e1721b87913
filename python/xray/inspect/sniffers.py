"""Member discovery for functions and class instances."""

import inspect
import itertools
import logging
from typing import List

from xray.core.kinds import UNDEFINED

logger = logging.getLogger(__name__)

# Bookkeeping the interpreter attaches to every function or class body.
FUNCTION_NATIVE_PROPS = frozenset(
    [
        "__module__",
        "__qualname__",
        "__name__",
        "__doc__",
        "__dict__",
        "__weakref__",
        "__annotations__",
        "__annotate__",
        "__slots__",
        "__firstlineno__",
        "__static_attributes__",
        "__type_params__",
        "__orig_bases__",
        "__parameters__",
        "__abstractmethods__",
        "_abc_impl",
    ]
)


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _is_class_member(name) -> bool:
    return (
        isinstance(name, str)
        and name not in FUNCTION_NATIVE_PROPS
        and not _is_dunder(name)
    )


def _own_names(obj) -> List[str]:
    try:
        namespace = getattr(obj, "__dict__", None)
        return [name for name in namespace if isinstance(name, str)]
    except (AttributeError, TypeError):
        return []


def _is_host_class(klass) -> bool:
    return klass is object or getattr(klass, "__module__", None) == "builtins"


def function_sniffer(obj) -> List[str]:
    """Detect attributes attached to a function or defined on a class.

    >>> def handler():
    ...     pass
    >>> handler.retries = 3
    >>> function_sniffer(handler)
    ['retries']
    >>> function_sniffer(len)
    []
    """
    names = _own_names(obj)
    if inspect.isclass(obj):
        return [name for name in names if _is_class_member(name)]
    return [name for name in names if name not in FUNCTION_NATIVE_PROPS]


def instance_sniffer(obj) -> List[str]:
    """Return all attributes and methods of the object, except the base ones.

    Instance attributes come first, then class members in the order the class
    hierarchy declares them: base classes before subclasses, and a member
    redefined by a subclass keeps the position of its first definition.

    >>> class Base:
    ...     def a(self): pass
    >>> class Derived(Base):
    ...     def c(self): pass
    ...     def a(self): pass
    >>> obj = Derived()
    >>> obj.x = 1
    >>> instance_sniffer(obj)
    ['x', 'a', 'c']
    """
    # attributes set on the instance itself
    properties = _own_names(obj)

    # class members, one list per level from the most derived class upwards
    method_set = []
    for klass in type(obj).__mro__:
        if _is_host_class(klass):
            break
        method_set.append(
            [name for name in vars(klass) if _is_class_member(name)]
        )

    # reverse so members are listed in class extension order, then drop dupes
    methods = dict.fromkeys(itertools.chain.from_iterable(reversed(method_set)))

    seen = frozenset(properties)
    return properties + [name for name in methods if name not in seen]


def member_value(obj, name: str):
    """Read one member for display.

    A missing attribute reads as ``UNDEFINED``; any other failure is returned
    as the exception object, so one broken property does not hide the rest.

    >>> class Slotted:
    ...     __slots__ = ("value",)
    >>> member_value(Slotted(), "value")
    UNDEFINED
    >>> class Broken:
    ...     @property
    ...     def value(self):
    ...         raise ValueError("boom")
    >>> member_value(Broken(), "value")
    ValueError('boom')
    """
    try:
        return getattr(obj, name)
    except AttributeError:
        return UNDEFINED
    except Exception as exc:
        logger.debug("Reading %r from %s failed: %r", name, type(obj).__name__, exc)
        return exc
