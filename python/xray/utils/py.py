import logging
import sys
from typing import Any, Optional


def _get_torch():
    """Lazy import torch module.

    Centralized here so extensions can share the same helper.
    """
    try:
        import torch

        return torch
    except ImportError as exc:  # pragma: no cover - environment dependent
        raise ImportError(
            "PyTorch is not installed. Please install it with: pip install xray-inspect[torch]"
        ) from exc


def _loaded_module(name: str) -> Optional[Any]:
    """Return an already imported module, never importing it.

    >>> _loaded_module("sys") is sys
    True
    >>> _loaded_module("surely_not_a_module_name") is None
    True
    """
    return sys.modules.get(name)


def _type_name(obj) -> str:
    """Name of the object's class, tolerating odd metaclasses.

    >>> _type_name(1)
    'int'
    >>> class Obj:
    ...     pass
    >>> _type_name(Obj())
    'Obj'
    """
    name = getattr(type(obj), "__name__", None)
    return name if isinstance(name, str) else "anonymous"


def _safe_str(obj, default: str = "unknown") -> str:
    """Convert an object to text, substituting ``default`` on failure.

    Examples
    --------
    Regular objects go through ``str``:

    >>> _safe_str(42)
    '42'

    Objects whose ``__str__`` raises fall back to the placeholder:

    >>> class Broken:
    ...     def __str__(self):
    ...         raise RuntimeError("nope")
    ...     __repr__ = __str__
    >>> _safe_str(Broken())
    'unknown'

    Parameters
    ----------
    obj : Any
        Object to stringify.
    default : str, optional
        Placeholder returned when conversion raises.
    """
    try:
        return str(obj)
    except Exception as exc:
        logging.getLogger(__name__).debug(
            "str() failed for %s: %r", _type_name(obj), exc
        )
        return default
