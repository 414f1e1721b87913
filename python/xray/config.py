"""Process-wide configuration for xray.

A flat key/value store. Engines read their default collapse options from
``xray.collapse`` and ``xray.collapse_except``; ``load_env`` fills those from
the ``XRAY_COLLAPSE`` and ``XRAY_COLLAPSE_EXCEPT`` environment variables.
"""

import builtins
import os

COLLAPSE_KEY = "xray.collapse"
COLLAPSE_EXCEPT_KEY = "xray.collapse_except"

ENV_VARS = {
    "XRAY_COLLAPSE": COLLAPSE_KEY,
    "XRAY_COLLAPSE_EXCEPT": COLLAPSE_EXCEPT_KEY,
}

_store = {}


def get(key, default=None):
    return _store.get(key, default)


def set(key, value):
    _store[key] = value


def get_str(key):
    value = _store.get(key)
    return None if value is None else str(value)


def contains_key(key):
    return key in _store


def remove(key):
    return _store.pop(key, None)


def keys():
    return sorted(_store)


def clear():
    _store.clear()


def len():
    return builtins.len(_store)


def is_empty():
    return not _store


def parse_collapse(value: str):
    """Parse a collapse option given as text.

    >>> parse_collapse("true"), parse_collapse("0"), parse_collapse("")
    (True, False, False)
    >>> parse_collapse("top")
    'top'
    >>> parse_collapse("config, data")
    ['config', 'data']
    """
    normalized = value.strip()
    if normalized.lower() in ("", "0", "false", "no", "off"):
        return False
    if normalized.lower() in ("1", "true", "yes", "on"):
        return True
    if normalized.lower() == "top":
        return "top"
    return [s.strip() for s in normalized.split(",") if s.strip()]


def load_env(environ=None):
    """Copy collapse options from environment variables into the store."""
    environ = os.environ if environ is None else environ
    for var, key in ENV_VARS.items():
        if var in environ:
            _store[key] = parse_collapse(environ[var])


def engine_params():
    return {
        "collapse": get(COLLAPSE_KEY, False),
        "collapse_except": get(COLLAPSE_EXCEPT_KEY, False),
    }
