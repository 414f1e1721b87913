"""Stable string addresses for nodes of an inspected value.

The root is ``$``; attribute and dict access append ``.key``, sequence access
appends ``[index]`` and mapping entries append ``.str(key)``. Set members are
not addressable and reuse the path of their set. Keys are not escaped, so a
key containing ``.`` or ``[`` reads the same as a nested path.
"""

ROOT = "$"

SEPARATORS = (".", "[")


def member(parent: str, key) -> str:
    """Path of an attribute or plain-object key.

    >>> member("$", "x")
    '$.x'
    """
    return f"{parent}.{key}"


def item(parent: str, index: int) -> str:
    """Path of a sequence element.

    >>> item("$.y", 0)
    '$.y[0]'
    """
    return f"{parent}[{index}]"


def entry(parent: str, key) -> str:
    """Path of a mapping entry, keyed by the key's display text.

    >>> entry("$", 42)
    '$.42'
    >>> entry("$", ("a", 1))
    "$.('a', 1)"
    """
    return f"{parent}.{key!s}"


def set_member(parent: str) -> str:
    return parent


def child(parent: str, key=None, *, index=None, entry_key=None) -> str:
    """Extend ``parent`` with exactly one accessor.

    >>> child("$", "x")
    '$.x'
    >>> child("$", index=3)
    '$[3]'
    >>> child("$", entry_key=1.5)
    '$.1.5'
    >>> child("$")
    Traceback (most recent call last):
    ...
    TypeError: child() takes exactly one accessor, got 0
    """
    given = [a for a in (key, index, entry_key) if a is not None]
    if len(given) != 1:
        raise TypeError(f"child() takes exactly one accessor, got {len(given)}")

    if key is not None:
        return member(parent, key)
    if index is not None:
        return item(parent, index)
    return entry(parent, entry_key)


def is_descendant(path: str, ancestor: str) -> bool:
    """True if ``path`` lies strictly inside ``ancestor``'s subtree.

    >>> is_descendant("$.a.b", "$.a")
    True
    >>> is_descendant("$.a[0]", "$.a")
    True
    >>> is_descendant("$.ab", "$.a")
    False
    >>> is_descendant("$.a", "$.a")
    False
    """
    if len(path) <= len(ancestor) or not path.startswith(ancestor):
        return False
    return path[len(ancestor)] in SEPARATORS
