"""Plain-text rendering of node trees.

A minimal presentation layer: one line per node, children indented below
their parent, collapsed children shown as ``key: …``.
"""

import sys
from typing import List

from xray.core.engine import XRayEngine
from xray.core.kinds import Kind, Node

COLLAPSED_MARK = "…"


def summary(node: Node) -> str:
    """One-line text for a node, without its children.

    >>> summary(Node(Kind.STRING, "$", text="hi"))
    "'hi'"
    >>> summary(Node(Kind.ARRAY, "$", empty=True))
    '[]'
    >>> summary(Node(Kind.MAP, "$", label="Map", empty=True))
    'Map {}'
    """
    kind = node.kind
    if kind is Kind.STRING:
        return repr(node.text)
    if kind in (Kind.NULL, Kind.UNDEFINED, Kind.NUMBER, Kind.BOOLEAN):
        return node.text
    if kind is Kind.CIRCULAR_REFERENCE:
        return kind.value

    if kind.is_container:
        empty = ""
        if node.empty and kind is not Kind.FUNCTION:
            empty = "[]" if kind in (Kind.ARRAY, Kind.SET) else "{}"
        return " ".join(part for part in (node.label, empty) if part)

    return " ".join(part for part in (node.label, node.text) if part)


def _render_children(node: Node, depth: int, indent: str, lines: List[str]):
    pad = indent * depth
    for row in node.children:
        key = "-" if row.key is None else f"{row.key}:"
        if row.node is None:
            lines.append(f"{pad}{key} {COLLAPSED_MARK}")
            continue
        lines.append(f"{pad}{key} {summary(row.node)}".rstrip())
        _render_children(row.node, depth + 1, indent, lines)


def render(node: Node, title="XRay", header=True, minimize=False, indent="  ") -> str:
    """Render a node tree as indented text.

    Args:
        node: Root node, usually from ``XRayEngine.describe``.
        title: Header text.
        header: Whether to print the header line.
        minimize: Show only the header, hiding the tree.
        indent: Indentation per nesting level.
    """
    lines = []
    if header:
        lines.append(f"[{title}]" + (" +" if minimize else ""))
    if not minimize:
        lines.append(summary(node))
        _render_children(node, 0, indent, lines)
    return "\n".join(line for line in lines if line)


def show(
    obj,
    title="XRay",
    header=True,
    minimize=False,
    collapse=None,
    collapse_except=None,
    file=None,
) -> XRayEngine:
    """Print a tree view of ``obj`` and return the engine that produced it.

    The returned engine keeps the collapse state, so callers can ``toggle``
    paths and render ``engine.describe()`` again.
    """
    engine = XRayEngine(obj, collapse=collapse, collapse_except=collapse_except)
    text = render(engine.describe(), title=title, header=header, minimize=minimize)
    print(text, file=file or sys.stdout)
    return engine
