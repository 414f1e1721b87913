"""
Core Engine Module

Overview
--------
This package holds the state the inspection engine keeps between nodes.

Responsibilities:
1.  Build stable string paths for nodes (`path`).
2.  Detect circular references by value identity and path ancestry.
3.  Keep the per-path collapsed/expanded state.
4.  Define the node variants and descriptors handed to renderers.

Public Interfaces:
- `CircularChecker`: Identity record for one traversal pass.
- `CollapseStore`: Collapse flags with forward and reversed modes.
- `Kind`, `Node`, `Child`, `UNDEFINED`: Node descriptors.

The engine itself lives in `xray.core.engine`; it is not imported here
because it depends on `xray.inspect`, which depends on this package.
"""

from . import path
from .circular import CircularChecker
from .collapse import CollapseStore
from .kinds import UNDEFINED, Child, Kind, Node

__all__ = ["path", "CircularChecker", "CollapseStore", "Kind", "Node", "Child", "UNDEFINED"]
