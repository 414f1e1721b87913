"""
XRay - Runtime Object Inspector

Overview
--------
This is the top-level package for xray. It turns any in-memory value into a
navigable, addressable, cycle-safe tree of nodes.

Responsibilities:
1.  Export the inspection engine (`XRayEngine`) and its one-shot helper `describe`.
2.  Export node descriptors (`Kind`, `Node`, `Child`) and the `UNDEFINED` sentinel.
3.  Export the text renderer (`render`, `show`).
4.  Initialize configuration from environment settings.

Public Interfaces:
- Engine: `XRayEngine`, `describe`, `classify`
- Nodes: `Kind`, `Node`, `Child`, `UNDEFINED`, `ROOT`
- Rendering: `render`, `show`
"""

import xray.config as config
from xray.core.engine import XRayEngine, describe
from xray.core.kinds import UNDEFINED, Child, Kind, Node
from xray.core.path import ROOT
from xray.inspect.classifier import classify
from xray.render import render, show

VERSION = "0.1.0"

config.load_env()

__all__ = [
    "VERSION",
    "config",
    "XRayEngine",
    "describe",
    "classify",
    "Kind",
    "Node",
    "Child",
    "UNDEFINED",
    "ROOT",
    "render",
    "show",
]
