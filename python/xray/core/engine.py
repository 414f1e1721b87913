import logging
from typing import Dict

from xray import config
from xray.core import path as xpath
from xray.core.circular import CircularChecker
from xray.core.collapse import CollapseStore
from xray.core.kinds import UNDEFINED, Node
from xray.inspect.classifier import classify, entries, kind_of

logger = logging.getLogger(__name__)


class XRayEngine:
    """Inspection state for one root value.

    Owns the identity record used to cut off circular references and the
    collapse state of every path. Neither is thread-safe; confine an engine
    to one thread.

    Args:
        obj: Root value to inspect.
        collapse: False, True, "top" or a list of root keys. None reads
            ``xray.collapse`` from ``xray.config``.
        collapse_except: False or a list of root keys to keep expanded.
            None reads ``xray.collapse_except`` from ``xray.config``.
    """

    def __init__(self, obj=UNDEFINED, collapse=None, collapse_except=None):
        self.obj = obj
        self.circular = CircularChecker()
        self.collapse = CollapseStore()

        defaults = config.engine_params()
        self.configure(
            collapse=defaults["collapse"] if collapse is None else collapse,
            collapse_except=(
                defaults["collapse_except"]
                if collapse_except is None
                else collapse_except
            ),
        )

    def root_paths(self) -> Dict[str, str]:
        """Paths of the root's direct children, keyed by display key."""
        kind = kind_of(self.obj)
        if not kind.is_container:
            return {}
        return {
            e.key: e.path
            for e in entries(kind, self.obj, xpath.ROOT)
            if e.key is not None
        }

    def configure(self, collapse=False, collapse_except=False):
        self.collapse.configure(
            collapse=collapse,
            collapse_except=collapse_except,
            root_paths=self.root_paths(),
        )

    def classify(self, value, path: str = xpath.ROOT) -> Node:
        return classify(value, path, self)

    def describe(self) -> Node:
        """Describe the root value from scratch."""
        self.reset()
        return self.classify(self.obj, xpath.ROOT)

    def is_collapsed(self, path: str) -> bool:
        return self.collapse.is_collapsed(path)

    def toggle(self, path: str) -> bool:
        collapsed = self.collapse.toggle(path)
        logger.debug("Toggled %s, collapsed=%s", path, collapsed)
        return collapsed

    def reset(self):
        """Forget seen identities; collapse state is kept."""
        self.circular.reset()


def describe(obj, collapse=None, collapse_except=None) -> Node:
    """Describe ``obj`` with a fresh engine."""
    return XRayEngine(obj, collapse=collapse, collapse_except=collapse_except).describe()
