"""Per-path expanded/collapsed state."""

import logging
from typing import AbstractSet, Mapping, Set

from xray.core import path as xpath

logger = logging.getLogger(__name__)


def _key_path(key) -> str:
    if isinstance(key, int) and not isinstance(key, bool):
        return xpath.item(xpath.ROOT, key)
    return xpath.member(xpath.ROOT, key)


def _given(option) -> bool:
    """Whether an option asks for anything; falsy values mean "off".

    >>> _given(None), _given(""), _given(0), _given("all")
    (False, False, False, True)
    """
    try:
        return bool(option)
    except Exception:
        # array-likes have no truth value
        return True


class CollapseStore:
    """Remembers which paths were toggled away from the default.

    In forward mode every path starts expanded and flagged paths are
    collapsed. In reversed mode (``collapse=True``) every path starts
    collapsed and flagged paths are expanded.
    """

    def __init__(self):
        self._flagged: Set[str] = set()
        self._reversed = False

    @property
    def reversed(self) -> bool:
        return self._reversed

    @property
    def flagged(self) -> AbstractSet[str]:
        return frozenset(self._flagged)

    def configure(self, collapse=False, collapse_except=False, root_paths=None):
        """Set the initial state from user options.

        Args:
            collapse: False/None for no collapsing, True to collapse
                everything, "top" to collapse the direct children of the root,
                or a list of root keys to collapse.
            collapse_except: False/None, or a list of root keys to keep
                expanded while every other direct child of the root is
                collapsed.
            root_paths: Mapping of the root's direct child keys to their
                paths, as the classifier would build them.
        """
        root_paths: Mapping[str, str] = root_paths or {}
        self._flagged.clear()
        self._reversed = False

        if collapse is True:
            self._reversed = True
        elif isinstance(collapse, str) and collapse == "top":
            self._flagged.update(root_paths.values())
        elif isinstance(collapse, (list, tuple)):
            # keys match root children by display key, so "0" names $[0]
            self._flagged.update(
                root_paths.get(str(key)) or _key_path(key) for key in collapse
            )
        elif _given(collapse):
            logger.error(
                'XRay invalid option collapse=%r: must be a list, "top" or True',
                collapse,
            )

        if isinstance(collapse_except, (list, tuple)):
            keep = {str(key) for key in collapse_except}
            self._flagged.update(
                p for key, p in root_paths.items() if str(key) not in keep
            )
        elif _given(collapse_except):
            logger.error(
                "XRay invalid option collapse_except=%r: must be a list",
                collapse_except,
            )

    def is_collapsed(self, path: str) -> bool:
        flagged = path in self._flagged
        return not flagged if self._reversed else flagged

    def toggle(self, path: str) -> bool:
        if path in self._flagged:
            self._flagged.discard(path)
        else:
            self._flagged.add(path)
        return self.is_collapsed(path)
