"""Depth-first search for season directories."""

import os
from collections.abc import Callable

from seasonrename.patterns import PatternLibrary
from seasonrename.processors.listing import scan_directory


class TreeWalker:
    """Walk a directory tree in sorted order and report each season directory found.

    Season directories are terminal: the walker hands them to the callback and
    never descends into them.
    """

    def __init__(self, patterns: PatternLibrary, on_season_directory: Callable[[str], None]) -> None:
        """Initialize the walker.

        Args:
            patterns: Shared pattern library.
            on_season_directory: Called with the path of every season directory, in
                                 traversal order.
        """
        self.patterns = patterns
        self.on_season_directory = on_season_directory

    def walk(self, path: str) -> None:
        """Visit `path` and everything below it.

        Unreadable directories are skipped silently together with their subtree.
        """
        if self.patterns.is_season_path(path):
            self.on_season_directory(path)
            return

        if not os.path.isdir(path):
            return

        entries = self._list_directory(path)
        if entries is None:
            return

        for entry in entries:
            self.walk(entry)

    def _list_directory(self, path: str) -> list[str] | None:
        """List the direct entries of a directory as full paths, sorted.

        Returns:
            Sorted entry paths, or None if the directory cannot be listed. Entries
            that fail to be read are dropped.
        """
        try:
            entries, _ = scan_directory(path)
        except OSError:
            return None

        return sorted(entry.path for entry in entries)
