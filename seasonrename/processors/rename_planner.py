"""Build rename plans for season directories."""

import os

from rich.console import Console
from rich.markup import escape

from seasonrename.errors import InvariantKind, InvariantViolation
from seasonrename.models.rename import RenameCandidate, RenamePlan
from seasonrename.patterns import PatternLibrary
from seasonrename.processors.listing import scan_directory


console = Console()


class RenamePlanner:
    """Classify the entries of a season directory and derive their canonical names."""

    def __init__(self, patterns: PatternLibrary) -> None:
        self.patterns = patterns

    def plan(self, season_directory: str) -> RenamePlan:
        """Build the rename plan for one season directory.

        Only direct entries are considered, directories included. Entries already
        carrying an `SxxEyy` marker are left out of the plan entirely.

        Args:
            season_directory: Path of the season directory.

        Returns:
            RenamePlan sorted by original path. Empty if there is nothing to rename,
            the path is not a directory, or it cannot be listed.

        Raises:
            InvariantViolation: If an entry name cannot be handled as text or has no
                                parent directory.
        """
        plan = RenamePlan(season_directory=season_directory)
        if not os.path.isdir(season_directory):
            return plan

        try:
            entries, error = scan_directory(season_directory)
        except OSError as e:
            console.print(
                f"[yellow]Warning:[/yellow] could not list {escape(season_directory)}: {escape(str(e))}",
                soft_wrap=True,
            )
            return plan

        if error is not None:
            console.print(
                f"[yellow]Warning:[/yellow] listing of {escape(season_directory)} stopped early: {escape(str(error))}",
                soft_wrap=True,
            )

        for entry in entries:
            try:
                entry.stat(follow_symlinks=False)
            except OSError as e:
                console.print(
                    f"[yellow]Warning:[/yellow] skipping unreadable entry {escape(entry.path)}: {escape(str(e))}",
                    soft_wrap=True,
                )
                continue

            candidate = self._classify(entry.path)
            if candidate is not None:
                plan.candidates.append(candidate)

        return plan.sorted()

    def _classify(self, path: str) -> RenameCandidate | None:
        """Derive the candidate for a single entry.

        Returns:
            None if the name is already canonical, otherwise a candidate whose
            `proposed` path is None when no numbers could be extracted.
        """
        name = self._file_name(path)
        parent = os.path.dirname(path)
        if not parent:
            raise InvariantViolation(InvariantKind.MISSING_PARENT, "RenamePlanner._classify", path)

        if self.patterns.is_canonical_episode_name(name):
            return None

        numbers = self.patterns.extract_numbers(name)
        if numbers is None:
            return RenameCandidate(original=path)

        return RenameCandidate(original=path, proposed=os.path.join(parent, numbers.target_name()))

    def _file_name(self, path: str) -> str:
        name = os.path.basename(path)
        if not name:
            raise InvariantViolation(InvariantKind.MISSING_FILE_NAME, "RenamePlanner._file_name", path)

        # Bytes that are not valid in the filesystem encoding come back as lone surrogates
        try:
            name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvariantViolation(
                InvariantKind.UNDECODABLE_NAME, "RenamePlanner._file_name", repr(path)
            ) from e

        return name
