"""Apply approved rename plans."""

from pathlib import Path

from seasonrename.errors import InvariantKind, InvariantViolation
from seasonrename.models.rename import RenamePlan


class RenameExecutor:
    """Rename files on disk, one at a time, in plan order."""

    def execute(self, plan: RenamePlan) -> int:
        """Apply every proposed rename of a plan.

        Candidates without a proposed path are skipped. Existing targets are not
        checked for. There is no rollback: renames done before a failure stay done.

        Args:
            plan: Approved rename plan.

        Returns:
            Number of entries renamed.

        Raises:
            InvariantViolation: If the operating system rejects a rename.
        """
        renamed = 0
        for candidate in plan.candidates:
            if candidate.proposed is None:
                continue

            try:
                Path(candidate.original).rename(candidate.proposed)
            except OSError as e:
                raise InvariantViolation(
                    InvariantKind.RENAME_REJECTED,
                    "RenameExecutor.execute",
                    f"{candidate.original} -> {candidate.proposed}: {e}",
                ) from e
            renamed += 1

        return renamed
