"""Error values raised while walking and renaming."""

from enum import Enum


class InvariantKind(str, Enum):
    """Conditions that should never happen on a sane filesystem."""

    UNDECODABLE_NAME = "undecodable-name"
    MISSING_FILE_NAME = "missing-file-name"
    MISSING_PARENT = "missing-parent"
    RENAME_REJECTED = "rename-rejected"


class InvariantViolation(Exception):
    """An unexpected condition that aborts the whole run.

    There is no way to tell an unusual filesystem apart from a bug here, so
    both surface the same way: a diagnostic naming what failed and where.
    """

    def __init__(self, kind: InvariantKind, location: str, detail: str = "") -> None:
        self.kind = kind
        self.location = location
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"unexpected condition '{self.kind.value}' in {self.location}"
        if self.detail:
            message += f": {self.detail}"
        return message + ". Please report this together with the location above."


class QuitRequested(Exception):
    """The operator asked to stop the program."""
