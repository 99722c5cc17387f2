"""Rename candidate and plan data models."""

import os

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RenameCandidate(BaseModel):
    """A single entry considered for renaming."""

    model_config = ConfigDict(frozen=True)

    original: str = Field(description="Current path of the entry")
    proposed: str | None = Field(
        default=None,
        description="Target path in the same directory, or None if the name could not be parsed",
    )

    @model_validator(mode="after")
    def check_same_directory(self) -> "RenameCandidate":
        if self.proposed is not None and os.path.dirname(self.proposed) != os.path.dirname(self.original):
            raise ValueError(f"Proposed path '{self.proposed}' is not in the directory of '{self.original}'")
        return self

    @property
    def is_renameable(self) -> bool:
        return self.proposed is not None

    def __str__(self) -> str:
        return f"RenameCandidate('{self.original}' -> '{self.proposed}')"


class RenamePlan(BaseModel):
    """All rename candidates found in one season directory."""

    season_directory: str = Field(description="Season directory the candidates live in")
    candidates: list[RenameCandidate] = Field(
        description="Candidates, failed ones included",
        default_factory=list,
    )

    @property
    def failed(self) -> list[RenameCandidate]:
        """Candidates whose names yielded no season/episode numbers."""
        return [candidate for candidate in self.candidates if not candidate.is_renameable]

    @property
    def renames(self) -> list[RenameCandidate]:
        """Candidates with a proposed target path."""
        return [candidate for candidate in self.candidates if candidate.is_renameable]

    def sorted(self) -> "RenamePlan":
        """Return a copy ordered by original path.

        Plain string comparison, so the order does not depend on the filesystem
        listing order or on locale collation.
        """
        return self.model_copy(update={"candidates": sorted(self.candidates, key=lambda c: c.original)})

    def __len__(self) -> int:
        return len(self.candidates)

    def __bool__(self) -> bool:
        return bool(self.candidates)
