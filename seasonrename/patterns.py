"""Text patterns used to find season folders and episode numbers."""

import re
from typing import NamedTuple


# Substring match anywhere in the path, so "seasoning" matches too
SEASON_PATTERN = r"season"

# Names that already look like S01E02 (1-2 digits each) are left alone
CANONICAL_EPISODE_PATTERN = r"s\d\d?e\d\d?"

# First number, the next number after it, then whatever follows the second number.
# The separator may be empty, so a single run of digits splits: "Episode 105.mkv" is (10, 5).
# Nb. any two numbers qualify: "Show 24 - 1x03.mkv" is read as (24, 1) with remainder "x03.mkv".
EPISODE_NUMBERS_PATTERN = r"(\d+)\D*(\d+)(.*)"

# Numbers are read as unsigned 8-bit values
MAX_EPISODE_NUMBER = 255


class EpisodeNumbers(NamedTuple):
    """Season and episode numbers pulled out of a file name."""

    season: int
    episode: int
    remainder: str

    def target_name(self) -> str:
        """Render the canonical name, e.g. `S01E05.mkv`."""
        return f"S{self.season:02d}E{self.episode:02d}{self.remainder}"


class PatternLibrary:
    """Precompiled patterns, built once at startup and shared read-only."""

    __slots__ = ("_season", "_canonical", "_numbers")

    def __init__(self) -> None:
        self._season = re.compile(SEASON_PATTERN, re.IGNORECASE)
        self._canonical = re.compile(CANONICAL_EPISODE_PATTERN, re.IGNORECASE | re.ASCII)
        self._numbers = re.compile(EPISODE_NUMBERS_PATTERN, re.ASCII | re.DOTALL)

    def is_season_path(self, path: str) -> bool:
        """Check whether a path contains "season" in any letter case."""
        return self._season.search(path) is not None

    def is_canonical_episode_name(self, name: str) -> bool:
        """Check whether a name already contains an `SxxEyy` marker."""
        return self._canonical.search(name) is not None

    def extract_numbers(self, name: str) -> EpisodeNumbers | None:
        """Extract the first two numbers of a name and the text after the second.

        Args:
            name: File name (without directory components).

        Returns:
            EpisodeNumbers, or None when the name holds fewer than two numbers or
            either number does not fit in 0-255.
        """
        match = self._numbers.search(name)
        if match is None:
            return None

        season, episode = int(match.group(1)), int(match.group(2))
        if season > MAX_EPISODE_NUMBER or episode > MAX_EPISODE_NUMBER:
            return None

        return EpisodeNumbers(season=season, episode=episode, remainder=match.group(3))
