"""Unit tests for the pattern library."""

import pytest

from seasonrename.patterns import EpisodeNumbers, PatternLibrary


@pytest.fixture(scope="module")
def patterns() -> PatternLibrary:
    return PatternLibrary()


class TestSeasonPath:
    """Tests for season directory detection."""

    @pytest.mark.parametrize(
        "path",
        [
            "/media/Show/Season 1",
            "/media/Show/SEASON",
            "/media/Show/my_season_folder",
            "/media/Show/Season 2/Extras",
            # Substring match, not a word match
            "/media/Cooking/seasoning",
        ],
    )
    def test_matches(self, patterns, path):
        assert patterns.is_season_path(path)

    @pytest.mark.parametrize("path", ["/media/Show/Specials", "/media/Show/S1", "/media/Show/sea son"])
    def test_does_not_match(self, patterns, path):
        assert not patterns.is_season_path(path)


class TestCanonicalEpisodeName:
    """Tests for detection of names that are already SxxEyy."""

    @pytest.mark.parametrize(
        "name",
        ["S01E01.mkv", "s1e2.mkv", "S02E10.mkv", "Show.S02E10.720p.mkv", "show s1E05 final.avi"],
    )
    def test_matches(self, patterns, name):
        assert patterns.is_canonical_episode_name(name)

    @pytest.mark.parametrize("name", ["1x05.mkv", "Season 1 Episode 2.mkv", "S123E4.mkv", "SE01.mkv"])
    def test_does_not_match(self, patterns, name):
        assert not patterns.is_canonical_episode_name(name)


class TestExtractNumbers:
    """Tests for season/episode number extraction."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("1x05.mkv", EpisodeNumbers(1, 5, ".mkv")),
            ("Show Name - 1x05.mkv", EpisodeNumbers(1, 5, ".mkv")),
            ("007 x 010.mp4", EpisodeNumbers(7, 10, ".mp4")),
            ("2 - 04 - Pilot.avi", EpisodeNumbers(2, 4, " - Pilot.avi")),
            ("Show 2x04 720p.mkv", EpisodeNumbers(2, 4, " 720p.mkv")),
            ("Episode 3 of 12", EpisodeNumbers(3, 12, "")),
            ("255x0.mkv", EpisodeNumbers(255, 0, ".mkv")),
        ],
    )
    def test_extracts_first_two_numbers(self, patterns, name, expected):
        assert patterns.extract_numbers(name) == expected

    @pytest.mark.parametrize("name", ["trailer.mkv", "Episode 5.mkv", "E7.mkv", ""])
    def test_fewer_than_two_numbers(self, patterns, name):
        assert patterns.extract_numbers(name) is None

    @pytest.mark.parametrize("name", ["256x01.mkv", "1x300.mkv", "Show 1080p 2.mkv"])
    def test_out_of_range_numbers(self, patterns, name):
        assert patterns.extract_numbers(name) is None

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Episode 105.mkv", EpisodeNumbers(10, 5, ".mkv")),
            ("Show 12.mkv", EpisodeNumbers(1, 2, ".mkv")),
            ("E12.mkv", EpisodeNumbers(1, 2, ".mkv")),
        ],
    )
    def test_splits_a_single_run_of_digits(self, patterns, name, expected):
        """Test that adjacent digits are shared out when no second number follows."""
        assert patterns.extract_numbers(name) == expected

    def test_ignores_non_ascii_digits(self, patterns):
        assert patterns.extract_numbers("١x٢.mkv") is None

    def test_misreads_unrelated_numbers(self, patterns):
        """Any two numbers are taken, whatever they mean."""
        assert patterns.extract_numbers("Show 24 - 1x03.mkv") == EpisodeNumbers(24, 1, "x03.mkv")


class TestEpisodeNumbers:
    """Tests for canonical name rendering."""

    @pytest.mark.parametrize(
        "numbers,expected",
        [
            (EpisodeNumbers(1, 5, ".mkv"), "S01E05.mkv"),
            (EpisodeNumbers(0, 0, ".srt"), "S00E00.srt"),
            (EpisodeNumbers(12, 34, ""), "S12E34"),
            (EpisodeNumbers(100, 7, ".en.srt"), "S100E07.en.srt"),
        ],
    )
    def test_target_name(self, numbers, expected):
        assert numbers.target_name() == expected
