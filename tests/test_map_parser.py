"""Tests for map validation and map loading."""

import tempfile
from pathlib import Path

import pytest

from pathwalker.core.exceptions import (
    InvalidCharacterError,
    MapParseError,
    MapValidationError,
    MultipleStartsError,
    NoEndError,
    NoStartError,
)
from pathwalker.core.grid import Position, to_grid
from pathwalker.core.map_parser import (
    ParsedMap,
    load_all_maps,
    load_map_file,
    parse_map_text,
    validate_map,
    validate_map_text,
)


BASIC_MAP = """  @---A---+
          |
  x-B-+   C
      |   |
      +---+"""


class TestValidateMap:
    """Tests for whole-map validation."""

    def test_valid_map(self):
        """Test that a valid map passes without error."""
        validate_map(to_grid(BASIC_MAP))

    def test_missing_start(self):
        grid = to_grid([
            "     -A---+",
            "          |",
            "  x-B-+   C",
            "      |   |",
            "      +---+",
        ])
        with pytest.raises(NoStartError, match=r"Start position \(@\) not found"):
            validate_map(grid)

    def test_multiple_starts(self):
        grid = to_grid([
            "   @--A-@-+",
            "          |",
            "  x-B-+   C",
            "      |   |",
            "      +---+",
        ])
        with pytest.raises(MultipleStartsError, match="Multiple start positions"):
            validate_map(grid)

    def test_missing_end(self):
        grid = to_grid([
            "   @--A---+",
            "          |",
            "    B-+   C",
            "      |   |",
            "      +---+",
        ])
        with pytest.raises(NoEndError, match=r"End position \(x\) not found"):
            validate_map(grid)

    def test_multiple_ends_are_allowed(self):
        validate_map(to_grid(["x-@-x"]))

    def test_invalid_character(self):
        """Test that the offending character and its position are reported."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            validate_map(to_grid(["@-a-x"]))

        assert exc_info.value.character == "a"
        assert exc_info.value.position == Position(2, 0)
        assert "Invalid character 'a'" in str(exc_info.value)

    def test_invalid_character_reported_before_missing_start(self):
        with pytest.raises(InvalidCharacterError):
            validate_map(to_grid(["--#--x"]))

    def test_errors_share_base_class(self):
        with pytest.raises(MapValidationError):
            validate_map(to_grid(["---"]))

    def test_connectivity_not_checked(self):
        """Test that a disconnected map still passes validation."""
        validate_map(to_grid(["@     x"]))


class TestParseMapText:
    """Tests for map text parsing."""

    def test_parse_basic_map(self):
        result = parse_map_text(BASIC_MAP, name="basic")

        assert isinstance(result, ParsedMap)
        assert result.name == "basic"
        assert result.width == 11
        assert result.height == 5
        assert result.start == Position(2, 0)
        assert result.ends == [Position(2, 2)]

    def test_parse_preserves_leading_spaces(self):
        result = parse_map_text("\n" + BASIC_MAP + "\n\n")
        assert result.rows == BASIC_MAP.split("\n")

    def test_parse_empty_map_raises_error(self):
        with pytest.raises(MapParseError, match="Map text is empty"):
            parse_map_text("")

    def test_parse_whitespace_only_raises_error(self):
        with pytest.raises(MapParseError, match="Map text is empty"):
            parse_map_text("   \n   \n   ")

    def test_parse_invalid_map_raises_error(self):
        with pytest.raises(NoStartError):
            parse_map_text("--x")

    def test_to_dict(self):
        d = parse_map_text("@-x", name="tiny").to_dict()

        assert d["name"] == "tiny"
        assert d["rows"] == ["@-x"]
        assert d["width"] == 3
        assert d["height"] == 1
        assert d["start"] == {"x": 0, "y": 0}
        assert d["ends"] == [{"x": 2, "y": 0}]


class TestLoadMapFile:
    """Tests for loading map files from filesystem."""

    def test_load_map_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "basic.txt"
            path.write_text(BASIC_MAP)

            result = load_map_file(path)

            assert result.name == "basic"
            assert result.start == Position(2, 0)

    def test_load_map_file_name_override(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "basic.txt"
            path.write_text(BASIC_MAP)

            assert load_map_file(str(path), name="Other").name == "Other"

    def test_load_map_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_map_file("/nonexistent/path/map.txt")

    def test_load_directory_raises_parse_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(MapParseError, match="not a file"):
                load_map_file(tmpdir)


class TestLoadAllMaps:
    """Tests for loading all maps from a directory."""

    def test_load_all_maps_skips_invalid(self):
        """Test that invalid map files are skipped."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "b_map.txt").write_text(BASIC_MAP)
            (Path(tmpdir) / "a_map.txt").write_text("@-x")
            (Path(tmpdir) / "broken.txt").write_text("no start here")
            (Path(tmpdir) / "notes.md").write_text(BASIC_MAP)

            result = load_all_maps(tmpdir)

            assert [m.name for m in result] == ["a_map", "b_map"]

    def test_load_all_maps_empty_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            assert load_all_maps(tmpdir) == []

    def test_load_all_maps_nonexistent_directory(self):
        with pytest.raises(FileNotFoundError):
            load_all_maps("/nonexistent/path")

    def test_bundled_maps_are_valid(self):
        """Test that every bundled map file loads."""
        maps_dir = Path(__file__).resolve().parent.parent / "pathwalker" / "maps"
        names = {m.name for m in load_all_maps(maps_dir)}
        assert names == {"basic", "compact_space", "goonies", "ignore_after_end"}


class TestValidateMapText:
    """Tests for the non-raising validation helper."""

    def test_validate_valid_map(self):
        is_valid, error = validate_map_text(BASIC_MAP)
        assert is_valid is True
        assert error is None

    def test_validate_invalid_map(self):
        is_valid, error = validate_map_text("@---")
        assert is_valid is False
        assert "End position" in error
