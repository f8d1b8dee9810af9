"""Tests for the command-line interface."""

import json

import pytest

from src.data.catalog import get_random_city_sample
from src.main import build_parser, main


def city_ids(output: str):
    """Ids from JSON-lines CLI output."""
    return [json.loads(line)["id"] for line in output.splitlines() if line.strip()]


class TestCli:
    """Tests for CLI commands."""

    def test_sample(self, capsys):
        """Test sample prints the deterministic sample."""
        assert main(["sample", "5"]) == 0
        expected = [city.id for city in get_random_city_sample(5)]
        assert city_ids(capsys.readouterr().out) == expected

    def test_sample_negative(self, capsys):
        """Test a negative size fails."""
        assert main(["sample", "-1"]) == 2
        assert "\"lat\"" not in capsys.readouterr().out

    def test_lookup(self, capsys):
        """Test lookup of a known and unknown id."""
        assert main(["lookup", "delhi"]) == 0
        assert city_ids(capsys.readouterr().out) == ["delhi"]

        assert main(["lookup", "atlantis"]) == 1

    def test_tracked(self, capsys):
        """Test tracked prints the default watch-list."""
        assert main(["tracked"]) == 0
        assert city_ids(capsys.readouterr().out)[:2] == ["delhi", "beijing"]

    def test_search_table(self, capsys):
        """Test table output."""
        assert main(["--format", "table", "search", "tokyo"]) == 0
        assert "Tokyo" in capsys.readouterr().out

    def test_validate(self):
        """Test validate succeeds on the bundled catalog."""
        assert main(["validate"]) == 0

    def test_command_required(self):
        """Test a command must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
