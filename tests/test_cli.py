"""Tests for the command-line interface."""
import io
import json
import sys

import pytest

from eatout import cli
from eatout.models import Day, Time

CATALOG = [
    {"name": "Alpha Grill", "hours": {"wednesday": {"start": "11:00", "end": "22:00"}}},
    {"name": "Bistro", "hours": {"wednesday": {"start": "17:00", "end": "23:00"}}},
]


@pytest.fixture
def catalog_path(tmp_path):
    path = tmp_path / "food.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


def run(monkeypatch, *args, stdin=""):
    monkeypatch.setattr(sys, "argv", ["eatout", *args])
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    return cli.main()


class TestClock:
    """Test pinning the clock from flags."""

    def test_pinned_day_and_time(self):
        moment = cli.make_clock(Day.FRIDAY, Time(21, 15))()
        assert Day.from_date(moment) is Day.FRIDAY
        assert Time.now(moment) == Time(21, 15)

    def test_unpinned_reads_now(self):
        moment = cli.make_clock(None, None)()
        assert moment.year >= 2024


class TestMain:
    """Test running the CLI end to end."""

    def test_list(self, monkeypatch, capsys, catalog_path):
        code = run(monkeypatch, str(catalog_path), "--list", "--day", "wed", "--time", "12:00")
        out = capsys.readouterr().out
        assert code == 0
        assert "Loaded 2 restaurants" in out
        assert "1 of 2 open now" in out

    def test_interactive_runs_out(self, monkeypatch, capsys, catalog_path):
        code = run(
            monkeypatch,
            str(catalog_path),
            "--day", "wednesday", "--time", "12:00", "--seed", "3",
            stdin="\nq\n",
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "Alpha Grill" in out
        assert "There aren't any places left to eat. Try again?" in out

    def test_interactive_list_toggle(self, monkeypatch, capsys, catalog_path):
        run(monkeypatch, str(catalog_path), "--day", "wed", "--time", "18:00", stdin="l\nl\nwhat\n")
        out = capsys.readouterr().out
        assert "=== All Restaurants ===" in out
        assert "2 of 2 open now" in out
        assert out.count("Commands:") == 2

    def test_missing_catalog(self, monkeypatch, capsys, tmp_path):
        code = run(monkeypatch, str(tmp_path / "nope.json"))
        assert code == 1
        assert "Catalog file not found" in capsys.readouterr().err

    def test_invalid_catalog(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "food.json"
        path.write_text(json.dumps([{"name": "X", "hours": {"monday": {"start": "9", "end": "5"}}}]))
        code = run(monkeypatch, str(path))
        assert code == 1
        assert "Error loading catalog" in capsys.readouterr().err

    def test_bad_time_flag(self, monkeypatch, catalog_path):
        with pytest.raises(SystemExit):
            run(monkeypatch, str(catalog_path), "--time", "27:00")

    def test_catalog_required(self, monkeypatch):
        with pytest.raises(SystemExit):
            run(monkeypatch)

    def test_output_template(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "template.yaml"
        code = run(monkeypatch, "--output-template", str(path))
        assert code == 0
        assert path.exists()
        assert "Created catalog template" in capsys.readouterr().out
