"""Tests for text output."""
from eatout.candidates import ListingRow
from eatout.cycle import TERMINATED_MESSAGE, CycleView, Mode
from eatout.output import format_listing, format_view


class TestFormatView:
    """Test formatting each cycle mode."""

    def test_suggestion(self):
        view = CycleView(mode=Mode.PRESENTING, name="Alpha Grill", hours="11:00 AM–10:00 PM")
        text = format_view(view)
        assert "Alpha Grill" in text
        assert "Today: 11:00 AM–10:00 PM" in text

    def test_suggestion_without_hours(self):
        text = format_view(CycleView(mode=Mode.PRESENTING, name="Alpha Grill"))
        assert "Today" not in text

    def test_terminated(self):
        text = format_view(CycleView(mode=Mode.TERMINATED, message=TERMINATED_MESSAGE))
        assert "Out of suggestions" in text
        assert TERMINATED_MESSAGE in text

    def test_tabulating(self):
        rows = (ListingRow("Alpha Grill", "Open 24 hours", True),)
        text = format_view(CycleView(mode=Mode.TABULATING, listing=rows))
        assert "=== All Restaurants ===" in text
        assert "Alpha Grill" in text


class TestFormatListing:
    """Test the listing table."""

    def test_columns_are_aligned(self):
        rows = [
            ListingRow("Alpha Grill", "11:00 AM–10:00 PM", True),
            ListingRow("Bistro", "Closed", False),
        ]
        lines = format_listing(rows).splitlines()
        assert lines[1].startswith("Name        | Hours")
        assert set(lines[2]) == {"-"}
        assert lines[3].endswith("| yes")
        assert lines[3].index("|") == lines[4].index("|")
        assert lines[-1] == "1 of 2 open now"

    def test_empty(self):
        assert "empty" in format_listing([])
