"""Output formatting for eatout."""

from eatout.candidates import ListingRow
from eatout.cycle import CycleView, Mode


def format_view(view: CycleView) -> str:
    """Format whatever the cycle is currently showing."""
    if view.mode is Mode.TABULATING:
        return format_listing(list(view.listing))
    if view.mode is Mode.TERMINATED:
        return format_terminated(view)
    return format_suggestion(view)


def format_suggestion(view: CycleView) -> str:
    lines = ["=== How about... ===", view.name]
    if view.hours:
        lines.append(f"Today: {view.hours}")
    return "\n".join(lines)


def format_terminated(view: CycleView) -> str:
    return "\n".join(["=== Out of suggestions ===", view.message])


def format_listing(rows: list[ListingRow]) -> str:
    """Format the browse-all listing as an aligned table."""
    if not rows:
        return "=== All Restaurants ===\nThe catalog is empty."

    headers = ["Name", "Hours", "Open"]
    cells = [(row.name, row.hours_display, "yes" if row.viable else "") for row in rows]

    col_widths = [
        max(len(headers[i]), max(len(cell[i]) for cell in cells)) for i in range(len(headers))
    ]

    header_line = " | ".join(h.ljust(col_widths[i]) for i, h in enumerate(headers))
    separator = "-" * len(header_line)

    lines = ["=== All Restaurants ===", header_line, separator]
    for cell in cells:
        lines.append(" | ".join(value.ljust(col_widths[i]) for i, value in enumerate(cell)).rstrip())

    open_count = sum(1 for row in rows if row.viable)
    lines.append("")
    lines.append(f"{open_count} of {len(rows)} open now")

    return "\n".join(lines)
