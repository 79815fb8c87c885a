"""Sorting and tabular rendering of check results."""

from .models import CheckResult

HEADER = ("Application", "FilePath", "Current Version", "Latest Version", "Status")

# Gap after every cell, including the last one
PADDING = 2


def sort_results(results: list[CheckResult]) -> list[CheckResult]:
    """Order by application name, then by status."""
    return sorted(results, key=lambda r: (r.application, r.status.value))


def render_table(results: list[CheckResult]) -> list[str]:
    """Render results as column-aligned lines, header first.

    Rows are printed in the order given; call sort_results first.
    """
    rows = [HEADER] + [r.row for r in results]
    widths = [max(len(row[i]) for row in rows) + PADDING for i in range(len(HEADER))]

    return ["".join(cell.ljust(width) for cell, width in zip(row, widths)) for row in rows]
