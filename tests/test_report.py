"""Tests for report sorting and rendering."""

from chartcheck.models import CheckResult, Status
from chartcheck.report import render_table, sort_results


def result(application: str, status: Status, latest: str = "1.2.0") -> CheckResult:
    return CheckResult(
        file_path=f"apps/{application}.yaml",
        application=application,
        current_version="1.0.0",
        latest_version=latest,
        status=status,
    )


class TestSortResults:
    def test_sorted_by_application(self):
        results = [result("zeta", Status.UP_TO_DATE), result("alpha", Status.UP_TO_DATE)]
        assert [r.application for r in sort_results(results)] == ["alpha", "zeta"]

    def test_ties_broken_by_status(self):
        results = [
            result("app", Status.UPDATE_AVAILABLE),
            result("app", Status.UP_TO_DATE),
            result("app", Status.ERROR, latest=""),
        ]
        assert [r.status for r in sort_results(results)] == [
            Status.ERROR,
            Status.UP_TO_DATE,
            Status.UPDATE_AVAILABLE,
        ]

    def test_byte_order_comparison(self):
        results = [result("b", Status.UP_TO_DATE), result("B", Status.UP_TO_DATE), result("a", Status.UP_TO_DATE)]
        assert [r.application for r in sort_results(results)] == ["B", "a", "b"]

    def test_does_not_mutate_input(self):
        results = [result("b", Status.UP_TO_DATE), result("a", Status.UP_TO_DATE)]
        sort_results(results)
        assert [r.application for r in results] == ["b", "a"]


class TestRenderTable:
    def test_header_only(self):
        assert render_table([]) == [
            "Application  FilePath  Current Version  Latest Version  Status  "
        ]

    def test_columns_aligned(self):
        lines = render_table(
            [
                result("app-a", Status.UPDATE_AVAILABLE),
                result("a-much-longer-name", Status.ERROR, latest=""),
            ]
        )

        assert lines[0].split("  ")[0] == "Application"
        assert lines[1].split() == ["app-a", "apps/app-a.yaml", "1.0.0", "1.2.0", "Update", "available"]
        # FilePath column starts after the widest name plus two spaces
        file_column = len("a-much-longer-name") + 2
        assert all(line[file_column - 2:file_column] == "  " for line in lines)
        assert lines[0][file_column:].startswith("FilePath")
        assert lines[1][file_column:].startswith("apps/app-a.yaml")
        assert lines[2][file_column:].startswith("apps/a-much-longer-name.yaml")

    def test_empty_latest_version_keeps_alignment(self):
        lines = render_table([result("app", Status.ERROR, latest="")])
        status_column = lines[0].index("Status")
        assert lines[1][status_column:].rstrip() == "Error"
