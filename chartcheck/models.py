"""Data models for the chart version check."""

from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    """Outcome of comparing a pinned revision with the repository."""

    UP_TO_DATE = "Up-to-date"
    UPDATE_AVAILABLE = "Update available"
    ERROR = "Error"


@dataclass(frozen=True)
class ApplicationDescriptor:
    """The Helm source fields of an Argo CD Application manifest."""

    name: str = ""
    repo_url: str = ""
    chart: str = ""
    target_revision: str = ""

    @property
    def is_chart_source(self) -> bool:
        """Git path sources carry no chart name."""
        return bool(self.chart)


@dataclass(frozen=True)
class Loaded:
    """A manifest that decoded into an application descriptor."""

    descriptor: ApplicationDescriptor


@dataclass(frozen=True)
class NotApplicable:
    """A file that is unreadable or not an application manifest."""

    path: str
    reason: str = ""


LoadOutcome = Loaded | NotApplicable


@dataclass
class CheckResult:
    """One row of the report."""

    file_path: str
    application: str
    current_version: str
    latest_version: str
    status: Status

    @property
    def row(self) -> tuple[str, str, str, str, str]:
        return (
            self.application,
            self.file_path,
            self.current_version,
            self.latest_version,
            self.status.value,
        )
