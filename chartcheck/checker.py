"""Per-manifest chart version check."""

import logging
from pathlib import Path
from typing import Callable

from .exceptions import ChartCheckError
from .helm.repository import RepositoryClient
from .helm.resolver import resolve_latest_version
from .models import ApplicationDescriptor, CheckResult, Loaded, Status
from .scanner import load_application, walk_manifests

logger = logging.getLogger(__name__)


def determine_status(target_revision: str, latest_version: str) -> Status:
    """Compare the pinned revision with the latest version as plain strings.

    "v1.2.0" against "1.2.0", or a range such as "^1.2.0", counts as an
    available update.
    """
    if target_revision == latest_version:
        return Status.UP_TO_DATE
    return Status.UPDATE_AVAILABLE


class ChartChecker:
    """Checks Argo CD Applications with Helm sources against their repositories."""

    def __init__(
        self,
        client: RepositoryClient | None = None,
        announce: Callable[[str], None] | None = None,
    ):
        self.client = client or RepositoryClient()
        self.announce = announce or (lambda message: None)

    def check_application(self, descriptor: ApplicationDescriptor, file_path: str) -> CheckResult:
        """Look up the latest chart version for one application."""
        self.announce(f"Checking Chart: {descriptor.chart}")

        try:
            index = self.client.fetch_index(descriptor.repo_url)
            latest_version = str(resolve_latest_version(descriptor.chart, index))
        except ChartCheckError as e:
            logger.warning(f"Failed to check {descriptor.name} ({descriptor.chart}): {e}")
            latest_version = ""
            status = Status.ERROR
        else:
            status = determine_status(descriptor.target_revision, latest_version)

        return CheckResult(
            file_path=file_path,
            application=descriptor.name,
            current_version=descriptor.target_revision,
            latest_version=latest_version,
            status=status,
        )

    def process_file(self, path: str | Path, results: list[CheckResult]) -> None:
        """Append a result for path if it is an Application with a chart source."""
        outcome = load_application(path)
        if not isinstance(outcome, Loaded):
            return

        descriptor = outcome.descriptor
        if not descriptor.is_chart_source:
            return

        results.append(self.check_application(descriptor, str(path)))

    def check_tree(self, root: str | Path) -> list[CheckResult]:
        """Check every manifest under root.

        OSError from walking the tree propagates; results gathered so far are
        discarded with it.
        """
        results: list[CheckResult] = []
        for path in walk_manifests(root):
            self.process_file(path, results)
        return results
