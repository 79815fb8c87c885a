"""Latest chart version resolution."""

from ..exceptions import NoValidVersionsError
from ..versions import SemVer, parse_semver
from .repository import RepositoryIndex


def resolve_latest_version(chart: str, index: RepositoryIndex) -> SemVer:
    """Return the highest semver published for a chart.

    Entries that do not parse are skipped. The index is not assumed to be
    sorted; on equal precedence the earliest entry wins.
    """
    latest: SemVer | None = None
    for raw in index.versions(chart):
        version = parse_semver(raw)
        if version is None:
            continue
        if latest is None or version > latest:
            latest = version

    if latest is None:
        raise NoValidVersionsError(chart)
    return latest
