"""Helm chart repository index client."""

import logging
from dataclasses import dataclass, field
from typing import Any

import requests
import yaml

from ..exceptions import FetchError, IndexDecodeError
from ..yamlio import load_first_document

logger = logging.getLogger(__name__)


@dataclass
class RepositoryIndex:
    """Chart name to published version strings, in index order."""

    entries: dict[str, list[str]] = field(default_factory=dict)

    def versions(self, chart: str) -> list[str]:
        return self.entries.get(chart, [])

    @classmethod
    def from_document(cls, doc: Any) -> "RepositoryIndex":
        """Build an index from a decoded index.yaml document.

        Only entries.<chart>[].version is read; other fields are ignored.
        """
        if doc is None:
            return cls()
        if not isinstance(doc, dict):
            raise IndexDecodeError("index document is not a mapping")

        raw_entries = doc.get("entries")
        if raw_entries is None:
            raw_entries = {}
        if not isinstance(raw_entries, dict):
            raise IndexDecodeError("index entries is not a mapping")

        entries: dict[str, list[str]] = {}
        for chart, charts in raw_entries.items():
            if charts is None:
                entries[chart] = []
                continue
            if not isinstance(charts, list):
                raise IndexDecodeError(f"entries for chart {chart} is not a list")

            versions = []
            for item in charts:
                if item is None:
                    item = {}
                if not isinstance(item, dict):
                    raise IndexDecodeError(f"entry for chart {chart} is not a mapping")
                version = item.get("version")
                if version is None:
                    version = ""
                elif not isinstance(version, str):
                    raise IndexDecodeError(f"version for chart {chart} is not a scalar")
                versions.append(version)
            entries[chart] = versions

        return cls(entries=entries)


def index_url(repo_url: str) -> str:
    """Location of a repository's index document."""
    return f"{repo_url.rstrip('/')}/index.yaml"


class RepositoryClient:
    """Client for plain HTTP(S) Helm chart repositories."""

    def __init__(self, timeout: float | None = None, session: requests.Session | None = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_index(self, repo_url: str) -> RepositoryIndex:
        """Download and decode a repository's index.yaml.

        Raises:
            FetchError: the request failed or returned an HTTP error status.
            IndexDecodeError: the body is not a valid index document.
        """
        url = index_url(repo_url)
        logger.info(f"Fetching chart index {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            body = response.content
        except requests.RequestException as e:
            raise FetchError(f"failed to fetch {url}: {e}") from e

        try:
            doc = load_first_document(body)
        except yaml.YAMLError as e:
            raise IndexDecodeError(f"failed to parse {url}: {e}") from e

        return RepositoryIndex.from_document(doc)
