"""Helm repository access and latest-version resolution."""

from .repository import RepositoryClient, RepositoryIndex
from .resolver import resolve_latest_version

__all__ = ["RepositoryClient", "RepositoryIndex", "resolve_latest_version"]
