"""Directory walking and Argo CD Application manifest loading."""

import logging
import os
import stat
from pathlib import Path
from typing import Any, Iterator

import yaml

from .models import ApplicationDescriptor, Loaded, LoadOutcome, NotApplicable
from .yamlio import load_first_document

logger = logging.getLogger(__name__)

MANIFEST_SUFFIXES = (".yaml", ".yml")


def walk_manifests(root: str | Path) -> Iterator[Path]:
    """Yield manifest files under root, depth-first in lexical order.

    Symlinked directories are not followed, including a symlinked root.
    OSError from a missing root (or an empty path) or an unreadable
    directory propagates and ends the walk.
    """
    # lstat before Path(), which would turn "" into "."
    info = os.lstat(root)
    root = Path(root)
    if not stat.S_ISDIR(info.st_mode):
        if root.name.endswith(MANIFEST_SUFFIXES):
            yield root
        return

    with os.scandir(root) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from walk_manifests(entry.path)
        elif entry.name.endswith(MANIFEST_SUFFIXES):
            yield Path(entry.path)


class _ShapeError(ValueError):
    """A field holds a value of the wrong YAML kind."""


def _mapping(value: Any, field: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _ShapeError(f"{field} is not a mapping")
    return value


def _scalar(value: Any, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _ShapeError(f"{field} is not a scalar")
    return value


def parse_application(doc: Any) -> ApplicationDescriptor:
    """Decode a YAML document into an ApplicationDescriptor.

    Missing fields are left empty; a field of the wrong kind raises
    ValueError.
    """
    root = _mapping(doc, "document")
    metadata = _mapping(root.get("metadata"), "metadata")
    spec = _mapping(root.get("spec"), "spec")
    source = _mapping(spec.get("source"), "spec.source")

    return ApplicationDescriptor(
        name=_scalar(metadata.get("name"), "metadata.name"),
        repo_url=_scalar(source.get("repoURL"), "spec.source.repoURL"),
        chart=_scalar(source.get("chart"), "spec.source.chart"),
        target_revision=_scalar(source.get("targetRevision"), "spec.source.targetRevision"),
    )


def load_application(path: str | Path) -> LoadOutcome:
    """Load the first YAML document of a file as an application descriptor.

    Unreadable files and anything that is not shaped like an Application
    come back as NotApplicable instead of raising.
    """
    path = Path(path)
    try:
        content = path.read_bytes()
        doc = load_first_document(content)
        descriptor = parse_application(doc)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.debug(f"Skipping {path}: {e}")
        return NotApplicable(path=str(path), reason=str(e))

    return Loaded(descriptor)
