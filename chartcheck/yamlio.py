"""YAML loading that keeps scalars as the text written in the file."""

from typing import Any

import yaml

# Prefer the C-accelerated loader when available.
_SafeLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)

_KEPT_TAGS = frozenset({"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"})


class TextLoader(_SafeLoader):
    """Safe loader resolving only nulls and merge keys.

    Every other plain scalar stays a string, so "1.10" is not read as the
    float 1.1 and "yes" is not read as True.
    """


TextLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_TAGS]
    for first, resolvers in _SafeLoader.yaml_implicit_resolvers.items()
}


def load_first_document(data: bytes | str) -> Any:
    """Parse only the first document of a YAML stream; None when empty."""
    return next(yaml.load_all(data, Loader=TextLoader), None)
