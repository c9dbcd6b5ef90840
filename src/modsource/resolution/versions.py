"""Mapping module versions to repository commits."""

import re

INCOMPATIBLE_SUFFIX = "+incompatible"

PSEUDO_VERSION_RE = re.compile(
    r"^v[0-9]+\.(0\.0-|\d+\.\d+-([^+]*\.)?0\.)\d{14}-[A-Za-z0-9]+(\+incompatible)?\Z",
    re.ASCII,
)


def is_pseudo_version(version: str) -> bool:
    """Report whether version is a pseudo-version.

    This is a heuristic: the hyphen count is checked before the grammar, and
    some tags with several hyphens look like pseudo-versions.
    """
    return version.count("-") >= 2 and PSEUDO_VERSION_RE.match(version) is not None


def commit_from_version(version: str, dir: str) -> str:
    """Return a tag or commit hash for version.

    ``dir`` is the module directory relative to the repo root. Tags of a
    nested module are prefixed with that directory.
    """
    v = version.removesuffix(INCOMPATIBLE_SUFFIX)
    if is_pseudo_version(v):
        # The commit hash is at the end.
        return v[v.rindex("-") + 1 :]
    if dir:
        return f"{dir}/{v}"
    return v
