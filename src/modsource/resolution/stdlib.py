"""Source locations for the Go standard library.

The standard library is served as the pseudo-module ``std``. Its versions
are semantic versions that correspond to the Go release tags in the Go
repository, e.g. ``v1.13.0-beta.1`` is tagged ``go1.13beta1``.
"""

import re

import semantic_version

from modsource.core.exceptions import InvalidVersionError
from modsource.core.models.source import GITHUB_URL_TEMPLATES, URLTemplates

MODULE_PATH = "std"
GO_SOURCE_REPO_URL = "https://github.com/golang/go"
URL_TEMPLATES: URLTemplates = GITHUB_URL_TEMPLATES

_NUM = r"(?:0|[1-9][0-9]*)"
_IDENT = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_IDENT = r"[0-9A-Za-z-]+"
SEMVER_RE = re.compile(
    rf"^v(?P<major>{_NUM})"
    rf"(?:\.(?P<minor>{_NUM})"
    rf"(?:\.(?P<patch>{_NUM})"
    rf"(?P<prerelease>-{_IDENT}(?:\.{_IDENT})*)?"
    rf"(?P<build>\+{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*)?"
    r")?)?$"
)

# Versions before this kept packages under src/pkg.
_SRC_DIR_VERSION = semantic_version.Version("1.4.0-beta.1")


def _parse(version: str) -> semantic_version.Version | None:
    """Parse a v-prefixed semantic version, allowing v1 and v1.2 shorthands.

    Build metadata is dropped. Returns None if version is not valid.
    """
    m = SEMVER_RE.match(version)
    if m is None:
        return None
    canonical = f"{m['major']}.{m['minor'] or 0}.{m['patch'] or 0}"
    if m["prerelease"]:
        canonical += m["prerelease"]
    return semantic_version.Version(canonical)


def tag_for_version(version: str) -> str:
    """Return the Go tag corresponding to a semantic version.

    Raises:
        InvalidVersionError: if version is not a valid semantic version, or
            its prerelease does not map to a Go tag.
    """
    v = _parse(version)
    if v is None:
        raise InvalidVersionError(
            f"requested version is not a valid semantic version: {version!r}",
            module_path=MODULE_PATH,
            version=version,
        )
    tag = f"go{v.major}.{v.minor}"
    if v.patch != 0:
        tag += f".{v.patch}"
    if v.prerelease:
        prerelease = ".".join(v.prerelease)
        # Go prereleases look like "beta1"; semantic versions must use "beta.1".
        m = re.search(r"[0-9]+$", prerelease)
        if m is not None and m.start() >= 1:
            if prerelease[m.start() - 1] != ".":
                raise InvalidVersionError(
                    f"final digits in a prerelease must follow a period: {version!r}",
                    module_path=MODULE_PATH,
                    version=version,
                )
            prerelease = prerelease[: m.start() - 1] + prerelease[m.start() :]
        tag += prerelease
    return tag


def directory(version: str) -> str:
    """Return the directory of the standard library relative to the repo root."""
    v = _parse(version)
    if v is not None and v >= _SRC_DIR_VERSION:
        return "src"
    return "src/pkg"
