"""Known hosting conventions for module paths and repository URLs."""

import re
from collections.abc import Iterable, Iterator
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from modsource.core.exceptions import ConfigurationError
from modsource.core.models.source import (
    BITBUCKET_URL_TEMPLATES,
    GITHUB_URL_TEMPLATES,
    GOOGLESOURCE_URL_TEMPLATES,
    URLTemplates,
)

REPO_GROUP = "repo"


class Pattern(BaseModel):
    """A regex matching a module path or repo, with the URL templates to use.

    The regex must have a group named ``repo``.
    """

    model_config = ConfigDict(frozen=True)

    regex: re.Pattern[str]
    templates: URLTemplates


class PatternTable:
    """An ordered, validated sequence of patterns. The first match wins."""

    def __init__(self, patterns: Iterable[Pattern]) -> None:
        self._patterns = tuple(patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __getitem__(self, index: int) -> Pattern:
        return self._patterns[index]


def load_pattern_table(
    entries: Iterable[tuple[str | re.Pattern[str], URLTemplates]],
) -> PatternTable:
    """Compile and validate pattern table entries.

    Raises:
        ConfigurationError: if a regex is invalid or lacks a ``repo`` group.
    """
    patterns = []
    for regex, templates in entries:
        try:
            compiled = re.compile(regex, re.ASCII) if isinstance(regex, str) else regex
        except re.error as e:
            raise ConfigurationError(f"invalid pattern {regex!r}: {e}") from e
        if REPO_GROUP not in compiled.groupindex:
            raise ConfigurationError(
                f"pattern {compiled.pattern} missing <{REPO_GROUP}> group"
            )
        patterns.append(Pattern(regex=compiled, templates=templates))
    return PatternTable(patterns)


DEFAULT_PATTERNS: tuple[tuple[str, URLTemplates], ...] = (
    (r"^(?P<repo>github\.com/[a-z0-9A-Z_.\-]+/[a-z0-9A-Z_.\-]+)", GITHUB_URL_TEMPLATES),
    (r"^(?P<repo>bitbucket\.org/[a-z0-9A-Z_.\-]+/[a-z0-9A-Z_.\-]+)", BITBUCKET_URL_TEMPLATES),
    # Import paths need the ".git" suffix; repo URLs from meta tags have none.
    (r"^(?P<repo>[^.]+\.googlesource\.com/[^.]+)(\.git|\Z)", GOOGLESOURCE_URL_TEMPLATES),
    # General syntax of the go command: repo and directory are known, the URL
    # layout is not. Must be last.
    (
        r"(?P<repo>([a-z0-9.\-]+\.)+[a-z0-9.\-]+(:[0-9]+)?(/~?[A-Za-z0-9_.\-]+)+?)"
        r"\.(bzr|fossil|git|hg|svn)",
        URLTemplates(),
    ),
)


@lru_cache
def default_pattern_table() -> PatternTable:
    """Get the validated table of known hosting conventions."""
    return load_pattern_table(DEFAULT_PATTERNS)
