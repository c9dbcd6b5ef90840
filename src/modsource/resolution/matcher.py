"""Static matching of module paths against known hosting conventions."""

from typing import NamedTuple

from modsource.core.models.source import URLTemplates
from modsource.resolution.patterns import REPO_GROUP, PatternTable, default_pattern_table


class StaticMatch(NamedTuple):
    """Result of a static match."""

    repo: str  # e.g. "github.com/owner/name"
    dir: str  # module directory relative to the repo root
    templates: URLTemplates


def match_static(
    module_path_or_repo: str,
    table: PatternTable | None = None,
) -> StaticMatch | None:
    """Match a module path or repo URL against the pattern table.

    Patterns are tried in order and must match at the start of the input.
    Returns None if no pattern matches.
    """
    if table is None:
        table = default_pattern_table()
    for pattern in table:
        m = pattern.regex.match(module_path_or_repo)
        if m is None:
            continue
        # The directory is everything after what the pattern matches.
        dir = module_path_or_repo[m.end() :].removeprefix("/")
        return StaticMatch(m.group(REPO_GROUP), dir, pattern.templates)
    return None
