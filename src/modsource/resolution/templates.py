"""URL template expansion."""

import posixpath
import re
from collections.abc import Mapping


def expand(template: str, substitutions: Mapping[str, str]) -> str:
    """Replace each ``{key}`` in template with ``substitutions[key]``.

    All keys are replaced in a single pass, so a substituted value is never
    scanned for further placeholders and the result does not depend on the
    iteration order of ``substitutions``. Placeholders with no matching key
    are left untouched.
    """
    if not substitutions or not template:
        return template
    # Longest key first so that no key shadows another in the alternation.
    keys = sorted(substitutions, key=lambda k: (-len(k), k))
    pattern = re.compile(r"\{(" + "|".join(re.escape(k) for k in keys) + r")\}")
    return pattern.sub(lambda m: substitutions[m.group(1)], template)


def join_path(*parts: str) -> str:
    """Join slash-separated path parts and clean the result.

    Empty parts are skipped; redundant separators and ``.`` segments are
    removed. Returns ``""`` when every part is empty.
    """
    joined = "/".join(p for p in parts if p)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    # normpath keeps a leading "//" as is.
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned
