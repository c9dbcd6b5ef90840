"""Domain models for modsource."""

from modsource.core.models.meta import SourceMeta
from modsource.core.models.source import (
    BITBUCKET_URL_TEMPLATES,
    GITHUB_URL_TEMPLATES,
    GOOGLESOURCE_URL_TEMPLATES,
    SourceInfo,
    URLTemplates,
)

__all__ = [
    "SourceInfo",
    "SourceMeta",
    "URLTemplates",
    "GITHUB_URL_TEMPLATES",
    "BITBUCKET_URL_TEMPLATES",
    "GOOGLESOURCE_URL_TEMPLATES",
]
