"""Core domain models and exceptions for modsource."""

from modsource.core.exceptions import (
    ConfigurationError,
    DiscoveryError,
    DiscoveryTimeoutError,
    InvalidVersionError,
    MalformedRepoURLError,
    MetaTagsNotFoundError,
    ModuleSourceError,
    TransportError,
    TransportTimeoutError,
)
from modsource.core.models import (
    SourceInfo,
    SourceMeta,
    URLTemplates,
)

__all__ = [
    # Models
    "SourceInfo",
    "SourceMeta",
    "URLTemplates",
    # Exceptions
    "ModuleSourceError",
    "ConfigurationError",
    "InvalidVersionError",
    "MetaTagsNotFoundError",
    "TransportError",
    "TransportTimeoutError",
    "DiscoveryError",
    "DiscoveryTimeoutError",
    "MalformedRepoURLError",
]
