"""Business logic services for modsource."""

from modsource.services.resolution import SourceResolver, module_info

__all__ = [
    "SourceResolver",
    "module_info",
]
