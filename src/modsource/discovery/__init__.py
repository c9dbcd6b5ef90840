"""Repository discovery from host metadata."""

from modsource.discovery.meta import fetch_meta, parse_meta
from modsource.discovery.transport import HTTPTransport, Transport

__all__ = ["HTTPTransport", "Transport", "fetch_meta", "parse_meta"]
