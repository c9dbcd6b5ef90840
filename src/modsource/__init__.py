"""modsource: links from module versions to their source repositories."""

__version__ = "0.1.0"
