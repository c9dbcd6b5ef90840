"""Exceptions for modsource."""

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

T = TypeVar("T")


class ModuleSourceError(Exception):
    """Base exception for all modsource errors.

    ``module_path`` and ``version`` identify the resolution request the error
    belongs to, when known.
    """

    def __init__(
        self,
        message: str = "",
        *,
        module_path: str | None = None,
        version: str | None = None,
    ) -> None:
        super().__init__(message)
        self.module_path = module_path
        self.version = version


class ConfigurationError(ModuleSourceError):
    """Raised when the pattern table or settings are invalid."""

    pass


class InvalidVersionError(ModuleSourceError, ValueError):
    """Raised when a version cannot be mapped to a commit tag."""

    pass


class MetaTagsNotFoundError(ModuleSourceError):
    """Raised when a host page has no usable go-import or go-source tags."""

    pass


class TransportError(ModuleSourceError):
    """Raised when the HTTP request for host metadata fails."""

    pass


class TransportTimeoutError(TransportError, TimeoutError):
    """Raised when the HTTP request for host metadata times out."""

    pass


class DiscoveryError(ModuleSourceError):
    """Raised when the repository of a module cannot be discovered.

    The underlying failure is available as ``__cause__``.
    """

    pass


class DiscoveryTimeoutError(DiscoveryError, TimeoutError):
    """Raised when discovery does not finish within its deadline."""

    pass


class MalformedRepoURLError(ModuleSourceError, ValueError):
    """Raised when a discovered repository URL cannot be parsed."""

    pass


def with_error_context(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """Attach request context to any ModuleSourceError raised by ``func``.

    ``func`` must take ``module_path`` and ``version`` arguments. The original
    exception is re-raised unchanged apart from the filled-in attributes and a
    note naming the call, so its type and ``__cause__`` are preserved.
    """
    signature = inspect.signature(func)

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except ModuleSourceError as exc:
            bound = signature.bind_partial(*args, **kwargs).arguments
            module_path = bound.get("module_path")
            version = bound.get("version")
            if exc.module_path is None:
                exc.module_path = module_path
            if exc.version is None:
                exc.version = version
            exc.add_note(f"{func.__qualname__}({module_path!r}, {version!r})")
            raise

    return wrapper
