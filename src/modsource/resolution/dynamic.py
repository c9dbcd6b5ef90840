"""Resolution of module paths through host metadata."""

import asyncio
from urllib.parse import urlsplit

import structlog

from modsource.core.exceptions import (
    DiscoveryError,
    DiscoveryTimeoutError,
    MalformedRepoURLError,
    ModuleSourceError,
    with_error_context,
)
from modsource.core.models.meta import SourceMeta
from modsource.core.models.source import SourceInfo, URLTemplates
from modsource.discovery.meta import fetch_meta
from modsource.discovery.transport import Transport
from modsource.resolution.matcher import match_static
from modsource.resolution.patterns import PatternTable
from modsource.resolution.templates import join_path
from modsource.resolution.versions import commit_from_version

logger = structlog.get_logger(__name__)

DEFAULT_DISCOVERY_TIMEOUT = 60.0


@with_error_context
async def module_info_dynamic(
    module_path: str,
    version: str,
    *,
    transport: Transport,
    table: PatternTable | None = None,
    timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
) -> SourceInfo:
    """Build a SourceInfo from the go-import and go-source meta tags of a host.

    The repo URL from the tags is matched against the known hosting
    conventions to pick URL templates; the templates of a go-source tag are
    not used because they cannot refer to a commit.

    Raises:
        DiscoveryTimeoutError: if discovery takes longer than timeout seconds.
        DiscoveryError: if the host does not provide usable meta tags.
        MalformedRepoURLError: if the discovered repo URL cannot be parsed.
    """
    logger.debug("Discovering module source", module_path=module_path, version=version)
    meta = await _discover(module_path, transport, timeout)

    # The repo root prefix is not compared with the module path; the proxy
    # and the go command have already done that.
    templates = _templates_for_repo_url(meta.repo_url, table)
    if templates.is_empty:
        logger.error(
            "No URL templates for repo URL from meta tag",
            repo_url=meta.repo_url,
            module_path=module_path,
        )

    dir = module_path.removeprefix(meta.repo_root_prefix).removeprefix("/")
    return SourceInfo(
        repo_url=meta.repo_url.removesuffix("/"),
        module_dir=dir,
        commit=commit_from_version(version, dir),
        templates=templates,
    )


async def _discover(module_path: str, transport: Transport, timeout: float) -> SourceMeta:
    try:
        # Don't let requests to arbitrary URLs take too long.
        async with asyncio.timeout(timeout):
            return await fetch_meta(transport, module_path)
    except TimeoutError as e:
        raise DiscoveryTimeoutError(
            f"discovery of {module_path!r} did not finish within {timeout}s"
        ) from e
    except ModuleSourceError as e:
        raise DiscoveryError(f"discovery of {module_path!r} failed: {e}") from e


def _templates_for_repo_url(repo_url: str, table: PatternTable | None) -> URLTemplates:
    """Find the URL templates of the hosting site serving repo_url."""
    try:
        parts = urlsplit(repo_url)
        _ = parts.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise MalformedRepoURLError(f"cannot parse repo URL {repo_url!r}: {e}") from e
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in repo_url):
        raise MalformedRepoURLError(f"cannot parse repo URL {repo_url!r}: control character")

    match = match_static(join_path(_hostname(parts.netloc), parts.path), table)
    if match is None:
        return URLTemplates()
    return match.templates


def _hostname(netloc: str) -> str:
    """Strip userinfo and port from netloc, keeping the host's case."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        return host[1:end] if end != -1 else host[1:]
    if ":" in host:
        return host.rpartition(":")[0]
    return host
