"""Source resolution service."""

import structlog

from modsource.config.settings import Settings, get_settings
from modsource.core.exceptions import with_error_context
from modsource.core.models.source import SourceInfo
from modsource.discovery.transport import HTTPTransport, Transport
from modsource.resolution import stdlib
from modsource.resolution.dynamic import module_info_dynamic
from modsource.resolution.matcher import match_static
from modsource.resolution.patterns import PatternTable, default_pattern_table
from modsource.resolution.versions import commit_from_version

logger = structlog.get_logger(__name__)


class SourceResolver:
    """Service that finds the repository, directory and commit of a module version.

    Known hosting sites are recognized from the module path alone. Other
    paths are resolved by fetching the host's go-import and go-source meta
    tags, so resolution may make one HTTP request.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        settings: Settings | None = None,
        table: PatternTable | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        # Loading the table validates it; an invalid table fails here.
        self._table = table if table is not None else default_pattern_table()
        self._owns_transport = transport is None
        self._transport = transport or HTTPTransport(settings=self._settings)

    @property
    def table(self) -> PatternTable:
        return self._table

    @with_error_context
    async def resolve(self, module_path: str, version: str) -> SourceInfo:
        """Resolve a module path and version to a SourceInfo."""
        if module_path == stdlib.MODULE_PATH:
            return SourceInfo(
                repo_url=stdlib.GO_SOURCE_REPO_URL,
                module_dir=stdlib.directory(version),
                commit=stdlib.tag_for_version(version),
                templates=stdlib.URL_TEMPLATES,
            )

        match = match_static(module_path, self._table)
        if match is None:
            return await module_info_dynamic(
                module_path,
                version,
                transport=self._transport,
                table=self._table,
                timeout=self._settings.discovery_timeout,
            )
        logger.debug("Matched known hosting pattern", module_path=module_path, repo=match.repo)
        return SourceInfo(
            repo_url=f"https://{match.repo}",
            module_dir=match.dir,
            commit=commit_from_version(version, match.dir),
            templates=match.templates,
        )

    async def close(self) -> None:
        """Close the transport if this resolver created it."""
        if self._owns_transport and isinstance(self._transport, HTTPTransport):
            await self._transport.aclose()

    async def __aenter__(self) -> "SourceResolver":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


async def module_info(
    module_path: str,
    version: str,
    transport: Transport | None = None,
    settings: Settings | None = None,
) -> SourceInfo:
    """Determine the repository holding a module version.

    May fetch from arbitrary URLs, so it can be slow.
    """
    async with SourceResolver(transport=transport, settings=settings) as resolver:
        return await resolver.resolve(module_path, version)
