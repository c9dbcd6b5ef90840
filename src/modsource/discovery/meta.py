"""Discovery of repository locations from go-import and go-source meta tags.

A host serving a module path answers ``https://<path>?go-get=1`` with a page
whose head contains tags like::

    <meta name="go-import" content="example.org/mod git https://github.com/org/mod">
    <meta name="go-source" content="example.org/mod _ dir-template file-template">
"""

from html.parser import HTMLParser

import structlog

from modsource.core.exceptions import MetaTagsNotFoundError
from modsource.core.models.meta import SourceMeta
from modsource.discovery.transport import Transport

logger = structlog.get_logger(__name__)


async def fetch_meta(transport: Transport, import_path: str) -> SourceMeta:
    """Fetch the host page for import_path and parse its meta tags."""
    uri = import_path
    if "/" not in uri:
        # Add slash for root of domain.
        uri += "/"
    body = await transport.get(f"https://{uri}?go-get=1")
    return parse_meta(import_path, body)


def parse_meta(import_path: str, html: str) -> SourceMeta:
    """Extract the source location for import_path from an HTML page.

    Raises:
        MetaTagsNotFoundError: if no applicable tags are found or they
            contradict each other.
    """
    scanner = _MetaTagScanner(import_path)
    scanner.feed(html)
    scanner.close()
    if scanner.meta is None:
        raise MetaTagsNotFoundError(scanner.error_message)
    logger.debug(
        "Found source meta tags",
        import_path=import_path,
        repo_root_prefix=scanner.meta.repo_root_prefix,
        repo_url=scanner.meta.repo_url,
    )
    return scanner.meta


def _is_path_prefix(prefix: str, path: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


class _MetaTagScanner(HTMLParser):
    """Scans the head of a page for go-import and go-source meta tags."""

    def __init__(self, import_path: str) -> None:
        super().__init__(convert_charrefs=True)
        self.import_path = import_path
        self.meta: SourceMeta | None = None
        self.error_message = "go-import and go-source meta tags not found"
        self._done = False

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self._done:
            return
        if tag == "body":
            self._done = True
            return
        if tag != "meta":
            return
        attributes = {name: value or "" for name, value in attrs}
        name = attributes.get("name", "")
        if name not in ("go-import", "go-source"):
            return
        fields = attributes.get("content", "").split()
        if not fields:
            return
        repo_root_prefix = fields[0]
        if not _is_path_prefix(repo_root_prefix, self.import_path):
            # A site may serve one page for many repositories.
            return
        if name == "go-import":
            self._handle_go_import(fields)
        else:
            self._handle_go_source(fields)

    def handle_endtag(self, tag: str) -> None:
        if tag == "head":
            self._done = True

    def _fail(self, message: str) -> None:
        self.meta = None
        self.error_message = message
        self._done = True

    def _handle_go_import(self, fields: list[str]) -> None:
        if len(fields) != 3:
            self.error_message = "go-import meta tag content attribute does not have three fields"
            return
        if fields[1] == "mod":
            # No source links can be made from a module proxy.
            return
        if self.meta is not None:
            self._fail("more than one go-import meta tag found")
            return
        # Keep going in the hope of finding a go-source tag.
        self.meta = SourceMeta(repo_root_prefix=fields[0], repo_url=fields[2])

    def _handle_go_source(self, fields: list[str]) -> None:
        if len(fields) != 4:
            self.error_message = "go-source meta tag content attribute does not have four fields"
            return
        if self.meta is not None and self.meta.repo_root_prefix != fields[0]:
            self._fail(
                f"import path prefixes {self.meta.repo_root_prefix!r} for go-import "
                f"and {fields[0]!r} for go-source disagree"
            )
            return
        repo_url = fields[1]
        if repo_url == "_":
            # Use the repo from the go-import tag.
            if self.meta is None:
                self._fail('go-source repo is "_", but no previous go-import tag')
                return
            repo_url = self.meta.repo_url
        self.meta = SourceMeta(
            repo_root_prefix=fields[0],
            repo_url=repo_url,
            dir_template=fields[2],
            file_template=fields[3],
        )
        self._done = True
