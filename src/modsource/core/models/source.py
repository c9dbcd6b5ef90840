"""Source location models."""

from pydantic import BaseModel, ConfigDict

from modsource.resolution.templates import expand, join_path


class URLTemplates(BaseModel):
    """How to build URLs for one hosting site.

    ``directory`` uses ``{repo}``, ``{commit}`` and ``{dir}``; ``file`` uses
    ``{repo}``, ``{commit}`` and ``{file}``; ``line`` also uses ``{line}``.
    The all-empty value means the site's URL layout is unknown.
    """

    model_config = ConfigDict(frozen=True)

    directory: str = ""
    file: str = ""
    line: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.directory or self.file or self.line)


GITHUB_URL_TEMPLATES = URLTemplates(
    directory="{repo}/tree/{commit}/{dir}",
    file="{repo}/blob/{commit}/{file}",
    line="{repo}/blob/{commit}/{file}#L{line}",
)

BITBUCKET_URL_TEMPLATES = URLTemplates(
    directory="{repo}/src/{commit}/{dir}",
    file="{repo}/src/{commit}/{file}",
    line="{repo}/src/{commit}/{file}#lines-{line}",
)

GOOGLESOURCE_URL_TEMPLATES = URLTemplates(
    directory="{repo}/+/{commit}/{dir}",
    file="{repo}/+/{commit}/{file}",
    line="{repo}/+/{commit}/{file}#{line}",
)


class SourceInfo(BaseModel):
    """Where the source of one module version lives.

    Used to build URLs to the module's directories, files and lines in
    its repository.
    """

    model_config = ConfigDict(frozen=True)

    repo_url: str  # URL of the repository containing the module
    module_dir: str = ""  # module directory relative to the repo root
    commit: str  # tag or ID of the commit for the version
    templates: URLTemplates = URLTemplates()

    @property
    def has_templates(self) -> bool:
        """Whether URLs can be built for this repository."""
        return not self.templates.is_empty

    def module_url(self) -> str:
        """URL of the module's home directory."""
        return self.directory_url("")

    def directory_url(self, dir: str) -> str:
        """URL of a directory relative to the module's home directory."""
        url = expand(
            self.templates.directory,
            {
                "repo": self.repo_url,
                "commit": self.commit,
                "dir": join_path(self.module_dir, dir),
            },
        )
        return url.removesuffix("/")

    def file_url(self, path: str) -> str:
        """URL of a file relative to the module's home directory."""
        return expand(
            self.templates.file,
            {
                "repo": self.repo_url,
                "commit": self.commit,
                "file": join_path(self.module_dir, path),
            },
        )

    def line_url(self, path: str, line: int) -> str:
        """URL of a line in a file relative to the module's home directory.

        Lines are numbered from 1.
        """
        if line < 1:
            raise ValueError(f"line must be positive, got {line}")
        return expand(
            self.templates.line,
            {
                "repo": self.repo_url,
                "commit": self.commit,
                "file": join_path(self.module_dir, path),
                "line": str(line),
            },
        )
