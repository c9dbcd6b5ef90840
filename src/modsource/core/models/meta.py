"""Host metadata models."""

from pydantic import BaseModel, ConfigDict


class SourceMeta(BaseModel):
    """Repository location discovered from go-import and go-source meta tags."""

    model_config = ConfigDict(frozen=True)

    repo_root_prefix: str  # module path prefix corresponding to the repo root
    repo_url: str  # URL of the repo root
    # Only present in a go-source tag
    dir_template: str = ""
    file_template: str = ""
