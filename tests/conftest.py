"""Pytest configuration and fixtures."""

import pytest
import structlog

from modsource.config.settings import Settings
from modsource.core.models.source import SourceInfo

from factories import SourceInfoFactory


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(_env_file=None, discovery_timeout=5.0)


@pytest.fixture
def github_info() -> SourceInfo:
    """A SourceInfo for a nested module hosted on GitHub."""
    return SourceInfoFactory(
        repo_url="https://github.com/org/repo",
        module_dir="sub/mod",
        commit="sub/mod/v1.2.3",
    )
