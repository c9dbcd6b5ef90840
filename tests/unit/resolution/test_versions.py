"""Tests for version to commit mapping."""

import pytest

from modsource.resolution.versions import commit_from_version, is_pseudo_version


@pytest.mark.unit
class TestIsPseudoVersion:
    """Tests for is_pseudo_version."""

    @pytest.mark.parametrize(
        "version",
        [
            "v0.0.0-20190101000000-abcdef123456",
            "v1.2.4-0.20190101000000-abcdef123456",
            "v1.2.4-pre.0.20190101000000-abcdef123456",
            "v2.0.0-20190101000000-abcdef123456+incompatible",
        ],
    )
    def test_pseudo_versions(self, version: str) -> None:
        assert is_pseudo_version(version)

    @pytest.mark.parametrize(
        "version",
        [
            "v1.2.3",
            "v1.2.3-beta.1",
            "v1.0.0-rc-1",
            "v0.0.0-2019010100000-abcdef",  # 13-digit timestamp
            "v0.0.0-20190101000000",
        ],
    )
    def test_tagged_versions(self, version: str) -> None:
        assert not is_pseudo_version(version)

    def test_hyphenated_tag_shaped_like_pseudo_version(self) -> None:
        # Known ambiguity: a real tag with this shape is treated as a
        # pseudo-version and its suffix taken as a commit hash.
        assert is_pseudo_version("v1.0.0-build.0.20200101120000-nightly")


@pytest.mark.unit
class TestCommitFromVersion:
    """Tests for commit_from_version."""

    def test_pseudo_version_uses_hash(self) -> None:
        assert commit_from_version("v0.0.0-20190101000000-abcdef123456", "") == "abcdef123456"

    def test_pseudo_version_ignores_dir(self) -> None:
        assert commit_from_version("v0.0.0-20190101000000-abcdef123456", "sub") == "abcdef123456"

    def test_incompatible_pseudo_version(self) -> None:
        commit = commit_from_version("v2.0.0-20190101000000-abcdef123456+incompatible", "")
        assert commit == "abcdef123456"

    def test_tag(self) -> None:
        assert commit_from_version("v1.2.3", "") == "v1.2.3"

    def test_nested_module_tag(self) -> None:
        assert commit_from_version("v1.2.3", "sub") == "sub/v1.2.3"

    def test_incompatible_tag(self) -> None:
        assert commit_from_version("v2.1.0+incompatible", "") == "v2.1.0"

    def test_prerelease_tag_with_two_hyphens(self) -> None:
        # Two hyphens but not the pseudo-version grammar: a tag.
        assert commit_from_version("v1.0.0-rc-1", "a/b") == "a/b/v1.0.0-rc-1"

    def test_trailing_newline_is_not_a_pseudo_version(self) -> None:
        version = "v0.0.0-20190101000000-abcdef123456\n"
        assert not is_pseudo_version(version)
        assert commit_from_version(version, "") == version

    def test_non_ascii_digits_are_not_a_timestamp(self) -> None:
        timestamp = "١" * 14
        assert not is_pseudo_version(f"v0.0.0-{timestamp}-abcdef123456")
