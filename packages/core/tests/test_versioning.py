"""Tests for the version calculator."""

import pytest

from prbump_core.models import BumpLevel, VersionPair
from prbump_core.versioning import compute_target, parse_version, strip_tag


class TestComputeTarget:
    def test_major_resets_minor_and_patch(self):
        assert compute_target("1.4.2", BumpLevel.MAJOR) == VersionPair("1.4.2", "2.0.0")

    def test_minor_resets_patch(self):
        assert compute_target("1.4.2", BumpLevel.MINOR) == VersionPair("1.4.2", "1.5.0")

    def test_patch_increments_patch_only(self):
        assert compute_target("1.4.2", BumpLevel.PATCH) == VersionPair("1.4.2", "1.4.3")

    def test_none_has_no_target(self):
        assert compute_target("1.4.2", BumpLevel.NONE) == VersionPair("1.4.2", None)

    def test_major_strips_prerelease(self):
        assert compute_target("1.4.2-rc.1", BumpLevel.MAJOR).target_version == "2.0.0"

    @pytest.mark.parametrize("level,target", [(BumpLevel.MINOR, "1.5.0"), (BumpLevel.PATCH, "1.4.1")])
    def test_prerelease_tag_bumps_past_its_release(self, level, target):
        assert compute_target("1.4.0-rc.1", level) == VersionPair("1.4.0-rc.1", target)

    def test_last_version_is_normalised(self):
        pair = compute_target("v1.4.0+build.7", BumpLevel.MINOR)
        assert pair.last_version == "1.4.0"
        assert pair.target_version == "1.5.0"

    def test_prerelease_kept_in_last_version(self):
        assert compute_target("v2.0.0-beta.1", BumpLevel.PATCH).last_version == "2.0.0-beta.1"

    def test_tag_prefix_stripped(self):
        pair = compute_target("release-3.1.0", BumpLevel.MINOR, prefix="release-")
        assert pair == VersionPair("3.1.0", "3.2.0")

    @pytest.mark.parametrize("tag", ["2024.03.1", "2024.3", "v2023.12.0"])
    def test_calendar_tags_have_no_target(self, tag):
        assert compute_target(tag, BumpLevel.MINOR) == VersionPair(tag, None)

    @pytest.mark.parametrize("tag", ["1.4", "latest", "1.04.0"])
    def test_unparseable_tags_have_no_target(self, tag):
        assert compute_target(tag, BumpLevel.PATCH) == VersionPair(tag, None)

    @pytest.mark.parametrize("major,minor,patch", [(0, 0, 0), (1, 9, 9), (12, 0, 3)])
    def test_bump_rules(self, major, minor, patch):
        tag = f"{major}.{minor}.{patch}"
        assert compute_target(tag, BumpLevel.MAJOR).target_version == f"{major + 1}.0.0"
        assert compute_target(tag, BumpLevel.MINOR).target_version == f"{major}.{minor + 1}.0"
        assert compute_target(tag, BumpLevel.PATCH).target_version == f"{major}.{minor}.{patch + 1}"


def test_strip_tag():
    assert strip_tag(" v1.2.3 ") == "1.2.3"
    assert strip_tag("=1.2.3") == "1.2.3"
    assert strip_tag("pkg@1.2.3", prefix="pkg@") == "1.2.3"


def test_parse_version_returns_none_for_calver():
    assert parse_version("2024.03.1") is None
    assert str(parse_version("v1.2.3")) == "1.2.3"
