"""Tests for run-scoped models."""

import pytest

from prbump_core.errors import ClassificationError
from prbump_core.models import BumpLevel, Commit, CommitStats, Recommendation, RunContext, RunResult, VersionPair


class TestBumpLevel:
    def test_lower_is_more_significant(self):
        assert min(BumpLevel.PATCH, BumpLevel.MAJOR, BumpLevel.MINOR) is BumpLevel.MAJOR
        assert min(BumpLevel.NONE, BumpLevel.PATCH) is BumpLevel.PATCH

    def test_release_type(self):
        assert BumpLevel.MAJOR.release_type == "major"
        assert BumpLevel.PATCH.release_type == "patch"
        assert BumpLevel.NONE.release_type is None


class TestRecommendationFromMapping:
    def test_builds_from_loose_values(self):
        rec = Recommendation.from_mapping({"level": 1, "reason": "r", "stats": {"commits": 2, "unset": 1}})
        assert rec == Recommendation(BumpLevel.MINOR, "r", CommitStats(commits=2, unset=1, merge=0))

    def test_level_by_name_or_none(self):
        assert Recommendation.from_mapping({"level": "major", "reason": "", "stats": {}}).level is BumpLevel.MAJOR
        assert Recommendation.from_mapping({"level": None, "reason": "", "stats": {}}).level is BumpLevel.NONE

    def test_missing_fields_rejected(self):
        with pytest.raises(ClassificationError, match="reason, stats"):
            Recommendation.from_mapping({"level": 0})

    def test_invalid_level_rejected(self):
        with pytest.raises(ClassificationError, match="Invalid bump level"):
            Recommendation.from_mapping({"level": 7, "reason": "", "stats": {}})

    def test_invalid_stats_rejected(self):
        with pytest.raises(ClassificationError, match="Invalid commit stats"):
            Recommendation.from_mapping({"level": 0, "reason": "", "stats": 3})


def test_commit_subject_is_first_line():
    assert Commit("a", "feat: x\n\nbody").subject == "feat: x"


def test_run_context_full_name():
    assert RunContext(owner="oat-sa", repo="tao-core", pr_number=1).full_name == "oat-sa/tao-core"


def test_run_result_version():
    rec = Recommendation(BumpLevel.PATCH, "")
    assert RunResult(rec, VersionPair("1.0.0", "1.0.1")).version == "1.0.1"
    assert RunResult(rec).version is None
