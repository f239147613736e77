"""Run-scoped data models.

Everything here is created and discarded within a single invocation. The only
durable side effect of a run is the tracked comment on the pull request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping

from prbump_core.errors import ClassificationError


class BumpLevel(IntEnum):
    """Magnitude of the recommended version increment.

    Lower values are more significant, so the level of a commit set is the
    minimum over its commits.
    """

    MAJOR = 0
    MINOR = 1
    PATCH = 2
    NONE = 3

    @property
    def release_type(self) -> str | None:
        """The semver part to increment, or None when nothing should be bumped."""
        if self is BumpLevel.NONE:
            return None
        return self.name.lower()


@dataclass(frozen=True)
class Commit:
    sha: str
    message: str

    @property
    def subject(self) -> str:
        return self.message.split("\n", 1)[0].strip()


@dataclass(frozen=True)
class CommitStats:
    """Aggregate counts over the analysed commits.

    ``unset`` and ``merge`` are each bounded by ``commits`` but their sum need
    not equal it.
    """

    commits: int = 0
    unset: int = 0
    merge: int = 0


@dataclass(frozen=True)
class Recommendation:
    level: BumpLevel
    reason: str
    stats: CommitStats = field(default_factory=CommitStats)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Recommendation:
        """Build a Recommendation from a loose mapping, rejecting missing fields.

        Accepts ``level`` as a BumpLevel, its integer value, its name, or None
        (meaning no bump).
        """
        missing = [key for key in ("level", "reason", "stats") if key not in data]
        if missing:
            raise ClassificationError(f"Recommendation is missing required field(s): {', '.join(missing)}")

        raw_level = data["level"]
        try:
            if raw_level is None:
                level = BumpLevel.NONE
            elif isinstance(raw_level, str):
                level = BumpLevel[raw_level.upper()]
            else:
                level = BumpLevel(raw_level)
        except (KeyError, ValueError):
            raise ClassificationError(f"Invalid bump level: {raw_level!r}")

        stats = data["stats"]
        if isinstance(stats, Mapping):
            stats = CommitStats(
                commits=int(stats.get("commits", 0)),
                unset=int(stats.get("unset", 0)),
                merge=int(stats.get("merge", 0)),
            )
        elif not isinstance(stats, CommitStats):
            raise ClassificationError(f"Invalid commit stats: {stats!r}")

        return cls(level=level, reason=str(data["reason"] or ""), stats=stats)


@dataclass(frozen=True)
class VersionPair:
    """The last released version and the version the pull request leads to.

    ``target_version`` is None when there is nothing to bump or the last tag
    does not follow semantic versioning.
    """

    last_version: str
    target_version: str | None = None


@dataclass(frozen=True)
class RunContext:
    """Repository and pull request a run operates on, built once at the boundary."""

    owner: str
    repo: str
    pr_number: int
    token: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class RunResult:
    """Outcome of a successful run, returned to the CLI."""

    recommendation: Recommendation
    versions: VersionPair | None = None
    body: str = ""

    @property
    def version(self) -> str | None:
        return self.versions.target_version if self.versions else None
