r"""Conventional Commits classifier.

Assigns each commit a bump significance from its message:

**Subject line**::

    type(scope)!: description

- ``!`` after the type/scope, or a ``BREAKING CHANGE:`` (or
  ``BREAKING-CHANGE:``) footer, is a breaking change → MAJOR.
- Types listed in ``major_types`` → MAJOR, in ``minor_types`` → MINOR.
- Any other conventional type (``fix``, ``chore``, ``docs``…) → PATCH.
- Merge commits are counted separately and carry no level.
- Everything else is "unset": not conventional, ignored for the bump.

The classifier is a collaborator of the recommendation engine. Anything with a
``classify(commits) -> Classification`` method can replace it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence, runtime_checkable

from prbump_core.errors import ClassificationError
from prbump_core.models import BumpLevel, Commit

CC_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<type>[a-zA-Z]+)"  # type (e.g. feat, fix, chore)
    r"(?:\((?P<scope>[^)]*)\))?"  # optional scope in parens
    r"(?P<breaking>!)?"  # optional breaking change indicator
    r":\s*"  # colon + space
    r"(?P<description>.+)$",  # description
)

# Must be uppercase; the hyphenated token is a synonym.
_BREAKING_FOOTER: re.Pattern[str] = re.compile(r"^BREAKING[ -]CHANGE:\s*\S", re.MULTILINE)

MERGE_PATTERN: re.Pattern[str] = re.compile(r"^Merge (?:pull request #\d+|branch |remote-tracking branch )")

_CONFIG_KEYS = ("minor_types", "major_types")


@dataclass(frozen=True)
class CommitClassification:
    """Significance of a single commit.

    Attributes:
        sha: The commit the entry describes.
        level: Bump the commit calls for, NONE for merges and unset commits.
        type: Lower-cased conventional type, empty when not conventional.
        breaking: Whether the commit declares a breaking change.
        merge: Whether the commit is a merge commit.
    """

    sha: str
    level: BumpLevel = BumpLevel.NONE
    type: str = ""
    breaking: bool = False
    merge: bool = False

    @property
    def unset(self) -> bool:
        return not self.merge and not self.type


@dataclass(frozen=True)
class Classification:
    commits: tuple[CommitClassification, ...]
    reason: str


@runtime_checkable
class CommitClassifier(Protocol):
    def classify(self, commits: Sequence[Commit]) -> Classification: ...


def _type_set(name: str, value) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ClassificationError(f"classifier.{name} must be a list of commit types, got {value!r}")
    types = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ClassificationError(f"classifier.{name} contains an invalid commit type: {item!r}")
        types.append(item.strip().lower())
    return frozenset(types)


def build_reason(breakings: int, features: int) -> str:
    verb = "is" if breakings == 1 else "are"
    changes = "BREAKING CHANGE" if breakings == 1 else "BREAKING CHANGES"
    noun = "feature" if features == 1 else "features"
    return f"There {verb} {breakings} {changes} and {features} {noun}"


class ConventionalClassifier:
    """Classifier for `Conventional Commits <https://www.conventionalcommits.org/en/v1.0.0/>`_.

    Example::

        classifier = ConventionalClassifier()
        result = classifier.classify([Commit("abc", "feat(api): add search")])
        assert result.commits[0].level == BumpLevel.MINOR
    """

    def __init__(self, minor_types: Iterable[str] = ("feat",), major_types: Iterable[str] = ()):
        self.minor_types = _type_set("minor_types", minor_types)
        self.major_types = _type_set("major_types", major_types)

    @classmethod
    def from_config(cls, config: dict) -> ConventionalClassifier:
        """Build a classifier from the ``classifier`` section of the config."""
        section = config.get("classifier") or {}
        if not isinstance(section, dict):
            raise ClassificationError(f"classifier configuration must be a mapping, got {section!r}")
        unknown = sorted(set(section) - set(_CONFIG_KEYS))
        if unknown:
            raise ClassificationError(f"Unknown classifier option(s): {', '.join(map(str, unknown))}")
        return cls(
            minor_types=section.get("minor_types", ("feat",)),
            major_types=section.get("major_types", ()),
        )

    def classify_commit(self, commit: Commit) -> CommitClassification:
        subject = commit.subject
        if MERGE_PATTERN.match(subject):
            return CommitClassification(sha=commit.sha, merge=True)

        match = CC_PATTERN.match(subject)
        if not match:
            return CommitClassification(sha=commit.sha)

        cc_type = match.group("type").lower()
        rest = commit.message.split("\n", 1)[1] if "\n" in commit.message else ""
        breaking = bool(match.group("breaking")) or bool(_BREAKING_FOOTER.search(rest))

        if breaking or cc_type in self.major_types:
            level = BumpLevel.MAJOR
        elif cc_type in self.minor_types:
            level = BumpLevel.MINOR
        else:
            level = BumpLevel.PATCH
        return CommitClassification(sha=commit.sha, level=level, type=cc_type, breaking=breaking)

    def classify(self, commits: Sequence[Commit]) -> Classification:
        entries = tuple(self.classify_commit(c) for c in commits)
        breakings = sum(1 for e in entries if e.breaking)
        features = sum(1 for e in entries if e.type in self.minor_types and not e.breaking)
        return Classification(commits=entries, reason=build_reason(breakings, features))
