"""Combine per-commit classifications into one bump recommendation."""

from __future__ import annotations

import logging
from typing import Sequence

from prbump_core.classifier import CommitClassifier
from prbump_core.errors import ClassificationError
from prbump_core.models import BumpLevel, Commit, CommitStats, Recommendation

logger = logging.getLogger(__name__)


def recommend(commits: Sequence[Commit], classifier: CommitClassifier) -> Recommendation:
    """Return the recommended bump for exactly the given commits.

    Classifier entries for commits outside ``commits`` are discarded, so a
    classifier that walks more history than the PR cannot skew the result.
    A fully non-compliant commit set still yields a Recommendation; see
    is_non_compliant() for the rejection rule.
    """
    try:
        classification = classifier.classify(commits)
    except ClassificationError:
        raise
    except Exception as e:
        raise ClassificationError(f"Commit classification failed: {e}") from e

    wanted = {c.sha for c in commits}
    entries = [e for e in classification.commits if e.sha in wanted]
    dropped = len(classification.commits) - len(entries)
    if dropped:
        logger.debug("Ignoring %d classified commit(s) outside the pull request", dropped)

    level = min((e.level for e in entries), default=BumpLevel.NONE)
    stats = CommitStats(
        commits=len(entries),
        unset=sum(1 for e in entries if e.unset),
        merge=sum(1 for e in entries if e.merge),
    )
    return Recommendation(level=level, reason=classification.reason, stats=stats)


def is_non_compliant(stats: CommitStats) -> bool:
    """True when every analysed commit is either unconventional or a merge."""
    return stats.commits > 0 and stats.unset + stats.merge >= stats.commits
