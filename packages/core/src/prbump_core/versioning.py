"""Apply a bump level to the last released tag."""

from __future__ import annotations

import logging
import re

import semver

from prbump_core.models import BumpLevel, VersionPair

logger = logging.getLogger(__name__)

# Calendar versioning (2024.03, 2024.3.1, …). Proposing a semver bump on top of
# a date-based scheme would be meaningless, so such tags get no target.
_CALVER_RE = re.compile(r"^\d{4}\.\d{1,2}(?:\.|$)")


def strip_tag(tag: str, prefix: str = "") -> str:
    """Drop the configured prefix and a leading ``v``/``=`` from a tag."""
    tag = tag.strip()
    if prefix and tag.startswith(prefix):
        tag = tag[len(prefix) :]
    return tag.lstrip("v=")


def parse_version(tag: str, prefix: str = "") -> semver.Version | None:
    """Parse a tag as a semantic version, or return None for other tagging schemes."""
    candidate = strip_tag(tag, prefix)
    if _CALVER_RE.match(candidate):
        logger.debug("Tag %s follows calendar versioning; skipping semver bump", tag)
        return None
    try:
        return semver.Version.parse(candidate)
    except ValueError:
        logger.debug("Tag %s is not a semantic version; skipping semver bump", tag)
        return None


def compute_target(tag: str, level: BumpLevel, prefix: str = "") -> VersionPair:
    parsed = parse_version(tag, prefix)
    if parsed is None:
        return VersionPair(last_version=tag, target_version=None)

    last = parsed.replace(build=None)
    release_type = level.release_type
    target = str(getattr(last, f"bump_{release_type}")()) if release_type else None
    return VersionPair(last_version=str(last), target_version=target)
