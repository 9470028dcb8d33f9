"""Scan a lookup base for the directory that best matches a node name."""

import logging
from pathlib import Path

from secure_root.match_policy import MatchPolicy
from secure_root.name_matches import name_matches

logger = logging.getLogger(__name__)


def find_matching_directory(base: Path, name: str, policy: MatchPolicy) -> str | None:
    """Return the child directory name of ``base`` that identifies ``name``.

    Only immediate subdirectories are considered. When several children
    match under prefix matching, the longest one wins, then the
    lexicographically smallest, so the result never depends on the order the
    filesystem lists entries in.
    """
    matches = [
        entry.name
        for entry in base.iterdir()
        if entry.is_dir() and name_matches(entry.name, name, policy)
    ]
    if not matches:
        return None
    matches.sort(key=lambda candidate: (-len(candidate), candidate))
    if len(matches) > 1:
        logger.debug("Several directories in %s match %r: %s", base, name, matches)
    return matches[0]
