"""Predicate for deciding if a directory name identifies a node."""

from secure_root.match_policy import MatchPolicy


def name_matches(candidate: str, name: str, policy: MatchPolicy) -> bool:
    """Check if the directory name ``candidate`` matches ``name`` under ``policy``.

    Comparison is case-sensitive. Under prefix matching the candidate may be
    shorter than the name, e.g. ``talker`` matches ``talker_42``.
    """
    if policy is MatchPolicy.PREFIX:
        return bool(candidate) and name.startswith(candidate)
    return candidate == name
