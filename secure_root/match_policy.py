"""Policies for matching directory names against a node name."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class MatchPolicy(Enum):
    """How a candidate directory name is compared with the node name."""

    EXACT = "MATCH_EXACT"
    PREFIX = "MATCH_PREFIX"


def parse_match_policy(raw: str | None) -> MatchPolicy:
    """Parse a lookup type value, falling back to exact matching."""
    if not raw:
        return MatchPolicy.EXACT
    try:
        return MatchPolicy(raw)
    except ValueError:
        logger.warning("Unrecognized lookup type %r, using %s", raw, MatchPolicy.EXACT.value)
        return MatchPolicy.EXACT
