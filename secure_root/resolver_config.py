"""Data model for the settings that drive a secure root lookup."""

from dataclasses import dataclass

from secure_root.match_policy import MatchPolicy


@dataclass(frozen=True)
class ResolverConfig:
    """Settings read once per lookup; empty values count as unset."""

    root_directory: str | None = None
    node_directory_override: str | None = None
    match_policy: MatchPolicy = MatchPolicy.EXACT
