"""Search configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from wayfinder.constants import DEFAULT_MAX_HOPS, MAX_ROUTE_HOPS


@dataclass(frozen=True)
class SearchConfig:
    """Centralized configuration for route searches.

    Attributes:
        default_max_hops: Hop budget when a request does not give one
            (default: 3, never above MAX_ROUTE_HOPS)
        max_candidate_pools: Largest pool snapshot accepted per request.
            Neighbor lookup scans the whole snapshot, so this bounds the
            work of one search (default: 1,000)
    """

    default_max_hops: int = DEFAULT_MAX_HOPS
    max_candidate_pools: int = 1_000

    def __post_init__(self) -> None:
        if not 1 <= self.default_max_hops <= MAX_ROUTE_HOPS:
            raise ValueError(
                f"default_max_hops must be in [1, {MAX_ROUTE_HOPS}], got {self.default_max_hops}"
            )
        if self.max_candidate_pools < 1:
            raise ValueError(f"max_candidate_pools must be positive, got {self.max_candidate_pools}")

    @classmethod
    def from_env(cls) -> SearchConfig:
        """Build a config from environment variables.

        - WAYFINDER_DEFAULT_MAX_HOPS (default: 3)
        - WAYFINDER_MAX_CANDIDATE_POOLS (default: 1000)
        """
        return cls(
            default_max_hops=int(os.environ.get("WAYFINDER_DEFAULT_MAX_HOPS", DEFAULT_MAX_HOPS)),
            max_candidate_pools=int(os.environ.get("WAYFINDER_MAX_CANDIDATE_POOLS", "1000")),
        )


# Default configuration instance
DEFAULT_SEARCH_CONFIG = SearchConfig()
