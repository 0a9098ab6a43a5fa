"""Tests for search configuration."""

import pytest

from wayfinder.config import DEFAULT_SEARCH_CONFIG, SearchConfig


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults(self):
        assert DEFAULT_SEARCH_CONFIG.default_max_hops == 3
        assert DEFAULT_SEARCH_CONFIG.max_candidate_pools == 1_000

    @pytest.mark.parametrize("max_hops", [0, 6, -1])
    def test_rejects_hop_budget_out_of_range(self, max_hops):
        with pytest.raises(ValueError, match="default_max_hops"):
            SearchConfig(default_max_hops=max_hops)

    def test_rejects_non_positive_pool_limit(self):
        with pytest.raises(ValueError, match="max_candidate_pools"):
            SearchConfig(max_candidate_pools=0)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_SEARCH_CONFIG.default_max_hops = 4  # type: ignore[misc]

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("WAYFINDER_DEFAULT_MAX_HOPS", "5")
        monkeypatch.setenv("WAYFINDER_MAX_CANDIDATE_POOLS", "50")

        config = SearchConfig.from_env()
        assert config.default_max_hops == 5
        assert config.max_candidate_pools == 50

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("WAYFINDER_DEFAULT_MAX_HOPS", raising=False)
        monkeypatch.delenv("WAYFINDER_MAX_CANDIDATE_POOLS", raising=False)
        assert SearchConfig.from_env() == SearchConfig()

    def test_from_env_validates(self, monkeypatch):
        monkeypatch.setenv("WAYFINDER_DEFAULT_MAX_HOPS", "9")
        with pytest.raises(ValueError):
            SearchConfig.from_env()
