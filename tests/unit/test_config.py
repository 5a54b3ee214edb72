"""Unit tests for CacheConfig."""

import dataclasses

import pytest

from param_cache.config import DEFAULT_CACHE_ITEM_TTL, CacheConfig


class TestCacheConfig:
    """Test CacheConfig defaults and normalization."""

    def test_defaults(self):
        """Unset values resolve to capacity 1 and a 5 minute ttl."""
        config = CacheConfig()
        assert config.max_cache_size == 1
        assert config.cache_item_ttl == 300_000_000_000
        assert config.cache_item_ttl == DEFAULT_CACHE_ITEM_TTL
        assert config.ttl_seconds == 300.0

    def test_explicit_values_kept(self):
        """Test explicit values kept."""
        config = CacheConfig(max_cache_size=64, cache_item_ttl=30_000_000_000)
        assert config.max_cache_size == 64
        assert config.cache_item_ttl == 30_000_000_000

    @pytest.mark.parametrize("size", [0, -5, None])
    def test_invalid_capacity_becomes_one(self, size):
        """Zero, negative or missing capacity is normalized, never rejected."""
        assert CacheConfig(max_cache_size=size).max_cache_size == 1

    def test_zero_ttl_is_kept(self):
        """Test zero ttl is kept."""
        assert CacheConfig(cache_item_ttl=0).cache_item_ttl == 0

    def test_negative_ttl_uses_default(self):
        """Test negative ttl uses default."""
        assert CacheConfig(cache_item_ttl=-1).cache_item_ttl == DEFAULT_CACHE_ITEM_TTL

    def test_config_is_immutable(self):
        """Test config is immutable."""
        config = CacheConfig(max_cache_size=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_cache_size = 10  # type: ignore[misc]

    def test_fluent_copies(self):
        """with_* methods return a new normalized config; the source stays unchanged."""
        base = CacheConfig()
        tuned = base.with_max_cache_size(10).with_cache_item_ttl(5_000_000_000)

        assert tuned.max_cache_size == 10
        assert tuned.cache_item_ttl == 5_000_000_000
        assert base.max_cache_size == 1
        assert base.with_max_cache_size(0).max_cache_size == 1

    def test_from_dict_ignores_unknown_keys(self):
        """Test from dict ignores unknown keys."""
        config = CacheConfig.from_dict({"max_cache_size": 8, "cache_item_ttl": 1, "region": "ap-southeast-2"})
        assert config.max_cache_size == 8
        assert config.cache_item_ttl == 1

    def test_from_empty_dict(self):
        """Test from empty dict."""
        assert CacheConfig.from_dict({}) == CacheConfig()

    def test_numeric_strings_are_parsed(self):
        """Test numeric strings from text settings are read as ints."""
        config = CacheConfig.from_dict({"max_cache_size": "8", "cache_item_ttl": "1000"})
        assert config.max_cache_size == 8
        assert config.cache_item_ttl == 1000

    @pytest.mark.parametrize("bad", ["eight", float("nan"), float("inf"), [], True])
    def test_unreadable_values_use_defaults(self, bad):
        """Test values that are not numbers fall back to defaults instead of raising."""
        config = CacheConfig(max_cache_size=bad, cache_item_ttl=bad)
        assert config.max_cache_size == 1
        assert config.cache_item_ttl == DEFAULT_CACHE_ITEM_TTL

    def test_float_ttl_is_truncated(self):
        """Test a finite float ttl is truncated to whole nanoseconds."""
        assert CacheConfig(cache_item_ttl=1.9).cache_item_ttl == 1
