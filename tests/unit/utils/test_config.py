"""Unit tests for CacheOptions."""

import dataclasses

import pytest

from mincache import CacheOptions, InvalidOptionsError


class TestCacheOptions:
    """Test option defaults, validation and merging."""

    def test_defaults(self):
        """Test the documented defaults."""
        options = CacheOptions()

        assert options.ttl_ms == 60_000
        assert options.max_size_kb == 10_240
        assert options.debug is False
        assert options.del_expired_ms == 10_000
        assert options.max_size_bytes == 10_240 * 1024

    @pytest.mark.parametrize("max_size_kb", [0, None])
    def test_budget_disabled(self, max_size_kb):
        """Test zero or missing budget disables eviction."""
        assert CacheOptions(max_size_kb=max_size_kb).max_size_bytes is None

    def test_options_are_immutable(self):
        """Test options cannot be mutated after construction."""
        options = CacheOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.ttl_ms = 1

    def test_merged_returns_new_instance(self):
        """Test merging overrides leaves the original untouched."""
        base = CacheOptions()
        merged = base.merged(ttl_ms=30_000, debug=True)

        assert merged.ttl_ms == 30_000
        assert merged.debug is True
        assert merged.max_size_kb == base.max_size_kb
        assert base.ttl_ms == 60_000
        assert base.debug is False

    def test_from_dict_accepts_camel_case(self):
        """Test the camelCase option names."""
        options = CacheOptions.from_dict(
            {"maxSizeKb": 5 * 1024, "delExpiredMs": 60_000, "ttlMs": 30_000, "debug": True}
        )

        assert options == CacheOptions(ttl_ms=30_000, max_size_kb=5120, debug=True, del_expired_ms=60_000)

    def test_from_dict_partial(self):
        """Test missing keys keep their defaults."""
        options = CacheOptions.from_dict({"ttl_ms": 1000})
        assert options.ttl_ms == 1000
        assert options.max_size_kb == 10_240

    def test_from_dict_empty(self):
        """Test an empty or missing mapping gives the defaults."""
        assert CacheOptions.from_dict({}) == CacheOptions()
        assert CacheOptions.from_dict(None) == CacheOptions()

    def test_from_dict_unknown_key(self):
        """Test unknown option names are rejected."""
        with pytest.raises(InvalidOptionsError, match="Unknown cache option: maxItems"):
            CacheOptions.from_dict({"maxItems": 10})

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"ttl_ms": -1},
            {"ttl_ms": "60"},
            {"ttl_ms": 1.5},
            {"max_size_kb": -5},
            {"del_expired_ms": True},
            {"debug": "yes"},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test malformed values are rejected at construction."""
        with pytest.raises(InvalidOptionsError):
            CacheOptions(**kwargs)

    def test_invalid_merge(self):
        """Test merging re-validates the result."""
        with pytest.raises(InvalidOptionsError):
            CacheOptions().merged(max_size_kb=-1)
