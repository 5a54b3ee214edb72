"""Unit tests for InMemoryParameterStore."""

import pytest

from param_cache.errors import ParameterFetchError, ParameterNotFoundError
from param_cache.fetch.base import InMemoryParameterStore


@pytest.mark.asyncio
class TestInMemoryParameterStore:
    """Test the dict-backed fetcher."""

    async def test_fetch_existing(self):
        """Test fetch existing."""
        store = InMemoryParameterStore({"service/parameter": "value"})

        assert await store.fetch("service/parameter") == "value"
        assert store.fetch_count == 1
        assert store.fetched == ["service/parameter"]

    async def test_fetch_missing_raises_not_found(self):
        """Test fetch missing raises not found."""
        store = InMemoryParameterStore()

        with pytest.raises(ParameterNotFoundError) as exc_info:
            await store.fetch("missing")

        assert isinstance(exc_info.value, ParameterFetchError)
        assert exc_info.value.parameter_name == "missing"
        assert store.fetch_count == 1

    async def test_put_and_delete(self):
        """Test put and delete."""
        store = InMemoryParameterStore()
        store.put("key", "v1")
        assert await store.fetch("key") == "v1"

        store.delete("key")
        store.delete("never-there")
        with pytest.raises(ParameterNotFoundError):
            await store.fetch("key")

    async def test_initial_mapping_is_copied(self):
        """Test initial mapping is copied."""
        initial = {"key": "v1"}
        store = InMemoryParameterStore(initial)
        initial["key"] = "changed"

        assert await store.fetch("key") == "v1"
