"""Unit tests for the cache module."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from finchat.cache import (
    CacheKey,
    CacheStore,
    InMemoryCacheStore,
    create_cache_store,
)


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def counting_compute(value="value"):
    calls = []

    async def compute():
        calls.append(1)
        return value

    return compute, calls


class TestCacheStoreInterface:
    """Tests for the abstract CacheStore interface."""

    def test_store_is_abstract(self):
        """Test that CacheStore cannot be instantiated directly."""
        with pytest.raises(TypeError):
            CacheStore()  # type: ignore


class TestCacheKey:
    """Tests for CacheKey model."""

    def test_keys_with_same_fields_are_equal(self):
        """Test that keys compare and hash by value."""
        a = CacheKey(namespace="balance_sheet", entity_id="fam-1", version="v1")
        b = CacheKey(namespace="balance_sheet", entity_id="fam-1", version="v1")

        assert a == b
        assert hash(a) == hash(b)

    def test_params_distinguish_keys(self):
        """Test that qualifiers keep computations apart."""
        a = CacheKey(namespace="income_statement", entity_id="fam-1", version="v1", params=("current_month",))
        b = CacheKey(namespace="income_statement", entity_id="fam-1", version="v1", params=("last_30_days",))

        assert a != b

    def test_str_joins_fields(self):
        """Test the readable form of a key."""
        key = CacheKey(namespace="budget", entity_id="fam-1", version="v2", params=("2025-06-01",))
        assert str(key) == "budget:fam-1:v2:2025-06-01"

    @given(st.text(), st.text(), st.text(), st.text())
    def test_version_change_changes_key(self, namespace, entity_id, version, other):
        """Property test: keys differing only in version are different."""
        a = CacheKey(namespace=namespace, entity_id=entity_id, version=version)
        b = CacheKey(namespace=namespace, entity_id=entity_id, version=other)
        assert (a == b) == (version == other)


class TestInMemoryCacheStore:
    """Tests for InMemoryCacheStore."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def store(self, clock):
        return InMemoryCacheStore(clock=clock)

    @pytest.fixture
    def key(self):
        return CacheKey(namespace="balance_sheet", entity_id="fam-1", version="v1")

    @pytest.mark.asyncio
    async def test_miss_computes_and_stores(self, store, key):
        """Test that a miss runs compute once and stores the value."""
        compute, calls = counting_compute(42)

        assert await store.fetch_or_compute(key, 60, compute) == 42
        assert len(calls) == 1
        assert store.get(key) == 42

    @pytest.mark.asyncio
    async def test_hit_within_ttl_skips_compute(self, store, clock, key):
        """Test that a live entry is served without recomputing."""
        compute, calls = counting_compute()

        await store.fetch_or_compute(key, 60, compute)
        clock.now += 59
        await store.fetch_or_compute(key, 60, compute)

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_entry_expires_at_ttl(self, store, clock, key):
        """Test that an entry is not served at or past its TTL."""
        compute, calls = counting_compute()

        await store.fetch_or_compute(key, 60, compute)
        clock.now += 60

        assert store.get(key) is None
        await store.fetch_or_compute(key, 60, compute)
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_version_change_misses_before_ttl(self, store, key):
        """Test that a new version token recomputes even within TTL."""
        compute, calls = counting_compute()

        await store.fetch_or_compute(key, 60, compute)
        await store.fetch_or_compute(key.model_copy(update={"version": "v2"}), 60, compute)

        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_none_values_are_cached(self, store, key):
        """Test that a computed None still counts as a hit."""
        compute, calls = counting_compute(None)

        await store.fetch_or_compute(key, 60, compute)
        await store.fetch_or_compute(key, 60, compute)

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_compute_errors_are_not_cached(self, store, key):
        """Test that a failing compute leaves no entry behind."""
        async def failing():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await store.fetch_or_compute(key, 60, failing)

        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_superseded_versions_do_not_accumulate(self, store, clock, key):
        """Test that expired entries under old version tokens are dropped on write."""
        compute, _ = counting_compute()

        for version in range(1000):
            await store.fetch_or_compute(key.model_copy(update={"version": str(version)}), 60, compute)
            clock.now += 60

        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_live_entries_bounded_by_max_entries(self, clock):
        """Test least recently used entries are evicted beyond the cap."""
        store = InMemoryCacheStore(clock=clock, max_entries=3)
        compute, calls = counting_compute()
        keys = [CacheKey(namespace="budget", entity_id=f"fam-{i}", version="v1") for i in range(4)]

        for k in keys[:3]:
            await store.fetch_or_compute(k, 60, compute)
        await store.fetch_or_compute(keys[0], 60, compute)
        await store.fetch_or_compute(keys[3], 60, compute)

        assert len(store) == 3
        assert store.get(keys[1]) is None
        assert store.get(keys[0]) == "value"
        assert len(calls) == 4

    def test_max_entries_must_be_positive(self):
        """Test that an empty store size is rejected."""
        with pytest.raises(ValueError, match="max_entries"):
            InMemoryCacheStore(max_entries=0)


class TestCacheFactory:
    """Tests for cache store factory."""

    def test_create_memory_store(self):
        """Test creating the in-memory store via factory."""
        store = create_cache_store("memory")

        assert isinstance(store, InMemoryCacheStore)
        assert store.backend_type == "memory"

    def test_unknown_backend_raises(self):
        """Test that unknown backends are rejected."""
        with pytest.raises(ValueError, match="Unsupported cache backend"):
            create_cache_store("redis")
