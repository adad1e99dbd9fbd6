import pytest

from learnhub.config import Settings
from learnhub.core import _build_cache
from learnhub.infrastructure.cache import MemoryCache, NullCache


def test_set_get_delete() -> None:
    cache = MemoryCache(maxsize=10, ttl=60)

    cache.set("published_content_all", ["a"])
    cache.set("published_content_1", ["b"])

    assert cache.get("published_content_all") == ["a"]
    cache.delete("published_content_all", "published_content_missing")
    assert cache.get("published_content_all") is None
    assert cache.get("published_content_1") == ["b"]


def test_clear() -> None:
    cache = MemoryCache(maxsize=10, ttl=60)
    cache.set("a", 1)

    cache.clear()

    assert len(cache) == 0


def test_entries_expire_after_ttl() -> None:
    now = [0.0]
    cache = MemoryCache(maxsize=10, ttl=5, timer=lambda: now[0])
    cache.set("a", 1)

    now[0] = 4.9
    assert cache.get("a") == 1
    now[0] = 5.1
    assert cache.get("a") is None


def test_size_is_bounded() -> None:
    cache = MemoryCache(maxsize=2, ttl=60)

    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("c", 3)

    assert len(cache) == 2
    assert cache.get("c") == 3


def test_null_cache_never_stores() -> None:
    cache = NullCache()
    cache.set("a", 1)

    assert cache.get("a") is None


def test_cache_follows_settings() -> None:
    enabled = _build_cache(Settings(CACHE_ENABLED=True, CACHE_TTL=10, CACHE_MAX_ITEMS=3))
    disabled = _build_cache(Settings(CACHE_ENABLED=False))

    assert isinstance(enabled, MemoryCache)
    assert isinstance(disabled, NullCache)


@pytest.mark.parametrize("field", ["CACHE_TTL", "CACHE_MAX_ITEMS"])
def test_cache_sizing_must_be_positive(field: str) -> None:
    with pytest.raises(ValueError, match="must be a positive integer"):
        Settings(**{field: 0})
