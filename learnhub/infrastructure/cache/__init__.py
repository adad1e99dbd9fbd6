from .memory_cache import MemoryCache, NullCache

__all__ = ["MemoryCache", "NullCache"]
