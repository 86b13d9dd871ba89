from .engine import MinCache
from .models import CacheEntry

__all__ = ["MinCache", "CacheEntry"]
