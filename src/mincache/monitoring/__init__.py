from .metrics import CacheMetrics, Counter, Histogram

__all__ = ["CacheMetrics", "Counter", "Histogram"]
