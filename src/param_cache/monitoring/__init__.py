from .metrics import (
    Counter,
    Histogram,
    param_cache_evictions_total,
    param_cache_fetch_failures_total,
    param_cache_fetch_latency_seconds,
    param_cache_lookups_total,
)

__all__ = [
    "Counter",
    "Histogram",
    "param_cache_lookups_total",
    "param_cache_fetch_failures_total",
    "param_cache_evictions_total",
    "param_cache_fetch_latency_seconds",
]
