"""Utility module for resilience patterns."""

from .resilience import CircuitBreaker, CircuitBreakerConfig, CircuitState, with_retries, with_timeout

__all__ = [
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitState",
    "with_retries",
    "with_timeout",
]
