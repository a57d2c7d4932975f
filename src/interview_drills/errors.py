from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Raised when a limiter, task or runner is configured with values it
    cannot honour (non-positive window, concurrency limit below one, ...)."""
