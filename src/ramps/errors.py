from __future__ import annotations

"""Exception types raised by the ramps package."""


class ConfigError(ValueError):
    """Raised when a palette configuration or a raw color is malformed.

    Detected eagerly, before any generation work begins. Values are never
    silently clamped at this boundary.
    """


__all__ = ["ConfigError"]
