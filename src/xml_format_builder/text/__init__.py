"""Text helpers used when joining content lines."""

from .normalize import normalize_space

__all__ = ["normalize_space"]
