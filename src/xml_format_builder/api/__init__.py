"""Integration layer for handing formatted output to other XML libraries."""

from .adapters import ConversionResult, LxmlAdapter

__all__ = ["ConversionResult", "LxmlAdapter"]
