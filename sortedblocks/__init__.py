"""Sorted arrays and block-split sorted lists searched by binary search, with timing runs."""

__version__ = "0.1.0"
__all__ = ["bsearch", "blocklist", "bench"]