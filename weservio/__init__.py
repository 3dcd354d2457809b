"""Buffered image input sources and output targets."""

__version__ = "0.1.0"
__all__ = ["source", "target"]