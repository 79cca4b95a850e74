"""Typed errors for ngonkit."""


class NgonError(Exception):
    """Base error of the package."""


class DimensionMismatch(NgonError, ValueError):
    """Vertex count or embedding dimension does not match what was expected."""
