"""TriangleSight — triangle classification and canvas layout."""

__version__ = "0.1.0"
