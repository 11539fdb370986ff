"""Download files modified by a GitHub push into a local folder."""

__version__ = "0.1.0"
