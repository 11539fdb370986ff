from __future__ import annotations


class GithubContentError(Exception):
    """Base class for every failure that aborts a run."""


class DecodeError(GithubContentError):
    """The commit payload is not valid JSON or not a list of commits."""


class FetchError(GithubContentError):
    """A file could not be retrieved from the API or its content decoded."""


class WriteError(GithubContentError):
    """A fetched file could not be written into the output folder."""


class ConfigError(GithubContentError):
    """A required option is missing or an option value is invalid."""


__all__ = [
    "GithubContentError",
    "DecodeError",
    "FetchError",
    "WriteError",
    "ConfigError",
]
