from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from github_content.errors import ConfigError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_FILE_EXTENSION = "obo"
DEFAULT_TIMEOUT = 60

# namespace attribute -> command line flag
REQUIRED_OPTIONS = (
    ("commit_payload", "--commit-payload"),
    ("owner", "--owner"),
    ("repository", "--repository"),
    ("folder", "--folder"),
)


@dataclass(frozen=True)
class PipelineConfig:
    owner: str
    repository: str
    output_folder: Path
    file_extensions: Tuple[str, ...] = (DEFAULT_FILE_EXTENSION,)
    api_url: str = DEFAULT_API_URL
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "PipelineConfig":
        """
        Build the run configuration from parsed CLI options.

        Missing required options raise ConfigError. The token and API base
        URL fall back to GITHUB_TOKEN / GITHUB_API_URL.
        """
        for attr, flag in REQUIRED_OPTIONS:
            value = getattr(args, attr, None)
            if value is None or not str(value).strip():
                raise ConfigError(f"required option {flag} is not set")

        # an empty suffix matches every path
        extensions = tuple(getattr(args, "file_extension", None) or [DEFAULT_FILE_EXTENSION])
        timeout = getattr(args, "timeout", None)
        if timeout is None:
            timeout = DEFAULT_TIMEOUT
        if timeout <= 0:
            raise ConfigError(f"--timeout must be positive, got {timeout}")
        token = getattr(args, "token", None) or os.getenv("GITHUB_TOKEN") or None
        api_url = (
            getattr(args, "api_url", None)
            or os.getenv("GITHUB_API_URL")
            or DEFAULT_API_URL
        )

        return cls(
            owner=args.owner.strip(),
            repository=args.repository.strip(),
            output_folder=Path(args.folder),
            file_extensions=extensions,
            api_url=api_url.rstrip("/"),
            token=token,
            timeout=timeout,
        )


__all__ = ["PipelineConfig", "DEFAULT_API_URL", "DEFAULT_FILE_EXTENSION"]
