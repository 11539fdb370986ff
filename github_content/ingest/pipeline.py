from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, Sequence, Tuple, Union

from github_content.config import PipelineConfig
from github_content.ingest.write import write_file
from github_content.payload import CommitDescriptor


class ContentFetcher(Protocol):
    def get_contents(self, owner: str, repo: str, path: str, ref: str) -> bytes:
        ...


@dataclass(frozen=True)
class FetchedFile:
    relative_path: str
    content: bytes


def matches_suffix(path: str, suffixes: Union[str, Tuple[str, ...]]) -> bool:
    """Case-sensitive check that `path` ends with the suffix (or any of them)."""
    return path.endswith(suffixes)


def fetch_file(
    client: ContentFetcher,
    config: PipelineConfig,
    commit: CommitDescriptor,
    path: str,
) -> FetchedFile:
    content = client.get_contents(config.owner, config.repository, path, commit.id)
    return FetchedFile(relative_path=path, content=content)


def run_pipeline(
    commits: Sequence[CommitDescriptor],
    config: PipelineConfig,
    client: ContentFetcher,
    logger: logging.Logger,
) -> List[Path]:
    """
    Download every modified file matching the configured suffixes:

      for each commit, for each modified path (in payload order):
        - skip it unless it ends with one of config.file_extensions
        - fetch its content at the commit's revision
        - write it into config.output_folder under its basename

    The first failure propagates and ends the run; files written before it
    are left in place. Returns the written paths in order.
    """
    written: List[Path] = []
    for commit in commits:
        for path in commit.modified:
            if not matches_suffix(path, config.file_extensions):
                logger.debug("skipped file %s from downloading", path)
                continue

            logger.debug("fetching %s at %s", path, commit.id)
            fetched = fetch_file(client, config, commit, path)
            written.append(
                write_file(config.output_folder, fetched.relative_path, fetched.content, logger)
            )

    return written


__all__ = ["run_pipeline", "matches_suffix", "fetch_file", "FetchedFile", "ContentFetcher"]
