from __future__ import annotations

from github_content.ingest.fetch import GithubContentClient, decode_content
from github_content.ingest.pipeline import FetchedFile, matches_suffix, run_pipeline
from github_content.ingest.write import write_file

__all__ = [
    "GithubContentClient",
    "decode_content",
    "FetchedFile",
    "matches_suffix",
    "run_pipeline",
    "write_file",
]
