from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from github_content.config import DEFAULT_FILE_EXTENSION, DEFAULT_TIMEOUT, PipelineConfig
from github_content.docs import generate_docs
from github_content.errors import GithubContentError
from github_content.ingest import GithubContentClient, run_pipeline
from github_content.logging_config import configure_logging
from github_content.payload import decode_commits

PROG = "github-content"


# -----------------------------
# Commands
# -----------------------------
def cmd_doc(parser: argparse.ArgumentParser) -> None:
    """
    Write markdown usage docs into ./docs and stop.
    """
    out_dir = generate_docs(parser)
    print(f"created markdown docs in {out_dir}")


def cmd_download(args: argparse.Namespace) -> None:
    """
    Decode the commit payload and download every matching modified file
    into the output folder.
    """
    config = PipelineConfig.from_args(args)
    logger = configure_logging(
        level=args.log_level,
        fmt=args.log_format,
        log_file=args.log_file,
    )

    commits = decode_commits(args.commit_payload)
    logger.debug(
        "decoded %d commit(s) for %s/%s", len(commits), config.owner, config.repository
    )

    client = GithubContentClient(
        token=config.token,
        api_url=config.api_url,
        timeout=config.timeout,
    )
    run_pipeline(commits, config, client, logger)


# -----------------------------
# Argparse wiring
# -----------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="cli to download modified files from github commit",
        epilog=(
            "Extracts the list of modified files from the commits of a push "
            "event and downloads them using the github api."
        ),
    )
    p.add_argument(
        "--doc",
        action="store_true",
        help="generate markdown documentation",
    )
    p.add_argument(
        "-c",
        "--commit-payload",
        help="commit data that is received from GitHub after triggered by a push event[required]",
    )
    p.add_argument(
        "-o",
        "--owner",
        help="github repository owner[required]",
    )
    p.add_argument(
        "-r",
        "--repository",
        help="github repository name[required]",
    )
    p.add_argument(
        "-f",
        "--folder",
        help="output folder[required]",
    )
    p.add_argument(
        "-p",
        "--file-extension",
        nargs="+",
        default=[DEFAULT_FILE_EXTENSION],
        help="file extension(s) that will be screened in the commit payload",
    )
    p.add_argument(
        "--log-level",
        default="error",
        help="log level for the application (debug, info, warning, error, critical)",
    )
    p.add_argument(
        "--log-format",
        default="json",
        choices=["json", "text"],
        help="format of the logging out, either of json or text",
    )
    p.add_argument(
        "--log-file",
        help="file for log output other than standard output",
    )
    p.add_argument(
        "--token",
        help="github api token (default: $GITHUB_TOKEN)",
    )
    p.add_argument(
        "--api-url",
        help="github api base url (default: $GITHUB_API_URL or https://api.github.com)",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="seconds to wait for each github api response",
    )
    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.doc:
            cmd_doc(parser)
            return
        cmd_download(args)
    except GithubContentError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
