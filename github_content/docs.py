from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from github_content.errors import WriteError
from github_content.paths import docs_dir


def _option_rows(parser: argparse.ArgumentParser) -> List[str]:
    rows = ["| Option | Default | Description |", "|---|---|---|"]
    for action in parser._actions:
        if not action.option_strings:
            continue
        flags = ", ".join(f"`{s}`" for s in action.option_strings)
        default = action.default
        if default in (None, False, argparse.SUPPRESS):
            shown = ""
        elif isinstance(default, (list, tuple)):
            shown = " ".join(str(d) for d in default)
        else:
            shown = str(default)
        help_text = (action.help or "").replace("|", "\\|")
        rows.append(f"| {flags} | {shown} | {help_text} |")
    return rows


def render_markdown(parser: argparse.ArgumentParser) -> str:
    """Markdown page for a parser: synopsis, usage block and option table."""
    lines = [
        f"## {parser.prog}",
        "",
        parser.description or "",
        "",
        "### Synopsis",
        "",
    ]
    if parser.epilog:
        lines += [parser.epilog, ""]
    lines += [
        "```",
        parser.format_usage().strip(),
        "```",
        "",
        "### Options",
        "",
    ]
    lines += _option_rows(parser)
    lines.append("")
    return "\n".join(lines)


def generate_docs(parser: argparse.ArgumentParser, cwd: Path | None = None) -> Path:
    """
    Write <cwd>/docs/<prog>.md and return the docs directory.
    """
    out_dir = docs_dir(cwd)
    page = out_dir / f"{parser.prog.replace(' ', '_')}.md"
    try:
        out_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
        page.write_text(render_markdown(parser), encoding="utf-8")
    except OSError as e:
        raise WriteError(f"error in writing docs to {out_dir}: {e}") from e
    return out_dir


__all__ = ["generate_docs", "render_markdown"]
