from __future__ import annotations

from pathlib import Path
from typing import Optional

# Generated command docs live here, relative to the working directory
DOCS_DIRNAME = "docs"


def docs_dir(cwd: Optional[Path] = None) -> Path:
    base = Path.cwd() if cwd is None else Path(cwd)
    return base / DOCS_DIRNAME
