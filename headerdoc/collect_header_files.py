"""Discover the header files to document under a source directory."""

import os
from pathlib import Path
from typing import Any


def collect_header_files(
    source_dir: Path,
    config: dict[str, Any],
) -> tuple[list[Path], list[OSError]]:
    """Walk ``source_dir`` and return matching headers plus any traversal errors.

    Traversal errors do not stop the walk; they are handed back so the caller can
    report them once at the end of the run.
    """
    sources = config.get("sources", {})
    extensions = {e.lower() for e in sources.get("extensions", [])}
    ignored = set(sources.get("ignore_files", []))

    errors: list[OSError] = []
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(source_dir, onerror=errors.append):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename in ignored:
                continue
            if Path(filename).suffix.lower() in extensions:
                found.append(Path(dirpath) / filename)
    return found, errors
