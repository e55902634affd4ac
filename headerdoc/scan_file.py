"""Read one header from disk and scan it."""

import logging
from pathlib import Path
from typing import Any

from headerdoc.models import FileInfo
from headerdoc.scan_lines import scan_lines

logger = logging.getLogger(__name__)


def scan_file(path: Path, config: dict[str, Any] | None = None) -> FileInfo | None:
    """Scan the header at ``path``.

    Returns None when the file cannot be read; the caller skips it and moves on.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error opening file %s: %s", path, e)
        return None
    return scan_lines(text.splitlines(), path, config)
