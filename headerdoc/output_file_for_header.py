"""Utility for determining the output file path for a header."""

from pathlib import Path


def output_file_for_header(
    source_root: Path,
    header: Path,
    out_root: Path,
    extension: str = ".mdx",
) -> Path:
    """Mirror ``header``'s location below ``source_root`` into ``out_root``."""
    # Source/Tasks/FlowPilotTask.h -> out_root/Tasks/FlowPilotTask.mdx
    try:
        rel = header.relative_to(source_root)
    except ValueError:
        rel = Path(header.name)
    return out_root / rel.with_suffix(extension)
