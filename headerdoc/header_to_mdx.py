"""Generate MDX reference pages from annotated Unreal-style C++ headers.

Each header under the source directory is scanned in a single pass for documented
classes, structs and enums, and written as one ``.mdx`` page into the destination
directory. Hand-written text above the ``## File Info`` marker of an existing page
is preserved.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from headerdoc.run_generation import run_generation


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    ap = argparse.ArgumentParser(
        description="Convert annotated C++ headers to MDX reference pages.",
    )
    ap.add_argument(
        "source_dir",
        type=Path,
        help="Directory scanned recursively for header files",
    )
    ap.add_argument(
        "dest_dir",
        type=Path,
        help="Output directory for the generated pages",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Number of headers processed in parallel (default: 1)",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and render without writing any page",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generation process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
