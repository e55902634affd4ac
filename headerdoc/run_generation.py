"""Orchestration logic for turning a header tree into MDX reference pages."""

import argparse
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

from headerdoc.collect_header_files import collect_header_files
from headerdoc.keep_existing_markdown import keep_existing_markdown
from headerdoc.load_config import load_config
from headerdoc.output_file_for_header import output_file_for_header
from headerdoc.render_file_page import render_file_page
from headerdoc.scan_file import scan_file

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    source_dir: Path = args.source_dir
    if not source_dir.is_dir():
        msg = f"Source directory not found: {source_dir}"
        raise SystemExit(msg)

    config = load_config(args.config)
    headers, walk_errors = collect_header_files(source_dir, config)
    if not headers:
        msg = f"No header files found under: {source_dir}"
        raise SystemExit(msg)

    out_root = args.dest_dir.resolve()
    if not args.dry_run:
        out_root.mkdir(parents=True, exist_ok=True)

    written = _write_pages(headers, source_dir, out_root, config, args)

    if walk_errors:
        logger.warning(
            "Error walking through directory: %d entries could not be read (%s)",
            len(walk_errors),
            "; ".join(str(e) for e in walk_errors),
        )

    verb = "Would generate" if args.dry_run else "Generated"
    print(f"{verb} {len(written)} markdown files into: {out_root}")
    return 0


def _write_pages(
    headers: list[Path],
    source_dir: Path,
    out_root: Path,
    config: dict[str, Any],
    args: argparse.Namespace,
) -> list[Path]:
    """Process every header, in parallel when more than one job is requested."""
    jobs = max(1, getattr(args, "jobs", 1) or 1)

    def process(header: Path) -> Path | None:
        return process_header(
            header, source_dir, out_root, config, dry_run=args.dry_run
        )

    if jobs == 1 or len(headers) == 1:
        results = [process(h) for h in headers]
    else:
        # Scans share nothing; each task owns the FileInfo it builds.
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            results = list(executor.map(process, headers))
    return [r for r in results if r is not None]


def process_header(
    header: Path,
    source_dir: Path,
    out_root: Path,
    config: dict[str, Any],
    *,
    dry_run: bool = False,
) -> Path | None:
    """Scan, render and write the page for a single header.

    Returns the page path, or None when the header was skipped.
    """
    print(f"Processing file: {header.name}")
    info = scan_file(header, config)
    if info is None:
        return None
    if not info.declarations:
        print(f"No declarations found in file {header}")
        return None

    output_cfg = config.get("output", {})
    out_file = output_file_for_header(
        source_dir, header, out_root, output_cfg.get("extension", ".mdx")
    )
    kept, has_marker = keep_existing_markdown(
        out_file, output_cfg.get("marker", "## File Info")
    )
    md = render_file_page(info, config, kept, has_marker=has_marker)
    if dry_run:
        return out_file

    try:
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(md, encoding="utf-8")
    except OSError as e:
        logger.warning("Error creating output file %s: %s", out_file, e)
        return None
    print(f"Generated markdown file: {out_file}")
    return out_file
