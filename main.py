"""Main orchestration script for generating header reference documentation."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate MDX reference pages from C++ headers.",
    )
    parser.add_argument("source_dir", help="Directory containing the headers")
    parser.add_argument("dest_dir", help="Directory receiving the .mdx pages")
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run the test suite before generating documentation",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and render without writing files",
    )
    parser.add_argument(
        "--jobs",
        type=int,
        help="Number of headers processed in parallel",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args(argv)

    root_dir = Path(__file__).parent
    python_exe = sys.executable

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([python_exe, "-m", "pytest", "-q"], cwd=root_dir)
        print("\nDevelopment checks passed. Proceeding with documentation generation.\n")

    print("--- Converting headers to MDX ---")
    cmd = [
        python_exe,
        "-m",
        "headerdoc.header_to_mdx",
        args.source_dir,
        args.dest_dir,
    ]
    if args.dry_run:
        cmd.append("--dry-run")
    if args.jobs:
        cmd.extend(["--jobs", str(args.jobs)])
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Documentation generated in {args.dest_dir}")


if __name__ == "__main__":
    main()
