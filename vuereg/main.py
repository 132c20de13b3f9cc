"""Compile .vue single-file components into registry scripts.

Walks a source tree, compiles every .vue file into a script that registers
the component on a global object, and writes it next to the source (or into
an output tree).

Usage:
    vuereg src/components                      # writes *.js beside each .vue
    vuereg src/components --out build          # mirror the tree into build/
    vuereg src/components --ext mjs            # custom target extension
    vuereg src/components --strict             # stop on the first bad file
    vuereg src/components --dry-run            # preview without writing
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence

from pydantic import ValidationError

from vuereg.config import Settings
from vuereg.engine.errors import CompileError
from vuereg.engine.pipeline import ProcessingPipeline
from vuereg.models.component import FailurePolicy
from vuereg.models.file import SourceFile
from vuereg.utils.logger import bind_run_context, get_logger, setup_logging

logger = get_logger(__name__)


# ── Discovery ────────────────────────────────────────────────────────────────


def discover_files(root: Path) -> Iterator[SourceFile]:
    """Yield every regular file below ``root`` in sorted order."""
    for path in sorted(root.rglob("*")):
        if path.is_file():
            yield SourceFile(path=path, base=root, contents=path.read_bytes())


# ── Output ───────────────────────────────────────────────────────────────────


def write_file(file: SourceFile, src_root: Path, out_root: Path) -> Path:
    """Write ``file`` under ``out_root`` at its path relative to ``src_root``."""
    dest = out_root / file.path.relative_to(src_root)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(file.contents)
    return dest


def print_summary(stats: dict[str, int], written: int, dry_run: bool) -> None:
    """Print final compile results."""
    verb = "would write" if dry_run else "written"
    print(
        f"compiled: {stats['compiled']}  skipped: {stats['skipped']}  "
        f"passed: {stats['passed']}  {verb}: {written}"
    )


# ── Main ─────────────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vuereg",
        description="Compile .vue components into global registry scripts",
    )
    parser.add_argument("src", type=Path, help="Directory containing .vue files")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory (default: write beside the sources)",
    )
    parser.add_argument(
        "--ext", default=None, help="Target extension, e.g. js, .mjs (default: js)"
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="Registry object to assign into (default: window.VueComponents)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first malformed .vue file instead of skipping it",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview what would be written without touching disk",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: info)")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.ext is not None:
        overrides["ext"] = args.ext
    if args.registry is not None:
        overrides["registry"] = args.registry
    if args.strict:
        overrides["on_error"] = FailurePolicy.FAIL
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return Settings(**overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    src: Path = args.src
    if not src.is_dir():
        parser.error(f"source directory not found: {src}")

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        problems = "; ".join(err["msg"] for err in e.errors())
        parser.error(f"invalid option: {problems}")

    setup_logging(settings.log_level)
    bind_run_context(src=str(src))

    out_root = args.out if args.out is not None else src
    pipeline = ProcessingPipeline(settings)
    written = 0

    try:
        for source in discover_files(src):
            file = pipeline.process_file(source)
            # Pass-through files only need copying into a separate output tree
            if args.out is None and file is source:
                continue
            if args.dry_run:
                logger.info("cli.would_write", path=str(out_root / file.relative))
            else:
                dest = write_file(file, src, out_root)
                logger.info("cli.written", path=str(dest))
            written += 1
    except CompileError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info("cli.complete", written=written, **pipeline.stats)
    print_summary(pipeline.stats, written, args.dry_run)
    return 0


if __name__ == "__main__":
    sys.exit(main())
