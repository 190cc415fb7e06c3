#!/usr/bin/env python3
"""Print the contents of SPLICE drum pattern files."""

from __future__ import annotations

import argparse
import glob
import json
from pathlib import Path
import sys
from typing import Iterable, List

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from splice.decoder import decode_file  # noqa: E402
from splice.errors import DecodeError  # noqa: E402
from splice.log_config import setup_logging  # noqa: E402


def collect_paths(patterns: Iterable[str]) -> List[Path]:
    paths: List[Path] = []
    for pattern in patterns:
        matches = sorted(Path(p) for p in glob.glob(pattern, recursive=True))
        if matches:
            paths.extend(matches)
        else:
            # Treat literal path when glob finds nothing.
            candidate = Path(pattern)
            if candidate.exists():
                paths.append(candidate)
    seen: set[Path] = set()
    unique_paths: List[Path] = []
    for path in paths:
        resolved = path.resolve()
        if resolved not in seen:
            seen.add(resolved)
            unique_paths.append(path)
    return unique_paths


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode .splice drum patterns and print them."
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="File paths or glob patterns (quotes recommended for wildcards).",
    )
    parser.add_argument(
        "--json", action="store_true", help="Emit one JSON document per file."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log decode offsets to stderr."
    )
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    targets = collect_paths(args.paths)
    if not targets:
        parser.error("No files matched the provided paths/patterns.")

    failures = 0
    for path in targets:
        try:
            pattern = decode_file(path)
        except (DecodeError, OSError) as exc:
            failures += 1
            print(f"ERR  {path}: {exc}")
            continue

        if args.json:
            payload = {"path": str(path), **pattern.to_dict()}
            print(json.dumps(payload))
        else:
            if len(targets) > 1:
                print(f"== {path}")
            sys.stdout.write(pattern.render())

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
