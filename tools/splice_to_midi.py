#!/usr/bin/env python3
"""Convert SPLICE drum patterns to Standard MIDI Files."""

from __future__ import annotations

import argparse
import glob
from pathlib import Path
import sys
from typing import Iterable, List

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from splice.decoder import decode_file  # noqa: E402
from splice.errors import DecodeError  # noqa: E402
from splice.log_config import setup_logging  # noqa: E402
from splice.midi_export import write_midi  # noqa: E402


def collect_paths(patterns: Iterable[str]) -> List[Path]:
    paths: List[Path] = []
    for pattern in patterns:
        matches = sorted(Path(p) for p in glob.glob(pattern, recursive=True))
        if matches:
            paths.extend(matches)
        else:
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
        description="Write a .mid file for each .splice pattern."
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="File paths or glob patterns (quotes recommended for wildcards).",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory for .mid output (default: next to each input).",
    )
    parser.add_argument(
        "--bars", type=int, default=1, help="Number of times to loop the pattern."
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.bars < 1:
        parser.error("--bars must be at least 1")

    targets = collect_paths(args.paths)
    if not targets:
        parser.error("No files matched the provided paths/patterns.")

    if args.out_dir is not None:
        args.out_dir.mkdir(parents=True, exist_ok=True)

    failures = 0
    for path in targets:
        out_dir = args.out_dir if args.out_dir is not None else path.parent
        out_path = out_dir / f"{path.stem}.mid"
        try:
            pattern = decode_file(path)
            write_midi(pattern, out_path, bars=args.bars)
        except (DecodeError, OSError, ValueError) as exc:
            failures += 1
            print(f"ERR  {path}: {exc}")
            continue
        print(f"OK   {path} -> {out_path} ({len(pattern.tracks)} tracks)")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
