#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for linting generated enum records."""

import argparse
import json
import sys
from pathlib import Path
from typing import List

from ..config import EnumDesignerConfig
from ..file_io.record_repository import normalize_extension
from . import LintResult, lint_files


def find_record_files(paths: List[str], extension: str) -> List[Path]:
    """Find record files in the given files or directories (non-recursive)."""
    record_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            if path.name.endswith(extension):
                record_files.append(path)
            else:
                print(f"Warning: File does not match record pattern: {path}", file=sys.stderr)
        elif path.is_dir():
            record_files.extend(
                p for p in path.iterdir() if p.is_file() and p.name.endswith(extension)
            )
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(record_files))


def format_results(results: List[LintResult], output_format: str) -> str:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [r.to_dict() for r in results],
        }
        return json.dumps(output, indent=2)

    lines = []
    if output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                lines.append(f"::error file={result.file_path},line=1::{error['message']}")
            for warning in result.warnings:
                lines.append(f"::warning file={result.file_path},line=1::{warning['message']}")
        return "\n".join(lines)

    for result in results:
        if result.errors or result.warnings:
            lines.append(f"\n{result.file_path}:")
            for error in result.errors:
                lines.append(f"  ERROR: {error['message']}")
            for warning in result.warnings:
                lines.append(f"  WARNING: {warning['message']}")
    return "\n".join(lines)


def main(argv: List[str] | None = None) -> int:
    """Main entry point for the linter CLI."""
    config = EnumDesignerConfig.from_env()

    parser = argparse.ArgumentParser(description='Lint generated enum record files')
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help=f'Record files or directories to lint (default: {config.output_dir})',
    )
    parser.add_argument(
        '--extension',
        type=normalize_extension,
        default=config.file_extension,
        help=f'Record file extension (default: {config.file_extension})',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )

    args = parser.parse_args(argv)
    paths = args.paths or [config.output_dir]

    record_files = find_record_files(paths, args.extension)
    if not record_files:
        print("No enum record files found.", file=sys.stderr)
        return 1

    results = lint_files(record_files, args.extension)
    output = format_results(results, args.format)
    if output:
        print(output)

    if any(r.errors for r in results):
        return 1
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
