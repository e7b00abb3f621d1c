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

"""Linter package for generated enum record files."""

from pathlib import Path
from typing import List, Union

from ..file_io.record_repository import normalize_extension
from .report import LintResult
from .record_linter import RecordLinter

__all__ = ['lint_files', 'lint_directory', 'LintResult']


def lint_files(file_paths: List[Path], extension: str = ".cs") -> List[LintResult]:
    """Lint a list of record files.

    Args:
        file_paths: List of file paths to lint
        extension: Record file extension

    Returns:
        List of LintResult objects, one per file
    """
    linter = RecordLinter(normalize_extension(extension))
    results = []
    for file_path in file_paths:
        result = LintResult(file_path)
        linter.lint(file_path, result)
        results.append(result)
    return results


def lint_directory(directory: Union[str, Path], extension: str = ".cs") -> List[LintResult]:
    """Lint every record directly inside ``directory``, sorted by file name."""
    extension = normalize_extension(extension)
    paths = sorted(p for p in Path(directory).iterdir() if p.is_file() and p.name.endswith(extension))
    return lint_files(paths, extension)
