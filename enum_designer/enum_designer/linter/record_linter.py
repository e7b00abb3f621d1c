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

"""Consistency linter for generated enum record files."""

from pathlib import Path

from ..exceptions import DeclarationParseError
from ..models.parsing.declaration_parser import parse_declaration
from ..models.parsing.definition_validator import validate_definition, validate_identifier
from .report import LintResult


class RecordLinter:
    """Checks that a record file still matches what the generator would write."""

    def __init__(self, extension: str = ".cs"):
        self.extension = extension

    def lint(self, file_path: Path, result: LintResult):
        """Lint one record file.

        Args:
            file_path: Path to the record file
            result: LintResult to add errors/warnings to
        """
        file_name = file_path.name
        if not file_name.endswith(self.extension):
            result.add_error(f"File does not have the record extension '{self.extension}'")
            return

        stem = file_name[:-len(self.extension)]
        stem_check = validate_identifier(stem)
        if not stem_check.ok:
            result.add_error(
                f"File name '{stem}' is not a valid type name: {stem_check.message}",
                reason=str(stem_check.reason),
            )

        try:
            content = file_path.read_text(encoding='utf-8')
        except OSError as e:
            result.add_error(f"Failed to read record: {e}")
            return

        try:
            definition = parse_declaration(content)
        except DeclarationParseError as e:
            result.add_error(f"Record is not a generated enum declaration: {e}")
            return

        if definition.name != stem:
            result.add_error(
                f"Declared type name '{definition.name}' does not match file name '{stem}'"
            )

        check = validate_definition(definition.name, definition.values, definition.namespace_str)
        if not check.ok:
            result.add_error(check.message, reason=str(check.reason))

        if not definition.values:
            result.add_warning(f"Enum '{definition.name}' declares no values")
