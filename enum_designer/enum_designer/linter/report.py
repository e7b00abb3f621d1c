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

"""Error reporting for the record linter."""

from pathlib import Path
from typing import Any, Dict, List, Optional


class LintResult:
    """Container for linting results for a single record file."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, message: str, reason: Optional[str] = None):
        """Add an error message.

        Args:
            message: Error message
            reason: Optional validation reason tag
        """
        self.errors.append(self._entry(message, reason))

    def add_warning(self, message: str, reason: Optional[str] = None):
        self.warnings.append(self._entry(message, reason))

    @staticmethod
    def _entry(message: str, reason: Optional[str]) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if reason is not None:
            entry['reason'] = reason
        return entry

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'errors': self.errors,
            'warnings': self.warnings,
        }
