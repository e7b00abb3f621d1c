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

"""YAML definition file loader."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from ..definition_schema import validate_against_schema
from ...exceptions import DefinitionFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefinitionEntry:
    """One unvalidated entry of a definition file."""

    name: str
    values: Tuple[str, ...]
    namespace: Optional[str] = None


class DefinitionFileParser:
    """Loads and structurally checks ``enums:`` YAML documents.

    Identifier rules are left to the definition validator so that batch input
    reports the same reasons as single creates.
    """

    def load(self, file_path: Union[str, Path]) -> List[DefinitionEntry]:
        """Load a definition file.

        Args:
            file_path: Path to the YAML file

        Returns:
            Entries in document order, each with its effective namespace

        Raises:
            DefinitionFileError: If the file cannot be read, parsed or fails the schema
        """
        path = Path(file_path)

        if not path.exists():
            raise DefinitionFileError(f"Definition file not found: {path}")

        if not path.is_file():
            raise DefinitionFileError(f"Path is not a file: {path}")

        logger.debug(f"Loading definition file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DefinitionFileError(f"Failed to read definition file {path}: {exc}") from exc

        return self.load_from_string(content, source=str(path))

    def load_from_string(self, content: str, source: str = "<string>") -> List[DefinitionEntry]:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DefinitionFileError(f"Failed to parse YAML {source}: {exc}") from exc

        if data is None:
            data = {}

        issues = validate_against_schema(data)
        if issues:
            details = "\n".join(f"  - {issue}" for issue in issues)
            raise DefinitionFileError(f"Schema validation failed for {source}:\n{details}")

        return self._to_entries(data)

    @staticmethod
    def _to_entries(data: Dict[str, Any]) -> List[DefinitionEntry]:
        default_namespace = data.get("namespace")
        entries = []
        for item in data.get("enums", []):
            entries.append(
                DefinitionEntry(
                    name=item["name"],
                    values=tuple(item["values"]),
                    namespace=item.get("namespace", default_namespace),
                )
            )
        return entries


definition_file_parser = DefinitionFileParser()
