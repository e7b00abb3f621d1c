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

"""JSON Schema validation for YAML definition files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Optional

from jsonschema.validators import validator_for

JsonPointer = str

DEFINITION_FILE_SCHEMA = "definition_file.json"


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[JsonPointer] = None

    def __str__(self) -> str:
        if self.yaml_path:
            return f"{self.message} (yaml_path={self.yaml_path})"
        return self.message


def get_schema_path(schema_name: str = DEFINITION_FILE_SCHEMA) -> Path:
    return Path(__file__).parent.parent / "schema" / schema_name


@lru_cache(maxsize=None)
def load_schema(schema_name: str = DEFINITION_FILE_SCHEMA) -> dict:
    """Load a bundled JSON Schema.

    Raises:
        FileNotFoundError: If the schema file is not bundled with the package.
    """
    schema_path = get_schema_path(schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"JSON Schema not found: {schema_path}")
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def _pointer(path) -> JsonPointer:
    if not path:
        return ""
    return "/" + "/".join(str(p) for p in path)


def validate_against_schema(data: Any, json_schema_dict: Optional[dict] = None) -> List[SchemaIssue]:
    """Validate data against the definition-file schema.

    Every violation is reported, ordered by location in the document.
    """
    if not isinstance(data, dict):
        return [SchemaIssue(message="Root must be a mapping/object", yaml_path="")]

    schema = json_schema_dict if json_schema_dict is not None else load_schema()
    validator_cls = validator_for(schema)
    validator = validator_cls(schema)

    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    return [SchemaIssue(message=e.message, yaml_path=_pointer(e.absolute_path)) for e in errors]
