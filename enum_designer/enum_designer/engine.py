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

"""Entry point used by user-facing front ends to create, list and delete enums."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .config import EnumDesignerConfig
from .file_io.declaration_renderer import DeclarationRenderer
from .file_io.record_repository import RecordHook, RecordRepository
from .models.definition import EnumDefinition, WriteOutcome
from .models.parsing.declaration_parser import parse_declaration
from .models.parsing.definition_validator import ValidationResult, validate_definition
from .models.parsing.yaml_parser import definition_file_parser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateResult:
    """Outcome of one create request.

    ``outcome`` and ``path`` are only set when validation passed and the
    record was written.
    """

    name: str
    validation: ValidationResult
    outcome: Optional[WriteOutcome] = None
    path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return self.validation.ok and self.outcome is not None


class EnumDesigner:
    """Validates, renders and stores enum definitions."""

    def __init__(
        self,
        config: Optional[EnumDesignerConfig] = None,
        hook: Optional[RecordHook] = None,
        renderer: Optional[DeclarationRenderer] = None,
        repository: Optional[RecordRepository] = None,
    ):
        self.config = config or EnumDesignerConfig()
        self.renderer = renderer or DeclarationRenderer()
        self.repository = repository or RecordRepository(
            self.config.output_dir,
            extension=self.config.file_extension,
            hook=hook,
            hook_root=self.config.hook_root,
        )
        if self.config.create_output_dir:
            self.repository.ensure_directory()

    def validate(
        self, name: str, values: Sequence[str], namespace: Optional[str] = None
    ) -> ValidationResult:
        if namespace is None:
            namespace = self.config.default_namespace
        return validate_definition(
            name, values, namespace, allow_empty_values=self.config.allow_empty_values
        )

    def create(
        self, name: str, values: Iterable[str], namespace: Optional[str] = None
    ) -> CreateResult:
        """Validate, render and write one enum.

        Nothing touches the filesystem unless validation passes. An existing
        record with the same name is replaced.
        """
        values = tuple(values or ())
        if namespace is None:
            namespace = self.config.default_namespace

        validation = self.validate(name, values, namespace)
        if not validation.ok:
            logger.warning(f"Rejected enum '{name}': {validation.reason} ({validation.message})")
            return CreateResult(name=name, validation=validation)

        definition = EnumDefinition.from_input(name, values, namespace)
        content = self.renderer.render(definition)
        outcome = self.repository.write(definition.name, content)
        return CreateResult(
            name=name,
            validation=validation,
            outcome=outcome,
            path=self.repository.path_for(definition.name),
        )

    def delete(self, name: str) -> Path:
        return self.repository.delete(name)

    def list_definitions(self, sort: bool = False) -> List[str]:
        names = self.repository.list_names()
        return sorted(names) if sort else names

    def read_definition(self, name: str) -> EnumDefinition:
        return parse_declaration(self.repository.read(name))

    def apply_file(self, file_path: Union[str, Path]) -> List[CreateResult]:
        """Create every enum listed in a YAML definition file.

        Entries are processed in order; an entry that fails validation is
        reported in its result and does not stop the rest.
        """
        entries = definition_file_parser.load(file_path)
        logger.info(f"Applying {len(entries)} definition(s) from {file_path}")
        return [self.create(entry.name, entry.values, entry.namespace) for entry in entries]
