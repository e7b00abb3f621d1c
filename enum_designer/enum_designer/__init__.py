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

"""Generate enum declaration files from validated names."""

from .config import EnumDesignerConfig
from .engine import CreateResult, EnumDesigner
from .exceptions import (
    DeclarationParseError,
    DefinitionFileError,
    DefinitionNotFoundError,
    EnumDesignerError,
    ValidationError,
)
from .models.definition import EnumDefinition, NamespacePath, WriteOutcome
from .models.parsing.definition_validator import (
    ValidationReason,
    ValidationResult,
    validate_definition,
)

__version__ = "0.1.0"

__all__ = [
    "CreateResult",
    "DeclarationParseError",
    "DefinitionFileError",
    "DefinitionNotFoundError",
    "EnumDefinition",
    "EnumDesigner",
    "EnumDesignerConfig",
    "EnumDesignerError",
    "NamespacePath",
    "ValidationError",
    "ValidationReason",
    "ValidationResult",
    "WriteOutcome",
    "validate_definition",
]
