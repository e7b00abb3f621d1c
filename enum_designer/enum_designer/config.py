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

"""Configuration management for the enum designer."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .file_io.record_repository import normalize_extension
from .utils.logging_utils import configure_split_stream_logging

DEFAULT_NAMESPACE = "CC.Enum"
DEFAULT_OUTPUT_DIR = "Enums"
DEFAULT_EXTENSION = ".cs"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class EnumDesignerConfig:
    """Configuration for one enum designer instance."""
    output_dir: str = DEFAULT_OUTPUT_DIR
    default_namespace: str = DEFAULT_NAMESPACE
    file_extension: str = DEFAULT_EXTENSION
    allow_empty_values: bool = True
    create_output_dir: bool = True
    hook_root: Optional[str] = None
    log_level: str = "INFO"
    print_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.file_extension = normalize_extension(self.file_extension)

    @classmethod
    def from_env(cls) -> 'EnumDesignerConfig':
        """Create configuration from environment variables."""
        return cls(
            output_dir=os.getenv('ENUM_DESIGNER_OUTPUT_DIR', DEFAULT_OUTPUT_DIR),
            default_namespace=os.getenv('ENUM_DESIGNER_NAMESPACE', DEFAULT_NAMESPACE),
            file_extension=os.getenv('ENUM_DESIGNER_EXTENSION') or DEFAULT_EXTENSION,
            allow_empty_values=_env_flag('ENUM_DESIGNER_ALLOW_EMPTY_VALUES', True),
            create_output_dir=_env_flag('ENUM_DESIGNER_CREATE_OUTPUT_DIR', True),
            hook_root=os.getenv('ENUM_DESIGNER_HOOK_ROOT') or None,
            log_level=os.getenv('ENUM_DESIGNER_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('ENUM_DESIGNER_PRINT_LEVEL', 'WARNING'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(
            level=self.log_level, stderr_level=self.print_level, formatter=formatter
        )

        return logging.getLogger('enum_designer')
