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

"""Custom exceptions for the Enum Designer system."""


class EnumDesignerError(Exception):
    """Base exception for enum-designer related errors."""
    pass


class ValidationError(EnumDesignerError):
    """Exception raised when a proposed definition breaks the identifier rules."""

    def __init__(self, reason, subject=None, message=None):
        self.reason = reason
        self.subject = subject
        super().__init__(message or str(reason))


class DefinitionNotFoundError(EnumDesignerError):
    """Exception raised when a named definition record does not exist."""

    def __init__(self, name, path=None):
        self.name = name
        self.path = path
        super().__init__(f"The specified definition does not exist: '{name}'")


class DeclarationParseError(EnumDesignerError):
    """Exception raised when a record does not hold a recognizable declaration."""
    pass


class DefinitionFileError(EnumDesignerError):
    """Exception raised for unreadable or malformed definition files."""
    pass
