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

"""Identifier and value-set validation for enum definitions.

Validation never raises. It returns a :class:`ValidationResult` that is either
successful or tagged with the first :class:`ValidationReason` found.

Rule classes are applied one at a time across *all* inputs (value names, then
namespace segments, then the type name) before the next rule class is tried,
so an empty segment is reported ahead of a non-alphanumeric value even when the
value comes first in the scan.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from ..definition import NAMESPACE_DELIMITER
from ...exceptions import ValidationError


class ValidationReason(str, Enum):
    EMPTY_OR_WHITESPACE = "EmptyOrWhitespace"
    MUST_START_WITH_LETTER = "MustStartWithLetter"
    NOT_ALPHANUMERIC = "NotAlphanumeric"
    DUPLICATE_VALUE = "DuplicateValue"
    NO_VALUES = "NoValues"

    def __str__(self) -> str:
        return self.value


_MESSAGES = {
    ValidationReason.EMPTY_OR_WHITESPACE: (
        "Names cannot be empty or white-space. "
        f"Make sure the namespace does not begin or end with '{NAMESPACE_DELIMITER}'."
    ),
    ValidationReason.MUST_START_WITH_LETTER: "Names must begin with a letter.",
    ValidationReason.NOT_ALPHANUMERIC: "Names must contain only alphanumeric characters.",
    ValidationReason.DUPLICATE_VALUE: "All enum value names must be unique.",
    ValidationReason.NO_VALUES: "An enum needs at least one value.",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one definition."""

    reason: Optional[ValidationReason] = None
    subject: Optional[str] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, reason: ValidationReason, subject: Optional[str] = None) -> "ValidationResult":
        return cls(reason=reason, subject=subject)

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str:
        if self.reason is None:
            return ""
        if self.subject is None:
            return _MESSAGES[self.reason]
        return f"{_MESSAGES[self.reason]} Offending name: '{self.subject}'"

    def raise_for_error(self) -> None:
        if self.reason is not None:
            raise ValidationError(self.reason, self.subject, self.message)

    def __bool__(self) -> bool:
        return self.ok


def _is_not_blank(text: Optional[str]) -> bool:
    return bool(text) and not text.isspace()


def _starts_with_letter(text: str) -> bool:
    return text[0].isalpha()


def _is_alphanumeric(text: str) -> bool:
    return all(ch.isalpha() or ch.isdecimal() for ch in text)


# Order matters: later rules assume the earlier ones passed for every input.
_IDENTIFIER_RULES: Tuple[Tuple[Callable[[str], bool], ValidationReason], ...] = (
    (_is_not_blank, ValidationReason.EMPTY_OR_WHITESPACE),
    (_starts_with_letter, ValidationReason.MUST_START_WITH_LETTER),
    (_is_alphanumeric, ValidationReason.NOT_ALPHANUMERIC),
)


def validate_identifier(text: Optional[str]) -> ValidationResult:
    """Check a single name against the identifier rules."""
    return _check_identifiers([text])


def _check_identifiers(inputs: Sequence[Optional[str]]) -> ValidationResult:
    for rule, reason in _IDENTIFIER_RULES:
        for text in inputs:
            if not rule(text):
                return ValidationResult.failure(reason, text)
    return ValidationResult.success()


def _first_duplicate(values: Sequence[str]) -> Optional[str]:
    seen = set()
    for value in values:
        if value in seen:
            return value
        seen.add(value)
    return None


def validate_definition(
    name: Optional[str],
    values: Optional[Sequence[Optional[str]]],
    namespace: Optional[str],
    *,
    allow_empty_values: bool = True,
) -> ValidationResult:
    """Validate a proposed definition.

    Args:
        name: Type name, also used as the record file name.
        values: Ordered value names.
        namespace: Dotted namespace string; every segment must be an identifier.
        allow_empty_values: Accept a definition with no values at all.

    Returns:
        A successful result, or one tagged with the first violated rule.
    """
    value_list: List[Optional[str]] = list(values or [])
    segments = (namespace or "").split(NAMESPACE_DELIMITER)

    inputs: List[Optional[str]] = value_list + segments + [name]
    result = _check_identifiers(inputs)
    if not result.ok:
        return result

    duplicate = _first_duplicate(value_list)
    if duplicate is not None:
        return ValidationResult.failure(ValidationReason.DUPLICATE_VALUE, duplicate)

    if not value_list and not allow_empty_values:
        return ValidationResult.failure(ValidationReason.NO_VALUES, name)

    return ValidationResult.success()
