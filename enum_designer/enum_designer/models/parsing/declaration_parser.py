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

"""Read a rendered enum declaration back into an EnumDefinition."""

from __future__ import annotations

import re

from ..definition import EnumDefinition, NamespacePath, NAMESPACE_DELIMITER
from ...exceptions import DeclarationParseError

# namespace A.B {public enum Name{ V1, V2,  };}
_DECLARATION_RE = re.compile(
    r"^\s*namespace\s+(?P<namespace>[^\s{]+)\s*\{\s*"
    r"(?:(?:public|internal)\s+)?enum\s+(?P<name>[^\s{]+)\s*\{"
    r"(?P<body>[^{}]*)\}\s*;?\s*\}\s*$",
    re.DOTALL,
)


def parse_declaration(text: str) -> EnumDefinition:
    """Parse declaration text.

    Identifier rules are not checked here; run the definition validator on
    the result when that matters.

    Raises:
        DeclarationParseError: If the text is not a single namespaced enum.
    """
    match = _DECLARATION_RE.match(text or "")
    if match is None:
        raise DeclarationParseError("Text is not a namespaced enum declaration")

    body = match.group("body")
    values = [token.strip() for token in body.split(",")]
    # A trailing separator leaves one empty token at the end.
    if values and values[-1] == "":
        values.pop()
    if any(value == "" for value in values):
        raise DeclarationParseError(f"Empty value in enum body: '{body.strip()}'")

    namespace = NamespacePath(tuple(match.group("namespace").split(NAMESPACE_DELIMITER)))
    return EnumDefinition(name=match.group("name"), values=tuple(values), namespace=namespace)
