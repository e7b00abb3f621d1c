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

"""Value types describing one enumerated-type definition."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

NAMESPACE_DELIMITER = "."


class WriteOutcome(str, Enum):
    """Result of persisting a record."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NamespacePath:
    """Ordered namespace segments, e.g. ``Game.Movement`` -> ('Game', 'Movement')."""

    segments: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, namespace: Optional[str]) -> "NamespacePath":
        # Empty segments are kept so that the validator can reject them.
        if namespace is None:
            return cls(("",))
        return cls(tuple(namespace.split(NAMESPACE_DELIMITER)))

    def __str__(self) -> str:
        return NAMESPACE_DELIMITER.join(self.segments)


@dataclass(frozen=True)
class EnumDefinition:
    """A named, ordered value set inside a namespace."""

    name: str
    values: Tuple[str, ...] = field(default_factory=tuple)
    namespace: NamespacePath = field(default_factory=NamespacePath)

    @classmethod
    def from_input(
        cls, name: str, values: Iterable[str], namespace: Optional[str]
    ) -> "EnumDefinition":
        return cls(name=name, values=tuple(values), namespace=NamespacePath.parse(namespace))

    @property
    def namespace_str(self) -> str:
        return str(self.namespace)
