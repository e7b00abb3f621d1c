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

from __future__ import annotations

from typing import Optional

from ..models.definition import EnumDefinition
from .template_renderer import TemplateRenderer

DECLARATION_TEMPLATE = "enum_declaration.jinja2"
VALUE_SEPARATOR = ", "


class DeclarationRenderer:
    """Renders an EnumDefinition as a single namespaced enum declaration.

    Every value is followed by the separator, including the last one; the
    target language accepts a trailing separator before the closing brace.
    """

    def __init__(
        self,
        template_renderer: Optional[TemplateRenderer] = None,
        construct_keyword: str = "enum",
        access_modifier: str = "public",
        template_name: str = DECLARATION_TEMPLATE,
    ):
        self.template_renderer = template_renderer or TemplateRenderer()
        self.construct_keyword = construct_keyword
        self.access_modifier = access_modifier
        self.template_name = template_name

    def render(self, definition: EnumDefinition) -> str:
        return self.template_renderer.render_template(
            self.template_name,
            namespace=definition.namespace_str,
            access_modifier=self.access_modifier,
            construct_keyword=self.construct_keyword,
            name=definition.name,
            values=list(definition.values),
            separator=VALUE_SEPARATOR,
        )
