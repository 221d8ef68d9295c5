"""sidebars.ts synthesis from the primary template's sidebar groups."""

from typing import Any, Dict

from specment.generators.renderer import render_module
from specment.models import TemplateName, UserSelections
from specment.templates import get_template_definition

SIDEBAR_IMPORTS = (
    "import type { SidebarsConfig } from '@docusaurus/plugin-content-docs';",
)


def build_sidebars(selections: UserSelections) -> Dict[str, Any]:
    """One autogenerated category per sidebar group of the primary template."""
    definition = get_template_definition(selections.primary_template.name)
    if definition is None or not definition.sidebars:
        definition = get_template_definition(TemplateName.CLASSIC_SPEC)

    sidebars = {}
    for group in definition.sidebars:
        sidebars[group.sidebar_id] = [
            {
                "type": "category",
                "label": group.label[selections.language],
                "items": [{"type": "autogenerated", "dirName": group.dir_name}],
            }
        ]
    return sidebars


def render_sidebars(sidebars: Dict[str, Any]) -> str:
    return render_module(
        "sidebars",
        sidebars,
        imports=SIDEBAR_IMPORTS,
        type_annotation="SidebarsConfig",
    )
