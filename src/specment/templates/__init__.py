"""Template registry.

Templates available:
- classic-spec: general-purpose specification
- project-analysis: project overview and analysis
- requirements: functional / non-functional requirements
- external-design: external interfaces and architecture
- internal-design: implementation details
- api-spec: API reference rendered with Redocusaurus
"""

from typing import Iterable, List, Optional, Union

from specment.locales import Language, DEFAULT_LANGUAGE
from specment.models import (
    DirectoryStructure,
    TemplateConfig,
    TemplateDescriptor,
    TemplateName,
)
from specment.templates.definitions import TEMPLATE_DEFINITIONS


def get_available_templates(language: Language = DEFAULT_LANGUAGE) -> List[TemplateDescriptor]:
    """Get all templates, localized for the given language."""
    return [definition.describe(language) for definition in TEMPLATE_DEFINITIONS.values()]


def get_all_template_names() -> List[str]:
    return [name.value for name in TEMPLATE_DEFINITIONS]


def get_template_definition(name: Union[str, TemplateName]) -> Optional[TemplateConfig]:
    """Get the registry entry for a template, or None if unknown."""
    try:
        return TEMPLATE_DEFINITIONS.get(TemplateName(name))
    except ValueError:
        return None


def find_template(name: str, language: Language = DEFAULT_LANGUAGE) -> Optional[TemplateDescriptor]:
    definition = get_template_definition(name)
    return definition.describe(language) if definition else None


def combine_template_structures(
    templates: Iterable[Union[TemplateDescriptor, TemplateName, str, DirectoryStructure]],
) -> DirectoryStructure:
    """Union of the directory layouts of several templates.

    Output lists are de-duplicated and sorted, so the result does not
    depend on selection order and combining it again is a no-op.
    """
    docs, static, src = set(), set(), set()

    for template in templates:
        if isinstance(template, DirectoryStructure):
            structure = template
        else:
            name = template.name if isinstance(template, TemplateDescriptor) else template
            definition = get_template_definition(name)
            if definition is None:
                continue
            structure = definition.directory_structure

        docs.update(structure.docs)
        static.update(structure.static)
        src.update(structure.src)

    return DirectoryStructure(
        docs=tuple(sorted(docs)),
        static=tuple(sorted(static)),
        src=tuple(sorted(src)),
    )


def supported_features(templates: Iterable[TemplateDescriptor]) -> List[str]:
    """Union of feature names the templates declare, in first-seen order."""
    seen: List[str] = []
    for template in templates:
        for feature in sorted(template.features):
            if feature not in seen:
                seen.append(feature)
    return seen


def auto_enabled_features(templates: Iterable[TemplateDescriptor]) -> List[str]:
    """Features forced on by the selected templates (e.g. api-spec -> redoc)."""
    enabled: List[str] = []
    for template in templates:
        definition = get_template_definition(template.name)
        if definition is None:
            continue
        for feature in definition.auto_enabled_features:
            if feature not in enabled:
                enabled.append(feature)
    return enabled


def recommended_features(templates: Iterable[TemplateDescriptor]) -> List[str]:
    """Default features of the selected templates, highlighted in the feature prompt."""
    recommended: List[str] = []
    for template in templates:
        definition = get_template_definition(template.name)
        if definition is None:
            continue
        for feature in definition.default_features:
            if feature not in recommended:
                recommended.append(feature)
    return recommended
