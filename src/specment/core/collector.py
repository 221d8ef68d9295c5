"""Selection collector.

Resolves project name, templates and features into ``UserSelections``,
either from command-line options or by prompting.
"""

import logging
import re
from typing import List, Optional, Tuple

from specment.core.prompts import Choice, ClickPrompter, Prompter
from specment.errors import ValidationError
from specment.features import get_available_features
from specment.locales import Language, DEFAULT_LANGUAGE, LANGUAGE_LABELS, translate
from specment.models import (
    PROJECT_NAME_PATTERN,
    CreateOptions,
    FeatureSelection,
    TemplateDescriptor,
    UserSelections,
)
from specment.templates import (
    auto_enabled_features,
    find_template,
    get_available_templates,
    recommended_features,
    supported_features,
)
from specment.ui import formatter

logger = logging.getLogger(__name__)

_PROJECT_NAME = re.compile(PROJECT_NAME_PATTERN)

DEFAULT_PROJECT_DIR = "docs"


def is_valid_project_name(name: str) -> bool:
    return bool(name) and _PROJECT_NAME.fullmatch(name) is not None


def project_name_error(name: str, language: Language) -> Optional[str]:
    """Message for an invalid interactive entry, or None if valid."""
    if not name.strip():
        return translate(language, "project_name_required")
    if not is_valid_project_name(name):
        return translate(language, "project_name_chars")
    return None


class SelectionCollector:
    """Builds ``UserSelections`` for one run.

    ``language`` is set by ``run`` and is read by the caller for its
    own messages; it is not shared anywhere else.
    """

    def __init__(self, options: Optional[CreateOptions] = None, prompter: Optional[Prompter] = None):
        self.options = options or CreateOptions()
        self.prompter = prompter or ClickPrompter()
        self.language: Language = self.options.language or DEFAULT_LANGUAGE

    def run(self, project_name: Optional[str] = None) -> UserSelections:
        self.language = self.select_language()
        formatter.welcome(self.language)

        name = self.get_project_name(project_name)
        templates = self.get_template_selection()
        features = self.get_feature_selections(templates)

        return UserSelections(
            project_name=name,
            templates=tuple(templates),
            features=tuple(features),
            language=self.language,
        )

    def select_language(self) -> Language:
        if self.options.language:
            return Language(self.options.language)

        choices = [Choice(lang.value, LANGUAGE_LABELS[lang]) for lang in Language]
        value = self.prompter.select(translate(DEFAULT_LANGUAGE, "language_prompt"), choices)
        return Language(value)

    def get_project_name(self, initial_name: Optional[str] = None) -> str:
        if initial_name is not None:
            if not is_valid_project_name(initial_name):
                raise ValidationError(
                    translate(self.language, "invalid_project_name", value=initial_name),
                    value=initial_name,
                )
            return initial_name

        return self.prompter.text(
            translate(self.language, "project_name_prompt"),
            default=DEFAULT_PROJECT_DIR,
            validate=lambda value: project_name_error(value, self.language),
            language=self.language,
        )

    def get_template_selection(self) -> List[TemplateDescriptor]:
        if self.options.template:
            template = find_template(self.options.template, self.language)
            if template is None:
                raise ValidationError(
                    translate(self.language, "template_not_found", value=self.options.template),
                    value=self.options.template,
                )
            return [template]

        templates = get_available_templates(self.language)
        if not templates:
            raise ValidationError(translate(self.language, "no_templates_available"))

        selected_names = self.prompter.multiselect(
            translate(self.language, "template_prompt"),
            [Choice(t.name.value, t.display_name, t.description) for t in templates],
            required=True,
            language=self.language,
        )

        by_name = {t.name.value: t for t in templates}
        selected = [by_name[name] for name in selected_names if name in by_name]
        if not selected:
            raise ValidationError(translate(self.language, "no_templates_selected"))

        self.prompter.note(
            translate(self.language, "supported_features"),
            supported_features(selected),
        )
        return selected

    def get_feature_selections(self, templates: List[TemplateDescriptor]) -> List[FeatureSelection]:
        available = get_available_features(self.language)
        supported = set(supported_features(templates))
        auto_enabled = set(auto_enabled_features(templates))

        offerable = [
            f for f in available
            if f.name in supported and f.name not in auto_enabled
        ]
        chosen = self._choose_features(offerable, auto_enabled, set(recommended_features(templates)))

        logger.debug("Features chosen: %s, auto-enabled: %s", sorted(chosen), sorted(auto_enabled))
        return [
            feature.with_enabled(feature.name in chosen or feature.name in auto_enabled)
            for feature in available
        ]

    def _choose_features(self, offerable: List[FeatureSelection], auto_enabled: set, recommended: set) -> set:
        offerable_names = {f.name for f in offerable}

        if self.options.features is not None:
            for name in self.options.features:
                if name not in offerable_names and name not in auto_enabled:
                    raise ValidationError(
                        translate(self.language, "unknown_feature", value=name),
                        value=name,
                    )
            return set(self.options.features)

        if not offerable:
            return set()

        marker = translate(self.language, "recommended")
        choices = [
            Choice(
                f.name,
                f.display_name,
                f"{f.description} ({marker})" if f.name in recommended else f.description,
            )
            for f in offerable
        ]
        return set(self.prompter.multiselect(
            translate(self.language, "feature_prompt"),
            choices,
            required=False,
            language=self.language,
        ))


def parse_feature_list(raw: Optional[str]) -> Optional[Tuple[str, ...]]:
    """``"plantuml, mermaid"`` -> ``("plantuml", "mermaid")``; None stays None."""
    if raw is None:
        return None
    return tuple(name.strip() for name in raw.split(",") if name.strip())
