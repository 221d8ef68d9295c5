"""Selection, generation and integration pipeline."""

from specment.core.collector import SelectionCollector, parse_feature_list
from specment.core.generator import GenerationResult, ProjectGenerator
from specment.core.integrator import IntegrationResult, Integrator
from specment.core.prompts import Choice, ClickPrompter, Prompter

__all__ = [
    "SelectionCollector",
    "parse_feature_list",
    "GenerationResult",
    "ProjectGenerator",
    "IntegrationResult",
    "Integrator",
    "Choice",
    "ClickPrompter",
    "Prompter",
]
