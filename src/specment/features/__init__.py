"""Feature registry.

Features available (in registry order):
- search: local full-text search
- plantuml: PlantUML diagrams
- mermaid: Mermaid diagrams
- redoc: OpenAPI reference with Redocusaurus
- i18n: multi-language support
"""

from typing import Dict, List, Optional

from specment.features.base import FeatureIntegration, SiteContribution
from specment.features.i18n import I18nIntegration
from specment.features.mermaid import MermaidIntegration
from specment.features.plantuml import PlantUMLIntegration
from specment.features.redoc import RedocIntegration
from specment.features.search import SearchIntegration
from specment.locales import Language, DEFAULT_LANGUAGE
from specment.models import FeatureSelection

FEATURE_INTEGRATIONS: Dict[str, FeatureIntegration] = {
    integration.name: integration
    for integration in (
        SearchIntegration(),
        PlantUMLIntegration(),
        MermaidIntegration(),
        RedocIntegration(),
        I18nIntegration(),
    )
}


def get_available_features(language: Language = DEFAULT_LANGUAGE) -> List[FeatureSelection]:
    """All registry features, disabled, localized for the language."""
    return [integration.selection(language) for integration in FEATURE_INTEGRATIONS.values()]


def get_feature_names() -> List[str]:
    return list(FEATURE_INTEGRATIONS)


def get_integration(name: str) -> Optional[FeatureIntegration]:
    return FEATURE_INTEGRATIONS.get(name)


__all__ = [
    "FEATURE_INTEGRATIONS",
    "FeatureIntegration",
    "SiteContribution",
    "get_available_features",
    "get_feature_names",
    "get_integration",
]
