"""Mermaid diagrams (@docusaurus/theme-mermaid)."""

from specment.features.base import FeatureIntegration, SiteContribution
from specment.locales import Language

PLUGIN = "@docusaurus/theme-mermaid"


class MermaidIntegration(FeatureIntegration):
    name = "mermaid"
    plugin = PLUGIN
    display_name = {Language.EN: "Mermaid", Language.JA: "Mermaid"}
    description = {
        Language.EN: "Diagrams written in Markdown code blocks",
        Language.JA: "Markdownのコードブロックで図を記述",
    }

    def dependencies(self):
        return {PLUGIN: "^3.0.0"}

    def site_contribution(self, feature):
        return SiteContribution(
            config={"markdown": {"mermaid": True}},
            themes=[PLUGIN],
        )
