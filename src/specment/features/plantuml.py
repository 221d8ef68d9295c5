"""PlantUML diagrams (docusaurus-theme-plantuml)."""

from specment.features.base import FeatureIntegration, SiteContribution
from specment.locales import Language

PLUGIN = "docusaurus-theme-plantuml"
DEFAULT_SERVER = "https://www.plantuml.com/plantuml"


class PlantUMLIntegration(FeatureIntegration):
    name = "plantuml"
    config_key = "plantuml"
    plugin = PLUGIN
    display_name = {Language.EN: "PlantUML", Language.JA: "PlantUML"}
    description = {
        Language.EN: "UML diagrams and flowcharts",
        Language.JA: "PlantUML図表統合 (UML図・フローチャート)",
    }

    def default_config(self):
        return {"server": DEFAULT_SERVER}

    def dependencies(self):
        return {PLUGIN: "^1.0.0"}

    def scripts(self):
        return {"plantuml:check": 'echo "PlantUML integration enabled"'}

    def site_contribution(self, feature):
        config = self.resolve_config(feature)
        return SiteContribution(
            config={"themeConfig": {"plantuml": {"server": config["server"]}}},
            themes=[PLUGIN],
        )

    def validate_config(self, config):
        server = config.get("server")
        if server and not str(server).startswith(("http://", "https://")):
            return "PlantUML server URL must start with http or https"
        return None
