"""Local full-text search (@easyops-cn/docusaurus-search-local)."""

from specment.features.base import FeatureIntegration, SiteContribution
from specment.locales import Language

PLUGIN = "@easyops-cn/docusaurus-search-local"


class SearchIntegration(FeatureIntegration):
    name = "search"
    config_key = "search"
    plugin = PLUGIN
    display_name = {Language.EN: "Local Search", Language.JA: "ローカル検索"}
    description = {
        Language.EN: "Full-text search without external services",
        Language.JA: "外部サービス不要の全文検索",
    }

    def default_config(self):
        return {
            "hashed": True,
            "language": ["en", "ja"],
            "removeDefaultStopWordFilter": False,
            "highlightSearchTermsOnTargetPage": True,
            "searchResultLimits": 8,
            "searchResultContextMaxLength": 50,
        }

    def dependencies(self):
        return {PLUGIN: "^0.52.2"}

    def site_contribution(self, feature):
        config = self.resolve_config(feature)
        options = dict(config)
        options.update({
            "indexDocs": True,
            "indexBlog": False,
            "indexPages": False,
            "docsRouteBasePath": "/docs",
        })
        return SiteContribution(themes=[[PLUGIN, options]])

    def validate_config(self, config):
        if "language" in config and not isinstance(config["language"], list):
            return "Search language must be an array"
        for key in ("searchResultLimits", "searchResultContextMaxLength"):
            value = config.get(key)
            if value is not None and (not isinstance(value, int) or isinstance(value, bool) or value <= 0):
                return f"{key} must be a positive number"
        return None
