"""Base class for feature integrations."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from specment.errors import ConfigError
from specment.generators.records import NavItem, Preset
from specment.locales import Language
from specment.models import ContentFile, FeatureSelection


@dataclass
class SiteContribution:
    """What an enabled feature adds to the site configuration.

    ``config`` is deep-merged into the configuration tree. The list
    fields are appended to the corresponding sections.
    """

    config: Dict[str, Any] = field(default_factory=dict)
    presets: List[Preset] = field(default_factory=list)
    themes: List[Any] = field(default_factory=list)
    plugins: List[Any] = field(default_factory=list)
    navbar_items: List[NavItem] = field(default_factory=list)


class FeatureIntegration:
    """One optional capability of the generated site."""

    name: str = ""
    config_key: str = ""
    plugin: Optional[str] = None
    display_name: Dict[Language, str] = {}
    description: Dict[Language, str] = {}

    def default_config(self) -> Dict[str, Any]:
        return {}

    def dependencies(self) -> Dict[str, str]:
        return {}

    def dev_dependencies(self) -> Dict[str, str]:
        return {}

    def scripts(self) -> Dict[str, str]:
        return {}

    def site_contribution(self, feature: FeatureSelection) -> SiteContribution:
        return SiteContribution()

    def extra_files(self, feature: FeatureSelection) -> List[ContentFile]:
        return []

    def validate_config(self, config: Dict[str, Any]) -> Optional[str]:
        """Return an error message, or None if the config is valid."""
        return None

    def resolve_config(self, feature: FeatureSelection) -> Dict[str, Any]:
        """Feature config merged over the defaults, validated."""
        merged = self.default_config()
        if feature.config and self.config_key in feature.config:
            merged.update(feature.config[self.config_key] or {})

        error = self.validate_config(merged)
        if error:
            raise ConfigError(f"{self.name}: {error}", field=self.config_key or self.name)
        return merged

    def selection(self, language: Language, enabled: bool = False) -> FeatureSelection:
        config = {self.config_key: self.default_config()} if self.config_key else None
        return FeatureSelection(
            name=self.name,
            display_name=self.display_name.get(language, self.name),
            description=self.description.get(language, ""),
            enabled=enabled,
            plugin=self.plugin,
            config=config,
        )
