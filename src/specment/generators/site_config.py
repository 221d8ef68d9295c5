"""Site configuration (docusaurus.config.ts) synthesis.

The configuration is assembled as data:

1. a base ``SiteConfig`` derived from the primary template,
2. each enabled feature's ``SiteContribution``: its ``config`` fragment
   is deep-merged (dicts recurse, lists are replaced) and its presets,
   themes, plugins and navbar items are appended,
3. validation of the final tree,

and rendered once through ``renderer.to_js``.
"""

import copy
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from specment.config import SpecmentConfig
from specment.errors import ConfigError
from specment.features import SiteContribution, get_integration
from specment.generators.records import NavItem, Preset
from specment.generators.renderer import JsExpr, render_module
from specment.locales import Language
from specment.models import UserSelections
from specment.templates import get_template_definition

logger = logging.getLogger(__name__)

REPOSITORY_URL = "https://github.com/plenarc/create-specment"
REQUIRED_KEYS = ("title", "url", "baseUrl", "presets", "themeConfig")

CONFIG_IMPORTS = (
    "import type * as Preset from '@docusaurus/preset-classic';",
    "import type { Config } from '@docusaurus/types';",
    "import { themes as prismThemes } from 'prism-react-renderer';",
)


def deep_merge(base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``incoming`` into a copy of ``base``.

    Nested dicts are merged recursively. Any other value, lists
    included, from ``incoming`` replaces the one in ``base``.
    """
    merged = copy.deepcopy(base)
    for key, value in incoming.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


@dataclass
class ThemeConfig:
    navbar_title: str
    nav_items: List[NavItem] = field(default_factory=list)
    footer_links: List[dict] = field(default_factory=list)
    copyright: str = ""
    image: str = "img/docusaurus-social-card.jpg"

    def to_dict(self) -> dict:
        return {
            "image": self.image,
            "docs": {
                "sidebar": {"hideable": True, "autoCollapseCategories": True},
            },
            "navbar": {
                "title": self.navbar_title,
                "logo": {"alt": self.navbar_title, "src": "img/logo.svg"},
                "items": [item.to_dict() for item in self.nav_items],
            },
            "footer": {
                "style": "dark",
                "links": self.footer_links,
                "copyright": self.copyright,
            },
            "prism": {
                "theme": JsExpr("prismThemes.github"),
                "darkTheme": JsExpr("prismThemes.dracula"),
            },
        }


@dataclass
class SiteConfig:
    """The generated site configuration.

    Known sections are typed; ``extra`` holds the open-ended fragments
    features contribute and is deep-merged over the rest on output.
    """

    title: str
    tagline: str
    url: str
    base_url: str
    organization_name: str
    project_name: str
    i18n: Dict[str, Any]
    theme_config: ThemeConfig
    presets: List[Preset] = field(default_factory=list)
    themes: List[Any] = field(default_factory=list)
    plugins: List[Any] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)
    favicon: str = "img/favicon.ico"

    def apply(self, contribution) -> None:
        if contribution.config:
            self.extra = deep_merge(self.extra, contribution.config)
        self.presets.extend(contribution.presets)
        self.themes.extend(contribution.themes)
        self.plugins.extend(contribution.plugins)

    def to_dict(self) -> dict:
        data = {
            "title": self.title,
            "tagline": self.tagline,
            "favicon": self.favicon,
            "url": self.url,
            "baseUrl": self.base_url,
            "organizationName": self.organization_name,
            "projectName": self.project_name,
            "trailingSlash": False,
            "onBrokenLinks": "warn",
            "onBrokenMarkdownLinks": "warn",
            "i18n": self.i18n,
            "presets": [preset.to_value() for preset in self.presets],
            "themeConfig": self.theme_config.to_dict(),
        }
        if self.themes:
            data["themes"] = list(self.themes)
        if self.plugins:
            data["plugins"] = list(self.plugins)
        return deep_merge(data, self.extra)


def classic_preset() -> Preset:
    return Preset("classic", {
        "docs": {"sidebarPath": "./sidebars.ts"},
        "blog": False,
        "theme": {"customCss": "./src/css/custom.css"},
    })


def feature_contributions(selections: UserSelections) -> List[SiteContribution]:
    """Contributions of the enabled features, in registry order."""
    contributions = []
    for feature in selections.enabled_features:
        integration = get_integration(feature.name)
        if integration is None:
            logger.warning("No integration registered for feature '%s'", feature.name)
            continue
        contributions.append(integration.site_contribution(feature))
    return contributions


def build_nav_items(
    selections: UserSelections,
    repository_url: str,
    contributions: Optional[List[SiteContribution]] = None,
) -> List[NavItem]:
    """Navbar items in order: templates, feature items, repository link."""
    if contributions is None:
        contributions = feature_contributions(selections)

    items = []
    for template in selections.templates:
        definition = get_template_definition(template.name)
        if definition and definition.nav:
            items.append(NavItem(
                label=definition.nav.label[selections.language],
                type="doc",
                position="left",
                doc_id=definition.nav.doc_id,
            ))

    for contribution in contributions:
        items.extend(contribution.navbar_items)

    items.append(NavItem(label="GitHub", position="right", href=repository_url))
    return items


def _footer_links(language: Language) -> List[dict]:
    community = "Community" if language == Language.EN else "コミュニティ"
    more = "More" if language == Language.EN else "その他"
    return [
        {
            "title": community,
            "items": [
                {"label": "GitHub Discussions", "href": f"{REPOSITORY_URL}/discussions"},
            ],
        },
        {
            "title": more,
            "items": [
                {"label": "Changelog", "href": f"{REPOSITORY_URL}/blob/main/CHANGELOG.md"},
                {"label": "GitHub: Create Specment", "href": REPOSITORY_URL},
                {"label": "Docusaurus", "href": "https://docusaurus.io/"},
            ],
        },
    ]


def build_site_config(
    selections: UserSelections,
    config: Optional[SpecmentConfig] = None,
    today: Optional[date] = None,
) -> SiteConfig:
    """Build and validate the site configuration for the selections."""
    config = config or SpecmentConfig()
    today = today or date.today()

    primary = get_template_definition(selections.primary_template.name)
    if primary is None:
        raise ConfigError(
            f"Unknown template: {selections.primary_template.name}", field="templates"
        )

    if config.ci:
        url = config.public_url()
        base_url = f"/{selections.project_name}/"
        repository_url = f"https://github.com/{config.organization}/{selections.project_name}"
    else:
        url = config.dev_url
        base_url = "/"
        repository_url = REPOSITORY_URL

    contributions = feature_contributions(selections)

    site = SiteConfig(
        title=primary.title,
        tagline=primary.tagline,
        url=url,
        base_url=base_url,
        organization_name=config.organization,
        project_name=selections.project_name,
        i18n={
            "defaultLocale": selections.language.value,
            "locales": [selections.language.value],
        },
        theme_config=ThemeConfig(
            navbar_title=primary.title,
            nav_items=build_nav_items(selections, repository_url, contributions),
            footer_links=_footer_links(selections.language),
            copyright=(
                f"Copyright © {today.year} {selections.project_name}. "
                "Built with Specment."
            ),
        ),
        presets=[classic_preset()],
    )

    for contribution in contributions:
        site.apply(contribution)

    validate_site_config(site.to_dict())
    return site


def validate_site_config(data: Dict[str, Any]) -> None:
    """Check required keys, presets and URL shape.

    Raises:
        ConfigError: naming the missing or invalid field
    """
    for key in REQUIRED_KEYS:
        value = data.get(key)
        if value is None or value == "" or value == [] or value == {}:
            raise ConfigError(f"Site configuration is missing required field '{key}'", field=key)

    if not isinstance(data["presets"], list) or len(data["presets"]) < 1:
        raise ConfigError("Site configuration needs at least one preset", field="presets")

    parsed = urlparse(str(data["url"]))
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Site configuration url is not a valid URL: {data['url']}", field="url")

    if not str(data["baseUrl"]).startswith("/"):
        raise ConfigError("Site configuration baseUrl must start with '/'", field="baseUrl")


def render_site_config(site: SiteConfig) -> str:
    """Render the config as docusaurus.config.ts source."""
    return render_module(
        "config",
        site.to_dict(),
        imports=CONFIG_IMPORTS,
        type_annotation="Config",
        header="// Generated by create-specment. Edit title, tagline and URLs for your project.",
    )
