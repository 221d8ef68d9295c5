"""Tests for specment.generators.site_config."""

from datetime import date

import pytest

from specment.config import SpecmentConfig
from specment.errors import ConfigError
from specment.generators.site_config import (
    REPOSITORY_URL,
    build_site_config,
    deep_merge,
    render_site_config,
    validate_site_config,
)
from specment.locales import Language
from specment.models import FeatureSelection, UserSelections

TODAY = date(2024, 1, 15)


def _site(selections, config=None):
    return build_site_config(selections, config or SpecmentConfig(), today=TODAY)


def _nav(data):
    return data["themeConfig"]["navbar"]["items"]


class TestDeepMerge:
    """Tests for deep_merge()."""

    def test_nested_dicts_merge(self):
        merged = deep_merge({"a": {"x": 1, "y": 2}}, {"a": {"y": 3, "z": 4}})
        assert merged == {"a": {"x": 1, "y": 3, "z": 4}}

    def test_lists_are_replaced(self):
        merged = deep_merge({"locales": ["en"]}, {"locales": ["en", "ja"]})
        assert merged == {"locales": ["en", "ja"]}

    def test_inputs_untouched(self):
        base = {"a": {"x": 1}}
        deep_merge(base, {"a": {"x": 2}})
        assert base == {"a": {"x": 1}}


class TestBuildSiteConfig:
    """Tests for build_site_config()."""

    def test_title_from_primary_template(self, make_selections):
        data = _site(make_selections(templates=["requirements", "classic-spec"])).to_dict()
        assert data["title"] == "Requirements Specification Documentation"
        assert data["themeConfig"]["navbar"]["title"] == data["title"]

    def test_local_urls(self, make_selections):
        data = _site(make_selections()).to_dict()
        assert data["url"] == "http://localhost:3000"
        assert data["baseUrl"] == "/"

    def test_ci_urls(self, make_selections):
        config = SpecmentConfig(ci=True, organization="acme")
        data = _site(make_selections("docs-site"), config).to_dict()

        assert data["url"] == "https://acme.github.io"
        assert data["baseUrl"] == "/docs-site/"
        assert _nav(data)[-1]["href"] == "https://github.com/acme/docs-site"

    def test_github_link_last(self, make_selections):
        items = _nav(_site(make_selections()).to_dict())
        assert items[-1] == {"label": "GitHub", "position": "right", "href": REPOSITORY_URL}

    def test_template_nav_in_selection_order(self, make_selections):
        selections = make_selections(templates=["requirements", "project-analysis"])
        items = _nav(_site(selections).to_dict())

        assert [i.get("docId") for i in items[:2]] == ["functional/intro", "analysis/intro"]

    def test_classic_preset_first(self, make_selections):
        data = _site(make_selections()).to_dict()
        name, options = data["presets"][0]
        assert name == "classic"
        assert options["docs"]["sidebarPath"] == "./sidebars.ts"

    def test_no_features_no_themes(self, make_selections):
        data = _site(make_selections(features=())).to_dict()
        assert "themes" not in data
        assert "markdown" not in data

    def test_search_theme_only_when_enabled(self, make_selections):
        data = _site(make_selections(features=("search",))).to_dict()
        plugin, options = data["themes"][0]
        assert plugin == "@easyops-cn/docusaurus-search-local"
        assert options["indexDocs"] is True

    def test_mermaid_and_plantuml(self, make_selections):
        data = _site(make_selections(features=("plantuml", "mermaid"))).to_dict()

        assert data["themes"] == ["docusaurus-theme-plantuml", "@docusaurus/theme-mermaid"]
        assert data["markdown"] == {"mermaid": True}
        assert data["themeConfig"]["plantuml"]["server"].startswith("https://")
        # deep merge keeps the rest of themeConfig
        assert "navbar" in data["themeConfig"]

    def test_redoc_preset_and_nav(self, make_selections):
        data = _site(make_selections("api", ["api-spec"])).to_dict()

        assert [p[0] for p in data["presets"]] == ["classic", "redocusaurus"]
        assert {"label": "API", "position": "left", "to": "/api/"} in _nav(data)

    def test_i18n_replaces_base_locales(self, make_selections):
        data = _site(make_selections(features=("i18n",), language=Language.JA)).to_dict()

        assert data["i18n"]["locales"] == ["en", "ja"]
        assert "localeConfigs" in data["i18n"]
        assert {"type": "localeDropdown", "position": "right"} in _nav(data)

    def test_base_locale_follows_language(self, make_selections):
        data = _site(make_selections(language=Language.JA)).to_dict()
        assert data["i18n"] == {"defaultLocale": "ja", "locales": ["ja"]}

    def test_invalid_feature_config_rejected(self, make_selections):
        selections = make_selections(features=("plantuml",))
        features = tuple(
            FeatureSelection(
                name=f.name,
                display_name=f.display_name,
                description=f.description,
                enabled=f.enabled,
                config={"plantuml": {"server": "ftp://nope"}} if f.name == "plantuml" else f.config,
            )
            for f in selections.features
        )
        broken = UserSelections(selections.project_name, selections.templates, features)

        with pytest.raises(ConfigError) as exc_info:
            _site(broken)
        assert exc_info.value.field == "plantuml"


class TestValidateSiteConfig:
    """Tests for validate_site_config()."""

    @pytest.fixture
    def valid(self):
        return {
            "title": "T",
            "url": "https://example.com",
            "baseUrl": "/",
            "presets": [["classic", {}]],
            "themeConfig": {"navbar": {}},
        }

    def test_valid_passes(self, valid):
        validate_site_config(valid)

    @pytest.mark.parametrize("key", ["title", "url", "baseUrl", "presets", "themeConfig"])
    def test_missing_required_key(self, valid, key):
        del valid[key]
        with pytest.raises(ConfigError) as exc_info:
            validate_site_config(valid)
        assert exc_info.value.field == key

    def test_bad_url(self, valid):
        valid["url"] = "example.com"
        with pytest.raises(ConfigError, match="url"):
            validate_site_config(valid)

    def test_base_url_must_start_with_slash(self, valid):
        valid["baseUrl"] = "docs/"
        with pytest.raises(ConfigError) as exc_info:
            validate_site_config(valid)
        assert exc_info.value.field == "baseUrl"


class TestRenderSiteConfig:
    """Tests for render_site_config()."""

    def test_typescript_source(self, make_selections):
        source = render_site_config(_site(make_selections("docs-site")))

        assert "import type { Config } from '@docusaurus/types';" in source
        assert "const config: Config = {" in source
        assert "theme: prismThemes.github," in source
        assert "projectName: 'docs-site'," in source
        assert "Copyright © 2024 docs-site." in source
        assert source.rstrip().endswith("export default config;")
