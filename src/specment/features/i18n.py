"""Multi-language support (built into Docusaurus)."""

import json

from specment.features.base import FeatureIntegration, SiteContribution
from specment.generators.records import NavItem
from specment.locales import Language
from specment.models import ContentFile

NAVBAR_TRANSLATIONS = {
    "title": {
        "message": "ホーム",
        "description": "The title in the navbar",
    },
    "item.label.API": {
        "message": "API",
        "description": "Navbar item with label API",
    },
    "item.label.GitHub": {
        "message": "GitHub",
        "description": "Navbar item with label GitHub",
    },
}

FOOTER_TRANSLATIONS = {
    "link.title.Community": {
        "message": "コミュニティ",
        "description": "The title of the footer links column with title=Community",
    },
    "link.title.More": {
        "message": "その他",
        "description": "The title of the footer links column with title=More",
    },
    "copyright": {
        "message": "Copyright © {{year}} {{projectName}}. Docusaurus でビルドされています。",
        "description": "The footer copyright",
    },
}

CODE_TRANSLATIONS = {
    "theme.common.editThisPage": {
        "message": "このページを編集",
        "description": "The link label to edit the current page",
    },
    "theme.docs.paginator.previous": {
        "message": "前へ",
        "description": "The label used to navigate to the previous doc",
    },
    "theme.docs.paginator.next": {
        "message": "次へ",
        "description": "The label used to navigate to the next doc",
    },
}


class I18nIntegration(FeatureIntegration):
    name = "i18n"
    config_key = "i18n"
    display_name = {Language.EN: "Internationalization (i18n)", Language.JA: "多言語対応 (i18n)"}
    description = {
        Language.EN: "Multi-language support",
        Language.JA: "多言語対応",
    }

    def default_config(self):
        return {
            "defaultLocale": "en",
            "locales": ["en", "ja"],
            "localeConfigs": {
                "en": {"label": "English", "direction": "ltr", "htmlLang": "en-US"},
                "ja": {"label": "日本語", "direction": "ltr", "htmlLang": "ja-JP"},
            },
        }

    def scripts(self):
        return {
            "translate": "docusaurus write-translations",
            "translate:update": "docusaurus write-translations --update-translations",
        }

    def site_contribution(self, feature):
        config = self.resolve_config(feature)
        return SiteContribution(
            config={"i18n": config},
            navbar_items=[NavItem(type="localeDropdown", position="right")],
        )

    def extra_files(self, feature):
        def dump(data):
            return json.dumps(data, ensure_ascii=False, indent=2) + "\n"

        return [
            ContentFile("i18n/ja/docusaurus-theme-classic/navbar.json", dump(NAVBAR_TRANSLATIONS)),
            ContentFile("i18n/ja/docusaurus-theme-classic/footer.json", dump(FOOTER_TRANSLATIONS)),
            ContentFile("i18n/ja/code.json", dump(CODE_TRANSLATIONS), is_template=False),
        ]

    def validate_config(self, config):
        default = config.get("defaultLocale")
        locales = config.get("locales")
        if not default:
            return "Default locale is required"
        if not isinstance(locales, list) or not locales:
            return "At least one locale must be specified"
        if default not in locales:
            return "Default locale must be included in locales array"
        for locale, locale_config in (config.get("localeConfigs") or {}).items():
            if not all(locale_config.get(k) for k in ("label", "direction", "htmlLang")):
                return f'Locale config for "{locale}" must include label, direction, and htmlLang'
        return None
