"""Tests for specment.templates."""

from specment.locales import Language
from specment.models import DirectoryStructure, TemplateName
from specment.templates import (
    auto_enabled_features,
    combine_template_structures,
    find_template,
    get_all_template_names,
    get_available_templates,
    get_template_definition,
    recommended_features,
    supported_features,
)
from specment.templates.definitions import TEMPLATE_DEFINITIONS


class TestRegistry:
    """Template lookups."""

    def test_all_templates_listed(self):
        assert get_all_template_names() == [
            "classic-spec",
            "project-analysis",
            "requirements",
            "external-design",
            "internal-design",
            "api-spec",
        ]

    def test_localized_descriptors(self):
        en = find_template("requirements", Language.EN)
        ja = find_template("requirements", Language.JA)
        assert en.display_name == "Requirements Specification"
        assert ja.display_name == "要件定義"
        assert en.features == ja.features

    def test_unknown_template(self):
        assert get_template_definition("nope") is None
        assert find_template("nope") is None

    def test_available_templates_match_definitions(self):
        assert len(get_available_templates(Language.JA)) == len(TEMPLATE_DEFINITIONS)

    def test_every_nav_target_is_sample_content(self):
        for definition in TEMPLATE_DEFINITIONS.values():
            if definition.nav is None:
                continue
            paths = {c.path for c in definition.sample_content}
            assert f"docs/{definition.nav.doc_id}.md" in paths, definition.name

    def test_every_sidebar_dir_is_created(self):
        for definition in TEMPLATE_DEFINITIONS.values():
            for group in definition.sidebars:
                if group.dir_name != ".":
                    assert group.dir_name in definition.directory_structure.docs, definition.name


class TestCombineTemplateStructures:
    """Tests for combine_template_structures()."""

    def test_union_sorted_and_deduplicated(self):
        combined = combine_template_structures(["requirements", "project-analysis"])

        assert combined.docs == (
            "analysis", "functional", "non-functional", "overview", "stakeholders", "use-cases",
        )
        assert combined.static == ("diagrams", "img")

    def test_order_independent(self):
        a = combine_template_structures(["external-design", "internal-design"])
        b = combine_template_structures(["internal-design", "external-design"])
        assert a == b

    def test_idempotent(self):
        once = combine_template_structures(["classic-spec", "api-spec"])
        assert combine_template_structures([once]) == once
        assert combine_template_structures([once, once]) == once

    def test_descriptors_and_enum_accepted(self):
        descriptor = find_template("api-spec")
        combined = combine_template_structures([descriptor, TemplateName.API_SPEC])
        assert combined.docs == ("api", "guides")

    def test_empty(self):
        assert combine_template_structures([]) == DirectoryStructure()


class TestFeatureHelpers:
    """supported_features(), auto_enabled_features() and recommended_features()."""

    def test_supported_union(self):
        templates = [find_template("requirements"), find_template("api-spec")]
        assert set(supported_features(templates)) == {"search", "mermaid", "i18n", "redoc"}

    def test_auto_enabled(self):
        assert auto_enabled_features([find_template("api-spec")]) == ["redoc"]
        assert auto_enabled_features([find_template("classic-spec")]) == []

    def test_recommended_deduplicated_in_order(self):
        templates = [find_template("external-design"), find_template("internal-design")]
        assert recommended_features(templates) == ["plantuml", "redoc"]
