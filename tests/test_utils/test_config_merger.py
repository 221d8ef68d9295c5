"""Tests for specment.utils.config_merger."""

import pytest

from specment.utils.config_merger import (
    KEEP_EXISTING,
    USE_INCOMING,
    ConfigMerger,
    MergeOptions,
    are_versions_compatible,
    get_higher_version,
    safe_package_json_merge,
    safe_site_config_merge,
)


class TestMergeDependencies:
    """Dependency sections of package.json."""

    def test_differing_version_kept_by_default(self):
        result = safe_package_json_merge(
            {"dependencies": {"react": "^18.0.0"}},
            {"dependencies": {"react": "^19.0.0"}},
        )

        assert result.merged["dependencies"]["react"] == "^18.0.0"
        [conflict] = result.conflicts
        assert conflict.path == "dependencies.react"
        assert conflict.existing == "^18.0.0"
        assert conflict.incoming == "^19.0.0"
        assert conflict.resolution == KEEP_EXISTING

    def test_incoming_wins_when_not_preserving(self):
        result = safe_package_json_merge(
            {"devDependencies": {"typescript": "^4.0.0"}},
            {"devDependencies": {"typescript": "^5.0.0"}},
            preserve_existing=False,
        )
        assert result.merged["devDependencies"]["typescript"] == "^5.0.0"
        assert result.conflicts[0].resolution == USE_INCOMING

    def test_new_package_added_without_conflict(self):
        result = safe_package_json_merge({}, {"dependencies": {"clsx": "^2.0.0"}})
        assert result.merged["dependencies"] == {"clsx": "^2.0.0"}
        assert result.conflicts == []

    def test_equal_values_no_conflict(self):
        deps = {"dependencies": {"react": "^18.0.0"}}
        result = safe_package_json_merge(deps, dict(deps))
        assert result.conflicts == []
        assert result.warnings == []

    def test_verbose_reports_additions(self):
        result = safe_package_json_merge({}, {"dependencies": {"clsx": "^2.0.0"}}, verbose=True)
        assert any("clsx" in w for w in result.warnings)


class TestMergeScripts:
    """Script section of package.json."""

    EXISTING = {"scripts": {"start": "docusaurus start --port 4000"}}
    INCOMING = {"scripts": {"start": "docusaurus start", "build": "docusaurus build"}}

    def test_existing_script_kept(self):
        result = safe_package_json_merge(self.EXISTING, self.INCOMING)

        assert result.merged["scripts"] == {
            "start": "docusaurus start --port 4000",
            "build": "docusaurus build",
        }
        assert result.conflicts[0].path == "scripts.start"
        assert result.conflicts[0].resolution == KEEP_EXISTING

    def test_not_preserving_alone_does_not_overwrite(self):
        result = safe_package_json_merge(self.EXISTING, self.INCOMING, preserve_existing=False)
        assert result.merged["scripts"]["start"] == "docusaurus start --port 4000"

    def test_overwrite_allowed(self):
        result = safe_package_json_merge(
            self.EXISTING, self.INCOMING, preserve_existing=False, allow_overwrite=True
        )
        assert result.merged["scripts"]["start"] == "docusaurus start"
        assert result.conflicts[0].resolution == USE_INCOMING


class TestMergeSimpleFields:
    """description, license and similar fields."""

    def test_missing_field_added(self):
        result = safe_package_json_merge({}, {"license": "MIT"})
        assert result.merged["license"] == "MIT"
        assert result.conflicts == []

    def test_differing_field_always_kept(self):
        result = safe_package_json_merge(
            {"description": "Mine"},
            {"description": "Generated"},
            preserve_existing=False,
            allow_overwrite=True,
        )
        assert result.merged["description"] == "Mine"
        assert result.conflicts[0].resolution == KEEP_EXISTING

    def test_input_not_mutated(self):
        existing = {"dependencies": {"react": "^18.0.0"}}
        safe_package_json_merge(existing, {"dependencies": {"clsx": "^2.0.0"}})
        assert existing == {"dependencies": {"react": "^18.0.0"}}

    def test_internal_error_sets_success_false(self):
        result = ConfigMerger().merge_package_json({"dependencies": ["not", "a", "dict"]}, {
            "dependencies": {"react": "^18.0.0"},
        })
        assert result.success is False
        assert result.warnings


class TestMergeSiteConfig:
    """Text merge of docusaurus.config.*."""

    def test_comment_inserted_before_config(self):
        existing = "import x from 'y';\n\nconst config = {};\nexport default config;\n"
        result = safe_site_config_merge(existing, "const config = { title: 'New' };")

        merged = result.merged
        assert merged.startswith("import x from 'y';")
        assert merged.index("Specment Integration") < merged.index("const config = {};")
        assert "// const config = { title: 'New' };" in merged
        assert result.success is True
        assert len(result.warnings) == 1

    def test_typed_declaration_is_anchor(self):
        existing = "const config: Config = {};\n"
        result = safe_site_config_merge(existing, "x")
        assert result.merged.endswith(existing)
        assert result.merged.index("// x") < result.merged.index("const config: Config")

    def test_prepended_without_anchor(self):
        existing = "module.exports = {};\n"
        result = safe_site_config_merge(existing, "x")
        assert result.merged.startswith("// ====")
        assert result.merged.endswith(existing)
        assert result.warnings


class TestVersions:
    """Version helpers."""

    @pytest.mark.parametrize("a, b, expected", [
        ("^1.2.3", "1.9.0", True),
        ("~2.0.0", "^2.5.1", True),
        ("1.0.0", "2.0.0", False),
        ("latest", "1.0.0", False),
    ])
    def test_are_versions_compatible(self, a, b, expected):
        assert are_versions_compatible(a, b) is expected

    @pytest.mark.parametrize("a, b, expected", [
        ("1.2.3", "1.2.4", "1.2.4"),
        ("^2.0.0", "1.9.9", "^2.0.0"),
        ("1.2", "1.2.0", "1.2"),
        ("1.10.0", "1.9.0", "1.10.0"),
    ])
    def test_get_higher_version(self, a, b, expected):
        assert get_higher_version(a, b) == expected

    def test_tie_returns_first(self):
        assert get_higher_version("^1.0.0", "~1.0.0") == "^1.0.0"

    def test_merger_options_default(self):
        options = MergeOptions()
        assert options.preserve_existing is True
        assert options.allow_overwrite is False
