"""Tests for specment.core.integrator."""

import json

import pytest

from specment.config import SpecmentConfig
from specment.core.integrator import Integrator
from specment.errors import ConfigError

EXISTING_CONFIG = """import type { Config } from '@docusaurus/types';

const config: Config = {
  title: 'Existing Site',
};

export default config;
"""


@pytest.fixture
def existing_project(tmp_path):
    """A minimal Docusaurus project with its own package.json and config."""
    root = tmp_path / "site"
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "intro.md").write_text("# Mine\n")
    (root / "package.json").write_text(json.dumps({
        "name": "site",
        "description": "My site",
        "scripts": {"start": "docusaurus start --port 4000"},
        "dependencies": {"@docusaurus/core": "3.0.0", "react": "^18.0.0"},
    }))
    (root / "docusaurus.config.ts").write_text(EXISTING_CONFIG)
    (root / "sidebars.js").write_text("module.exports = {};\n")
    return root


def _integrator(root, selections, **kwargs):
    return Integrator(root, selections, config=SpecmentConfig(), **kwargs)


class TestIntegrate:
    """Tests for Integrator.integrate()."""

    def test_merges_package_json(self, existing_project, make_selections):
        selections = make_selections("site", ["classic-spec"], ["mermaid"])
        result = _integrator(existing_project, selections).integrate()

        manifest = json.loads((existing_project / "package.json").read_text())
        assert manifest["scripts"]["start"] == "docusaurus start --port 4000"
        assert manifest["dependencies"]["@docusaurus/core"] == "3.0.0"
        assert "@docusaurus/theme-mermaid" in manifest["dependencies"]
        assert manifest["description"] == "My site"

        paths = {c.path for c in result.conflicts}
        assert "scripts.start" in paths
        assert "dependencies.@docusaurus/core" in paths
        assert all(c.resolution == "keep_existing" for c in result.conflicts)
        assert result.success is True

    def test_overwrite_lets_generated_values_win(self, existing_project, make_selections):
        selections = make_selections("site", ["classic-spec"])
        _integrator(existing_project, selections, overwrite=True).integrate()

        manifest = json.loads((existing_project / "package.json").read_text())
        assert manifest["scripts"]["start"] == "docusaurus start"
        assert manifest["dependencies"]["@docusaurus/core"] != "3.0.0"

    def test_site_config_gets_review_comment(self, existing_project, make_selections):
        result = _integrator(existing_project, make_selections("site")).integrate()

        merged = (existing_project / "docusaurus.config.ts").read_text()
        assert "Specment Integration" in merged
        assert merged.index("Specment Integration") < merged.index("const config: Config")
        assert "title: 'Existing Site'" in merged
        assert result.warnings

    def test_existing_files_not_overwritten(self, existing_project, make_selections):
        _integrator(existing_project, make_selections("site")).integrate()

        assert (existing_project / "docs" / "intro.md").read_text() == "# Mine\n"
        assert (existing_project / "sidebars.js").read_text() == "module.exports = {};\n"
        assert not (existing_project / "sidebars.ts").exists()

    def test_fills_in_missing_files(self, existing_project, make_selections):
        selections = make_selections("site", ["requirements"])
        result = _integrator(existing_project, selections).integrate()

        assert (existing_project / "docs" / "functional" / "intro.md").is_file()
        assert (existing_project / "src" / "css" / "custom.css").is_file()
        assert (existing_project / ".gitignore").is_file()
        assert existing_project / "README.md" in result.files_written

    def test_empty_directory_gets_generated_config(self, tmp_path, make_selections):
        root = tmp_path / "fresh"
        root.mkdir()
        _integrator(root, make_selections("fresh")).integrate()

        assert (root / "docusaurus.config.ts").read_text().startswith("// Generated by create-specment")
        assert (root / "sidebars.ts").is_file()
        assert json.loads((root / "package.json").read_text())["name"] == "fresh"

    def test_missing_target_rejected(self, tmp_path, make_selections):
        with pytest.raises(ConfigError, match="does not exist"):
            _integrator(tmp_path / "missing", make_selections("missing")).integrate()

    def test_broken_package_json_rejected(self, existing_project, make_selections):
        (existing_project / "package.json").write_text("{not json")
        before = sorted(p.relative_to(existing_project) for p in existing_project.rglob("*"))

        with pytest.raises(ConfigError, match="package.json"):
            _integrator(existing_project, make_selections("site", ["requirements"])).integrate()

        after = sorted(p.relative_to(existing_project) for p in existing_project.rglob("*"))
        assert after == before
        assert (existing_project / "package.json").read_text() == "{not json"
