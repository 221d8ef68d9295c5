"""Add specment tooling to an existing Docusaurus project."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from specment.config import SpecmentConfig
from specment.core.generator import (
    PACKAGE_JSON,
    SIDEBARS,
    SITE_CONFIG,
    ProjectGenerator,
    write_file,
)
from specment.errors import ConfigError
from specment.locales import translate
from specment.models import CreateOptions, UserSelections
from specment.ui import formatter
from specment.utils.config_merger import ConfigConflict, ConfigMerger, MergeOptions

logger = logging.getLogger(__name__)

SITE_CONFIG_NAMES = ("docusaurus.config.ts", "docusaurus.config.js")
SIDEBAR_NAMES = ("sidebars.ts", "sidebars.js")


@dataclass
class IntegrationResult:
    project_path: Path
    files_written: List[Path] = field(default_factory=list)
    conflicts: List[ConfigConflict] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    success: bool = True


class Integrator:
    """Merges generated configuration into the project at ``target``.

    Existing files are never replaced. package.json is merged key by key,
    an existing site config gets the generated one as a review comment.
    """

    def __init__(
        self,
        target: Path,
        selections: UserSelections,
        overwrite: bool = False,
        verbose: bool = False,
        config: Optional[SpecmentConfig] = None,
    ):
        self.target = Path(target)
        self.selections = selections
        self.language = selections.language
        self.merger = ConfigMerger(MergeOptions(
            preserve_existing=not overwrite,
            allow_overwrite=overwrite,
            verbose=verbose,
        ))
        self.generator = ProjectGenerator(
            selections,
            CreateOptions(skip_install=True, verbose=verbose),
            config=config,
            cwd=self.target.parent,
            project_path=self.target,
        )

    def validate_target(self) -> None:
        if not self.target.is_dir():
            raise ConfigError(
                translate(self.language, "directory_missing", value=str(self.target)),
                field="path",
            )
        if not os.access(self.target, os.W_OK):
            raise ConfigError(
                translate(self.language, "directory_not_writable", value=str(self.target)),
                field="path",
            )

    def integrate(self) -> IntegrationResult:
        """
        Raises:
            ConfigError: If the target is unusable, an existing package.json
                cannot be parsed, or the generated configuration is invalid
        """
        self.validate_target()
        plan = self.generator.plan()
        generated = dict(plan.config_files)
        existing_manifest = self._read_package_json()
        existing_site_config = self._find_site_config()
        existing_site_text = (
            existing_site_config.read_text(encoding="utf-8") if existing_site_config else None
        )
        result = IntegrationResult(project_path=self.target)

        formatter.step(translate(self.language, "step_structure"))
        self.generator.create_directories(plan.directories)

        formatter.step(translate(self.language, "step_content"))
        result.files_written.extend(self.generator.write_files(plan.content_files, force=False))

        formatter.step(translate(self.language, "step_config"))
        self._integrate_package_json(existing_manifest, generated[PACKAGE_JSON], result)
        self._integrate_site_config(existing_site_config, existing_site_text, generated[SITE_CONFIG], result)

        if not any((self.target / name).exists() for name in SIDEBAR_NAMES):
            result.files_written.extend(self.generator.write_files([(SIDEBARS, generated[SIDEBARS])]))

        others = [
            (path, content) for path, content in plan.config_files
            if path not in (PACKAGE_JSON, SITE_CONFIG, SIDEBARS)
        ]
        result.files_written.extend(self.generator.write_files(others, force=False))

        return result

    def _read_package_json(self) -> Optional[dict]:
        path = self.target / PACKAGE_JSON
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read {path}: {e}", field=PACKAGE_JSON) from e

    def _find_site_config(self) -> Optional[Path]:
        return next(
            (self.target / name for name in SITE_CONFIG_NAMES if (self.target / name).exists()),
            None,
        )

    def _integrate_package_json(self, existing: Optional[dict], content: str, result: IntegrationResult) -> None:
        if existing is None:
            result.files_written.extend(self.generator.write_files([(PACKAGE_JSON, content)]))
            return

        path = self.target / PACKAGE_JSON
        merge = self.merger.merge_package_json(existing, json.loads(content))
        self._collect(merge, result)
        if merge.success:
            write_file(path, json.dumps(merge.merged, indent=2, ensure_ascii=False) + "\n")
            formatter.sub_step(PACKAGE_JSON)
            result.files_written.append(path)

    def _integrate_site_config(
        self,
        existing_path: Optional[Path],
        existing_text: Optional[str],
        content: str,
        result: IntegrationResult,
    ) -> None:
        if existing_path is None:
            result.files_written.extend(self.generator.write_files([(SITE_CONFIG, content)]))
            return

        merge = self.merger.merge_site_config(existing_text, content)
        self._collect(merge, result)
        if merge.success:
            write_file(existing_path, merge.merged)
            formatter.sub_step(existing_path.name)
            result.files_written.append(existing_path)

    def _collect(self, merge, result: IntegrationResult) -> None:
        result.conflicts.extend(merge.conflicts)
        result.warnings.extend(merge.warnings)
        if not merge.success:
            result.success = False
            logger.warning("Merge failed: %s", "; ".join(merge.warnings))
