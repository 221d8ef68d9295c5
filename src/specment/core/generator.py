"""Project generation: plan the artifacts, write them, install."""

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from specment.config import SpecmentConfig
from specment.errors import ConfigError, InstallError
from specment.features import get_integration
from specment.generators.manifest import generate_manifest, render_manifest
from specment.generators.sidebars import build_sidebars, render_sidebars
from specment.generators.site_config import build_site_config, render_site_config
from specment.generators.static_files import CUSTOM_CSS, GITIGNORE, README_TEMPLATE
from specment.locales import translate
from specment.models import ContentFile, CreateOptions, UserSelections
from specment.templates import combine_template_structures, get_template_definition
from specment.ui import formatter
from specment.utils.install import detect_package_manager, install_command, install_dependencies
from specment.utils.template_processor import TemplateProcessor, create_template_processor

logger = logging.getLogger(__name__)

BASE_DIRECTORIES = ("docs", "src/css", "src/components", "static/img")

PACKAGE_JSON = "package.json"
SITE_CONFIG = "docusaurus.config.ts"
SIDEBARS = "sidebars.ts"
CUSTOM_CSS_PATH = "src/css/custom.css"


def write_file(path: Path, content: str, force: bool = True) -> bool:
    """Write file if it doesn't exist or force is True.

    Returns True when the file was written.

    Raises:
        ConfigError: If ``path`` is an existing directory
    """
    if path.is_dir():
        raise ConfigError(f"Cannot write {path}: a directory is in the way", field=str(path))
    if path.exists() and not force:
        logger.debug("Keeping existing %s", path)
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True


@dataclass
class GenerationPlan:
    """Everything to write, fully rendered. Paths are project-relative."""

    directories: List[str] = field(default_factory=list)
    content_files: List[Tuple[str, str]] = field(default_factory=list)
    config_files: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class GenerationResult:
    project_path: Path
    files_written: List[Path] = field(default_factory=list)
    installed: bool = False
    install_error: Optional[str] = None


class ProjectGenerator:
    """Creates a documentation project from ``UserSelections``."""

    def __init__(
        self,
        selections: UserSelections,
        options: Optional[CreateOptions] = None,
        config: Optional[SpecmentConfig] = None,
        cwd: Optional[Path] = None,
        project_path: Optional[Path] = None,
        today: Optional[date] = None,
    ):
        self.selections = selections
        self.options = options or CreateOptions()
        self.config = config or SpecmentConfig()
        self.cwd = Path(cwd or Path.cwd())
        self.project_path = Path(project_path) if project_path else self.cwd / selections.project_name
        self.today = today or date.today()
        self.language = selections.language
        self.package_manager = detect_package_manager(
            self.project_path.parent, default=self.config.default_package_manager
        )

    @property
    def run_command(self) -> str:
        return "npm run" if self.package_manager == "npm" else self.package_manager

    def create_processor(self) -> TemplateProcessor:
        primary = self.selections.primary_template
        return create_template_processor(
            self.selections.project_name,
            additional_variables={
                "templateName": primary.name.value,
                "templateDisplayName": primary.display_name,
                "installCommand": " ".join(install_command(self.package_manager)),
                "runCommand": self.run_command,
            },
            conditions={f.name: f.enabled for f in self.selections.features},
            cwd=self.cwd,
        )

    def plan(self) -> GenerationPlan:
        """Render every artifact in memory.

        Raises:
            ConfigError: If a feature config or the site config is invalid
        """
        processor = self.create_processor()
        plan = GenerationPlan()

        for sample in self._sample_files():
            content = processor.process_template(sample.content) if sample.is_template else sample.content
            plan.content_files.append((sample.path, content))

        site = build_site_config(self.selections, self.config, today=self.today)
        plan.config_files = [
            (PACKAGE_JSON, render_manifest(generate_manifest(self.selections))),
            (SITE_CONFIG, render_site_config(site)),
            (SIDEBARS, render_sidebars(build_sidebars(self.selections))),
            (CUSTOM_CSS_PATH, CUSTOM_CSS),
            ("README.md", processor.process_template(README_TEMPLATE)),
            (".gitignore", GITIGNORE),
        ]

        structure = combine_template_structures(self.selections.templates)
        directories = set(BASE_DIRECTORIES)
        directories.update(f"docs/{d}" for d in structure.docs)
        directories.update(f"static/{d}" for d in structure.static)
        directories.update(f"src/{d}" for d in structure.src)
        for path, _ in plan.content_files + plan.config_files:
            parent = Path(path).parent
            if parent != Path("."):
                directories.add(parent.as_posix())
        plan.directories = sorted(directories)

        return plan

    def _sample_files(self) -> List[ContentFile]:
        files = []
        for template in self.selections.templates:
            definition = get_template_definition(template.name)
            if definition is None:
                raise ConfigError(f"Unknown template: {template.name}", field="templates")
            files.extend(definition.sample_content)

        for feature in self.selections.enabled_features:
            integration = get_integration(feature.name)
            if integration is not None:
                files.extend(integration.extra_files(feature))
        return files

    def generate(self) -> GenerationResult:
        """Create the project directory and everything in it.

        Raises:
            ConfigError: If the target exists or the configuration is invalid
        """
        if self.project_path.exists():
            raise ConfigError(
                translate(self.language, "directory_exists", value=self.selections.project_name),
                field="project_name",
            )

        plan = self.plan()
        result = GenerationResult(project_path=self.project_path)

        formatter.step(translate(self.language, "step_structure"))
        self.create_directories(plan.directories)

        formatter.step(translate(self.language, "step_content"))
        result.files_written.extend(self.write_files(plan.content_files))

        formatter.step(translate(self.language, "step_config"))
        result.files_written.extend(self.write_files(plan.config_files))

        if self.options.skip_install:
            formatter.install_remediation(
                self.language,
                "install_skipped",
                self.selections.project_name,
                " ".join(install_command(self.package_manager)),
            )
        else:
            result.installed, result.install_error = self.install()

        return result

    def create_directories(self, directories) -> None:
        self.project_path.mkdir(parents=True, exist_ok=True)
        for directory in directories:
            (self.project_path / directory).mkdir(parents=True, exist_ok=True)
            logger.debug("Created directory %s", directory)

    def write_files(self, files, force: bool = True) -> List[Path]:
        written = []
        for relative, content in files:
            path = self.project_path / relative
            if write_file(path, content, force=force):
                formatter.sub_step(relative)
                written.append(path)
        return written

    def install(self) -> Tuple[bool, Optional[str]]:
        """Install dependencies; failures become a warning with remediation."""
        formatter.install_start(self.language, self.package_manager)
        try:
            install_dependencies(
                self.project_path,
                self.package_manager,
                timeout=self.config.install_timeout_seconds,
                verbose=self.options.verbose,
            )
        except InstallError as e:
            logger.warning("Dependency installation failed: %s", e)
            formatter.install_remediation(
                self.language,
                "install_failed",
                self.selections.project_name,
                " ".join(install_command(self.package_manager)),
            )
            return False, str(e)

        formatter.success(translate(self.language, "install_done"))
        return True, None
