"""Data classes passed between the pipeline stages."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from specment.locales import Language, DEFAULT_LANGUAGE

PROJECT_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


class TemplateName(str, Enum):
    """Template kinds known to the registry."""

    CLASSIC_SPEC = "classic-spec"
    PROJECT_ANALYSIS = "project-analysis"
    REQUIREMENTS = "requirements"
    EXTERNAL_DESIGN = "external-design"
    INTERNAL_DESIGN = "internal-design"
    API_SPEC = "api-spec"


@dataclass(frozen=True)
class TemplateDescriptor:
    """A template as offered to the user, localized."""

    name: TemplateName
    display_name: str
    description: str
    features: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class FeatureSelection:
    """A registry feature and whether the user enabled it."""

    name: str
    display_name: str
    description: str
    enabled: bool = False
    plugin: Optional[str] = None
    config: Optional[Dict[str, Any]] = None

    def with_enabled(self, enabled: bool) -> "FeatureSelection":
        return FeatureSelection(
            name=self.name,
            display_name=self.display_name,
            description=self.description,
            enabled=enabled,
            plugin=self.plugin,
            config=self.config,
        )


@dataclass(frozen=True)
class UserSelections:
    """Everything the collector resolved for one run."""

    project_name: str
    templates: Tuple[TemplateDescriptor, ...]
    features: Tuple[FeatureSelection, ...]
    language: Language = DEFAULT_LANGUAGE

    @property
    def primary_template(self) -> TemplateDescriptor:
        return self.templates[0]

    @property
    def enabled_features(self) -> Tuple[FeatureSelection, ...]:
        return tuple(f for f in self.features if f.enabled)

    def is_enabled(self, feature_name: str) -> bool:
        return any(f.name == feature_name and f.enabled for f in self.features)


@dataclass
class CreateOptions:
    """Options given on the command line."""

    template: Optional[str] = None
    skip_install: bool = False
    verbose: bool = False
    language: Optional[Language] = None
    features: Optional[Tuple[str, ...]] = None


# =============================================================================
# Registry entries
# =============================================================================

@dataclass(frozen=True)
class DirectoryStructure:
    """Subdirectories to create under docs/, static/ and src/."""

    docs: Tuple[str, ...] = ()
    static: Tuple[str, ...] = ()
    src: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ContentFile:
    """A sample file; is_template content goes through the processor."""

    path: str
    content: str
    is_template: bool = True


@dataclass(frozen=True)
class SidebarGroup:
    """A named sidebar built from one docs directory."""

    sidebar_id: str
    label: Dict[Language, str]
    dir_name: str


@dataclass(frozen=True)
class NavMapping:
    """Navbar entry a template contributes."""

    label: Dict[Language, str]
    doc_id: str


@dataclass(frozen=True)
class TemplateConfig:
    """Static registry entry for one template kind."""

    name: TemplateName
    display_name: Dict[Language, str]
    description: Dict[Language, str]
    features: Tuple[str, ...]
    title: str
    tagline: str
    directory_structure: DirectoryStructure
    sample_content: Tuple[ContentFile, ...] = ()
    sidebars: Tuple[SidebarGroup, ...] = ()
    default_features: Tuple[str, ...] = ()
    nav: Optional[NavMapping] = None
    auto_enabled_features: Tuple[str, ...] = field(default=())

    def describe(self, language: Language) -> TemplateDescriptor:
        return TemplateDescriptor(
            name=self.name,
            display_name=self.display_name[language],
            description=self.description[language],
            features=frozenset(self.features),
        )
