"""Merge generated configuration into an existing project.

Used only by ``specment-integrate``. Conflicts are returned as data; a
merge only fails (``success=False``) on an unexpected internal error.
"""

import copy
import logging
import re
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

KEEP_EXISTING = "keep_existing"
USE_INCOMING = "use_incoming"

SIMPLE_FIELDS = (
    "description",
    "keywords",
    "author",
    "license",
    "homepage",
    "repository",
    "bugs",
)

_CONFIG_ANCHOR = re.compile(r"const\s+config\s*[:=]")

INTEGRATION_COMMENT = """// ============================================================================
// Specment Integration - {timestamp}
// ============================================================================
// The following configuration was generated by specment:
//
{body}
//
// Please review and merge the relevant parts into your configuration.
// ============================================================================

"""


@dataclass
class MergeOptions:
    preserve_existing: bool = True
    allow_overwrite: bool = False
    verbose: bool = False


@dataclass
class ConfigConflict:
    path: str
    existing: Any
    incoming: Any
    resolution: str
    reason: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MergeResult:
    success: bool = True
    merged: Any = None
    conflicts: List[ConfigConflict] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class ConfigMerger:
    """Reconciles an existing package.json / site config with generated ones."""

    def __init__(self, options: Optional[MergeOptions] = None):
        self.options = options or MergeOptions()

    def merge_package_json(self, existing: Dict[str, Any], incoming: Dict[str, Any]) -> MergeResult:
        result = MergeResult(merged=copy.deepcopy(existing))

        try:
            for section in ("dependencies", "devDependencies"):
                result.merged[section] = self._merge_dependencies(
                    existing.get(section) or {},
                    incoming.get(section) or {},
                    section,
                    result,
                )

            result.merged["scripts"] = self._merge_scripts(
                existing.get("scripts") or {},
                incoming.get("scripts") or {},
                result,
            )

            self._merge_simple_fields(existing, incoming, result, SIMPLE_FIELDS)
        except Exception as e:
            logger.exception("package.json merge failed")
            result.success = False
            result.warnings.append(str(e) or "Unknown error during merge")

        return result

    def merge_site_config(self, existing: str, incoming: str) -> MergeResult:
        """Insert the generated config as a comment block for manual review.

        The block goes right before ``const config`` in the existing file,
        or at the top when that declaration is not found.
        """
        result = MergeResult(merged=existing)

        try:
            body = "\n".join(f"// {line}".rstrip() for line in incoming.splitlines())
            comment = INTEGRATION_COMMENT.format(
                timestamp=datetime.now().isoformat(timespec="seconds"),
                body=body,
            )

            match = _CONFIG_ANCHOR.search(existing)
            if match:
                result.merged = existing[:match.start()] + comment + existing[match.start():]
            else:
                result.merged = comment + existing

            result.warnings.append(
                "Site config integration is basic. Please review the generated configuration."
            )
        except Exception as e:
            logger.exception("Site config merge failed")
            result.success = False
            result.warnings.append(str(e) or "Unknown error during config merge")

        return result

    def _merge_dependencies(
        self,
        existing: Dict[str, str],
        incoming: Dict[str, str],
        section: str,
        result: MergeResult,
    ) -> Dict[str, str]:
        merged = dict(existing)
        use_incoming = not self.options.preserve_existing

        for package, version in incoming.items():
            if package not in existing:
                merged[package] = version
                if self.options.verbose:
                    result.warnings.append(f"Added new dependency: {package}@{version}")
                continue

            if existing[package] == version:
                continue

            result.conflicts.append(ConfigConflict(
                path=f"{section}.{package}",
                existing=existing[package],
                incoming=version,
                resolution=USE_INCOMING if use_incoming else KEEP_EXISTING,
                reason="Version conflict detected",
            ))
            if use_incoming:
                merged[package] = version
                result.warnings.append(f"Updated {package} from {existing[package]} to {version}")
            else:
                result.warnings.append(
                    f"Keeping existing version of {package}: {existing[package]} (incoming: {version})"
                )

        return merged

    def _merge_scripts(
        self,
        existing: Dict[str, str],
        incoming: Dict[str, str],
        result: MergeResult,
    ) -> Dict[str, str]:
        merged = dict(existing)
        use_incoming = not self.options.preserve_existing and self.options.allow_overwrite

        for script, command in incoming.items():
            if script not in existing:
                merged[script] = command
                if self.options.verbose:
                    result.warnings.append(f"Added new script: {script}")
                continue

            if existing[script] == command:
                continue

            result.conflicts.append(ConfigConflict(
                path=f"scripts.{script}",
                existing=existing[script],
                incoming=command,
                resolution=USE_INCOMING if use_incoming else KEEP_EXISTING,
                reason="Script command conflict",
            ))
            if use_incoming:
                merged[script] = command
                result.warnings.append(
                    f"Updated script '{script}' from '{existing[script]}' to '{command}'"
                )
            else:
                result.warnings.append(
                    f"Keeping existing script '{script}': {existing[script]} (incoming: {command})"
                )

        return merged

    def _merge_simple_fields(self, existing, incoming, result: MergeResult, fields) -> None:
        for name in fields:
            if not incoming.get(name):
                continue
            if not existing.get(name):
                result.merged[name] = copy.deepcopy(incoming[name])
                if self.options.verbose:
                    result.warnings.append(f"Added {name}: {incoming[name]}")
            elif existing[name] != incoming[name]:
                result.conflicts.append(ConfigConflict(
                    path=name,
                    existing=existing[name],
                    incoming=incoming[name],
                    resolution=KEEP_EXISTING,
                    reason="Field value conflict",
                ))
                result.warnings.append(
                    f"Keeping existing {name}: {existing[name]} (incoming: {incoming[name]})"
                )


def safe_package_json_merge(existing: dict, incoming: dict, **options) -> MergeResult:
    """Merge with existing values preserved unless options say otherwise."""
    return ConfigMerger(MergeOptions(**options)).merge_package_json(existing, incoming)


def safe_site_config_merge(existing: str, incoming: str, **options) -> MergeResult:
    return ConfigMerger(MergeOptions(**options)).merge_site_config(existing, incoming)


# =============================================================================
# Version helpers
# =============================================================================

def _clean_version(version: str) -> str:
    return version.strip().lstrip("^~")


def _to_int(part: str) -> Optional[int]:
    match = re.match(r"\d+", part)
    return int(match.group(0)) if match else None


def are_versions_compatible(version1: str, version2: str) -> bool:
    """True when both versions share the same major component."""
    major1 = _to_int(_clean_version(version1).split(".")[0])
    major2 = _to_int(_clean_version(version2).split(".")[0])
    if major1 is None or major2 is None:
        return False
    return major1 == major2


def get_higher_version(version1: str, version2: str) -> str:
    """Return the higher of two versions; the first one on a tie.

    Components are compared numerically left to right; missing trailing
    components count as zero.
    """
    parts1 = [_to_int(p) or 0 for p in _clean_version(version1).split(".")]
    parts2 = [_to_int(p) or 0 for p in _clean_version(version2).split(".")]

    for i in range(max(len(parts1), len(parts2))):
        v1 = parts1[i] if i < len(parts1) else 0
        v2 = parts2[i] if i < len(parts2) else 0
        if v1 > v2:
            return version1
        if v2 > v1:
            return version2

    return version1
