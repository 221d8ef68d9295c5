"""Variable substitution for template content.

Syntax:
- ``{{name}}`` is replaced by the variable's value. Unknown names are
  left as-is and logged.
- ``{{#flag}}...{{/flag}}`` keeps the inner text when ``flag`` is true
  and drops the whole block when false. Blocks do not nest; the first
  matching close tag ends a block.

Anything else, including single braces and unterminated tokens, passes
through unchanged.
"""

import logging
import re
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

from specment.errors import TemplateError
from specment.git import get_user_info

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "my-project"

_TOKEN = re.compile(r"\{\{(\w+)\}\}")
_BLOCK = re.compile(r"\{\{#(\w+)\}\}(.*?)\{\{/\1\}\}", re.DOTALL)


def derive_case_names(name: str) -> Dict[str, str]:
    """Derive camel/Pascal/CONSTANT/kebab variants of a kebab-case name.

    >>> derive_case_names("my-awesome-project")["projectNameCamel"]
    'myAwesomeProject'
    """
    segments = [s for s in name.split("-") if s]

    if len(segments) <= 1:
        camel = name
    else:
        camel = segments[0].lower() + "".join(s[:1].upper() + s[1:] for s in segments[1:])

    return {
        "projectNameCamel": camel,
        "projectNamePascal": camel[:1].upper() + camel[1:],
        "projectNameConstant": name.replace("-", "_").upper(),
        "projectNameKebab": name,
    }


class TemplateProcessor:
    """Substitutes variables and resolves conditional blocks."""

    def __init__(
        self,
        variables: Optional[Mapping[str, str]] = None,
        conditions: Optional[Mapping[str, bool]] = None,
        today: Optional[date] = None,
    ):
        today = today or date.today()
        self.variables: Dict[str, str] = {
            "projectName": DEFAULT_PROJECT_NAME,
            "author": "Unknown",
            "email": "",
            "date": today.isoformat(),
            "year": str(today.year),
            "description": "",
        }
        if variables:
            self.variables.update({k: v for k, v in variables.items() if v is not None})
        self.conditions: Dict[str, bool] = dict(conditions or {})

    def set_variable(self, name: str, value: str) -> None:
        self.variables[name] = value

    def set_variables(self, variables: Mapping[str, str]) -> None:
        self.variables.update(variables)

    def set_condition(self, name: str, value: bool) -> None:
        self.conditions[name] = bool(value)

    def get_variables(self) -> Dict[str, str]:
        return dict(self.variables)

    def generate_derived_variables(self) -> None:
        """Add case variants of the current project name."""
        self.set_variables(derive_case_names(self.variables["projectName"]))

    def process_template(self, template: str) -> str:
        """Resolve conditional blocks, then substitute variables."""
        return _TOKEN.sub(self._substitute, _BLOCK.sub(self._resolve_block, template))

    def _resolve_block(self, match: "re.Match") -> str:
        name, body = match.group(1), match.group(2)
        if name not in self.conditions:
            logger.warning("Template condition '%s' is not defined", name)
            return match.group(0)
        return body if self.conditions[name] else ""

    def _substitute(self, match: "re.Match") -> str:
        name = match.group(1)
        value = self.variables.get(name)
        if value is None:
            logger.warning("Template variable '%s' is not defined", name)
            return match.group(0)
        return value

    def process_template_file(self, template_path: Path) -> str:
        """Read a file and process its content.

        Raises:
            TemplateError: If the file cannot be read
        """
        try:
            content = Path(template_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(
                f"Failed to process template file {template_path}: {e}",
                path=str(template_path),
            ) from e
        return self.process_template(content)

    def process_template_files(self, template_paths: Iterable[Path]) -> Dict[str, str]:
        return {str(path): self.process_template_file(path) for path in template_paths}


def create_template_processor(
    project_name: str,
    additional_variables: Optional[Mapping[str, str]] = None,
    conditions: Optional[Mapping[str, bool]] = None,
    cwd: Optional[Path] = None,
) -> TemplateProcessor:
    """Processor seeded with project, git user and derived variables."""
    user = get_user_info(cwd=cwd)
    variables = {
        "projectName": project_name,
        "author": user.get("name"),
        "email": user.get("email"),
        "description": f"Documentation for {project_name}",
    }
    if additional_variables:
        variables.update(additional_variables)

    processor = TemplateProcessor(variables, conditions)
    processor.generate_derived_variables()
    return processor
