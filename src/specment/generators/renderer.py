"""Serialize configuration trees to JavaScript / TypeScript source.

Every generated ``.ts`` config goes through ``to_js``; nothing else in
the package builds config source by string concatenation.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Iterable

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True)
class JsExpr:
    """A raw JavaScript expression emitted verbatim (e.g. ``prismThemes.github``)."""

    source: str


def _key(name: str) -> str:
    return name if _IDENTIFIER.fullmatch(name) else _string(name)


def _string(value: str) -> str:
    return "'" + json.dumps(value, ensure_ascii=False)[1:-1].replace("\\\"", "\"").replace("'", "\\'") + "'"


def to_js(value: Any, indent: int = 2, level: int = 0) -> str:
    """Render a value as a JavaScript literal.

    Supports dicts, lists/tuples, strings, numbers, booleans, None and
    ``JsExpr``. Objects with a ``to_value()`` or ``to_dict()`` method are
    converted first.
    """
    if isinstance(value, JsExpr):
        return value.source
    if hasattr(value, "to_value"):
        return to_js(value.to_value(), indent, level)
    if hasattr(value, "to_dict"):
        return to_js(value.to_dict(), indent, level)
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return _string(value)

    pad = " " * (indent * (level + 1))
    closing = " " * (indent * level)

    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = [f"{pad}{_key(str(k))}: {to_js(v, indent, level + 1)}," for k, v in value.items()]
        return "{\n" + "\n".join(lines) + "\n" + closing + "}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        lines = [f"{pad}{to_js(v, indent, level + 1)}," for v in value]
        return "[\n" + "\n".join(lines) + "\n" + closing + "]"

    raise TypeError(f"Cannot render {type(value).__name__} as JavaScript")


def render_module(
    name: str,
    value: Any,
    imports: Iterable[str] = (),
    type_annotation: str = "",
    header: str = "",
) -> str:
    """Render ``const <name> = <value>; export default <name>;`` with imports."""
    parts = []
    if header:
        parts.append(header.rstrip() + "\n")
    imports = list(imports)
    if imports:
        parts.append("\n".join(imports) + "\n")
    annotation = f": {type_annotation}" if type_annotation else ""
    parts.append(f"const {name}{annotation} = {to_js(value)};\n")
    parts.append(f"export default {name};\n")
    return "\n".join(parts)
