"""Typed records for the known sections of the site configuration."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Preset:
    """A Docusaurus preset entry: ``[name, options]``."""

    name: str
    options: Dict[str, Any] = field(default_factory=dict)

    def to_value(self) -> list:
        return [self.name, self.options]


@dataclass
class NavItem:
    """A navbar item. Unset fields are left out of the output."""

    label: Optional[str] = None
    position: str = "left"
    type: Optional[str] = None
    doc_id: Optional[str] = None
    to: Optional[str] = None
    href: Optional[str] = None

    def to_dict(self) -> dict:
        data = {}
        if self.type:
            data["type"] = self.type
        if self.label:
            data["label"] = self.label
        data["position"] = self.position
        if self.doc_id:
            data["docId"] = self.doc_id
        if self.to:
            data["to"] = self.to
        if self.href:
            data["href"] = self.href
        return data
