"""Command candidate for launcher palettes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Command:
    """A launchable command ranked by its label."""

    id: str                              # Unique identifier (e.g., "docs")
    label: str                           # Text matched and shown (e.g., "Open docs")
    description: str | None = None       # Optional longer description
    keybinding: str | None = None        # Keyboard shortcut (e.g., "d")
    hidden: bool = False                 # Excluded from the palette

    def pattern(self) -> str:
        return self.label

    def to_dict(self) -> dict[str, Any]:
        """Serialize, omitting unset optional fields."""
        result: dict[str, Any] = {"id": self.id, "label": self.label}
        if self.description:
            result["description"] = self.description
        if self.keybinding:
            result["keybinding"] = self.keybinding
        if self.hidden:
            result["hidden"] = True
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Command":
        # Label defaults to the id for terse config entries
        return cls(
            id=data["id"],
            label=data.get("label") or data["id"],
            description=data.get("description"),
            keybinding=data.get("keybinding"),
            hidden=data.get("hidden", False),
        )
