from __future__ import annotations

from pathlib import Path
from typing import Dict

from pydantic import AliasChoices, BaseModel, Field

DEFAULT_FOLDER_ORDER = 999


class FolderEntryConfig(BaseModel):
    display_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("display_name", "displayName", "title"),
    )
    order: int = DEFAULT_FOLDER_ORDER


class NavigationConfig(BaseModel):
    """Static sidebar configuration: per-folder labels and ranks."""

    folders: Dict[str, FolderEntryConfig] = Field(default_factory=dict)
    docs_dir: Path | None = None
    pattern: str | None = Field(default=None, description="Glob for documents, e.g. **/*.md")

    def resolve_paths(self, base_path: Path) -> "NavigationConfig":
        values = self.model_dump()
        raw = values.get("docs_dir")
        if raw is not None:
            values["docs_dir"] = (base_path / Path(raw)).resolve() if not Path(raw).is_absolute() else Path(raw)
        return NavigationConfig.model_validate(values)


__all__ = ["DEFAULT_FOLDER_ORDER", "FolderEntryConfig", "NavigationConfig"]
