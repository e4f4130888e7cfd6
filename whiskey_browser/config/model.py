from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class CollectionConfig:
    """
    Parsed config entry for a single collection.
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Collection {self.index}")

    @property
    def path(self) -> Path:
        return Path(self.raw["file"])

    @property
    def owner(self) -> Optional[str]:
        return self.raw.get("owner")

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Path, index: int) -> CollectionConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class GlobalConfig:
    ui_title: str
    default_collection: Optional[str]
    collections: List[CollectionConfig] = field(default_factory=list)
    data_root: Optional[Path] = None
    config_root: Optional[Path] = None
