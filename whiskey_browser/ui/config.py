from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from whiskey_browser.config.model import GlobalConfig
from whiskey_browser.core.collection import Collection


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    collection_names: List[str] = field(default_factory=list)
    collection_by_name: Mapping[str, Collection] = field(default_factory=dict)
    default_collection: Optional[str] = None

    def collection(self, name: Optional[str]) -> Optional[Collection]:
        if not name:
            return None
        return self.collection_by_name.get(name)

    def validate(self) -> None:
        """Ensure a default collection is resolvable before the app starts."""
        if self.default_collection is not None and self.default_collection not in self.collection_names:
            raise RuntimeError(
                f"AppConfig.default_collection '{self.default_collection}' is not configured."
            )
