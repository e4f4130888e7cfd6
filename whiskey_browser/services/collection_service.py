from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

from whiskey_browser.config.model import CollectionConfig
from whiskey_browser.core.collection import Collection
from whiskey_browser.core.collection_loader import from_config
from whiskey_browser.core.exceptions import CollectionLoadError, RecordSchemaError

logger = logging.getLogger(__name__)


class CollectionManager(Mapping[str, Collection]):
    """
    Lazily loads collections by name.
    Implements the Mapping interface so the UI layer can treat it as a dict.
    """

    def __init__(self, cfg_by_name: Dict[str, CollectionConfig], data_root: Optional[Path] = None):
        self._cfg_by_name = cfg_by_name
        self._data_root = data_root
        self._loaded: Dict[str, Collection] = {}

    def __getitem__(self, name: str) -> Collection:
        if name in self._loaded:
            return self._loaded[name]

        cfg = self._cfg_by_name.get(name)
        if cfg is None:
            raise KeyError(f"Unknown collection '{name}'")

        try:
            logger.info("Lazy-loading collection", extra={"collection": cfg.name, "path": str(cfg.path)})
            collection = from_config(cfg, self._data_root)
        except (CollectionLoadError, RecordSchemaError) as e:
            logger.error(
                "Collection failed to load",
                extra={"collection": cfg.name, "error": str(e)},
            )
            raise

        self._loaded[name] = collection
        return collection

    def __iter__(self) -> Iterator[str]:
        return iter(self._cfg_by_name)

    def __len__(self) -> int:
        return len(self._cfg_by_name)

    def get(self, name: str, default=None) -> Collection | None:
        try:
            return self[name]
        except KeyError:
            return default

    def is_loaded(self, name: str) -> bool:
        return name in self._loaded

    def names(self) -> list[str]:
        return sorted(self._cfg_by_name)

    def refresh_config(self, new_cfg_by_name: Dict[str, CollectionConfig]) -> None:
        """
        Replace the configuration map and drop every loaded collection.
        """
        self._cfg_by_name = new_cfg_by_name
        self._loaded.clear()
