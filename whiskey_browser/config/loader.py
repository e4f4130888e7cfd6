from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from whiskey_browser.config.model import CollectionConfig, GlobalConfig
from whiskey_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _read_collection_configs(collections_dir: Path) -> List[CollectionConfig]:
    collections: List[CollectionConfig] = []

    files = sorted(collections_dir.glob("*.json"))
    if not files:
        logger.warning(f"No .json files found in {collections_dir}")

    for idx, config_file in enumerate(files):
        logger.info(f"Loading collection config: {config_file.name}")
        try:
            with config_file.open() as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load {config_file.name}: {e}")
            continue

        if not isinstance(raw, dict) or "file" not in raw:
            logger.error(
                "Collection config has no 'file' entry; skipping",
                extra={"config_file": str(config_file)},
            )
            continue

        collections.append(CollectionConfig.from_raw(raw, source_path=config_file, index=idx))

    return collections


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout:

        <root>/global.json
        <root>/collections/*.json
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    collections_dir = root / "collections"
    if collections_dir.is_dir():
        logger.info(f"Scanning for collection configurations in: {collections_dir}")
        collections = _read_collection_configs(collections_dir)
    else:
        logger.warning(f"Collections directory not found at: {collections_dir}")
        collections = []

    data_root_raw = raw_global.get("data_root")
    if data_root_raw is None:
        data_root = None
    else:
        data_root_path = Path(data_root_raw)
        if data_root_path.is_absolute():
            data_root = data_root_path
        else:
            data_root = (root / data_root_path).resolve()

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Whiskey Collection"),
        default_collection=raw_global.get("default_collection"),
        collections=collections,
        data_root=data_root,
        config_root=root,
    )


def load_collection_registry(path: Path) -> Tuple[GlobalConfig, Dict[str, CollectionConfig]]:
    """
    Load global config + collection config objects only (records are NOT read).
    Returns mapping of collection name -> CollectionConfig.
    """
    global_config = load_global_config(path)

    cfg_by_name: Dict[str, CollectionConfig] = {}
    duplicates: List[str] = []

    for cfg in global_config.collections:
        if cfg.name in cfg_by_name:
            duplicates.append(cfg.name)
            continue
        cfg_by_name[cfg.name] = cfg

    if duplicates:
        raise ConfigError(f"Duplicate collection names in config: {sorted(set(duplicates))}")

    if not cfg_by_name:
        logger.warning(f"No collections configured under: {path}")

    logger.info(
        "Collection registry loaded (lazy mode; records not read)",
        extra={
            "config_root": str(path),
            "n_collection_configs": len(cfg_by_name),
            "collection_names": sorted(cfg_by_name.keys()),
        },
    )

    return global_config, cfg_by_name
