from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Optional

from whiskey_browser.config.model import CollectionConfig
from whiskey_browser.core.collection import Collection
from whiskey_browser.core.exceptions import CollectionLoadError, RecordSchemaError
from whiskey_browser.core.record import Whiskey

logger = logging.getLogger(__name__)

DATA_ROOT_ENV = "WHISKEY_BROWSER_DATA_ROOT"


def resolve_collection_path(cfg: CollectionConfig, data_root: Optional[Path] = None) -> Path:
    """
    Resolve a collection's record file.

    Relative paths are tried against, in order: the configured data_root,
    $WHISKEY_BROWSER_DATA_ROOT, and the config root (parent of collections/).
    """
    path = cfg.path
    if path.is_absolute():
        return path

    candidates: List[Path] = []
    if data_root is not None:
        candidates.append(Path(data_root) / path)
    env_root = os.environ.get(DATA_ROOT_ENV)
    if env_root:
        candidates.append(Path(env_root) / path)
    candidates.append(cfg.source_path.parent.parent / path)

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    return candidates[0]


def parse_records(raw: Any, collection_name: str = "") -> List[Whiskey]:
    """
    Build Whiskey records from a decoded JSON array.

    Raises RecordSchemaError for records without an integer id, and for
    ids that appear more than once.
    """
    if not isinstance(raw, list):
        raise CollectionLoadError(
            f"Collection '{collection_name}' must be a JSON array of records, "
            f"got {type(raw).__name__}"
        )

    records: List[Whiskey] = []
    seen: set[int] = set()
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise RecordSchemaError(
                f"Collection '{collection_name}': entry {position} is not an object"
            )
        record = Whiskey.from_dict(item)
        if record.id in seen:
            raise RecordSchemaError(
                f"Collection '{collection_name}': duplicate record id {record.id}"
            )
        seen.add(record.id)
        records.append(record)

    return records


def from_config(cfg: CollectionConfig, data_root: Optional[Path] = None) -> Collection:
    """
    Materialise a Collection from a CollectionConfig.
    """
    path = resolve_collection_path(cfg, data_root)
    if not path.is_file():
        raise CollectionLoadError(f"Collection file not found at {path}.")

    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(
            "Collection file is not valid JSON",
            extra={"collection": cfg.name, "path": str(path), "error": str(e)},
        )
        raise CollectionLoadError(f"Invalid JSON in {path}: {e}") from e

    try:
        records = parse_records(raw, cfg.name)
    except RecordSchemaError as e:
        logger.error(
            "Collection records failed validation",
            extra={"collection": cfg.name, "path": str(path), "error": str(e)},
        )
        raise

    logger.info(
        "Loaded collection",
        extra={"collection": cfg.name, "path": str(path), "n_records": len(records)},
    )

    return Collection(
        name=cfg.name,
        records=records,
        owner=cfg.owner,
        file_path=path,
    )
