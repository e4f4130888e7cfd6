from __future__ import annotations

import json

import pytest

from whiskey_browser.config.loader import load_collection_registry, load_global_config
from whiskey_browser.core.exceptions import ConfigError


def _write_config(root, global_raw, collections):
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(global_raw))
    cdir = root / "collections"
    cdir.mkdir(exist_ok=True)
    for filename, raw in collections.items():
        (cdir / filename).write_text(raw if isinstance(raw, str) else json.dumps(raw))


def test_load_global_config_reads_collections(tmp_path):
    root = tmp_path / "config"
    _write_config(
        root,
        {"ui_title": "My Bar", "default_collection": "Home", "data_root": "../data"},
        {
            "a.json": {"name": "Home", "file": "home.json"},
            "b.json": {"name": "Office", "file": "office.json"},
        },
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "My Bar"
    assert cfg.default_collection == "Home"
    assert cfg.data_root == (tmp_path / "data").resolve()
    assert [c.name for c in cfg.collections] == ["Home", "Office"]


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_broken_collection_configs_are_skipped(tmp_path):
    root = tmp_path / "config"
    _write_config(
        root,
        {},
        {
            "a.json": "{not json",
            "b.json": {"name": "No file"},
            "c.json": {"name": "Good", "file": "good.json"},
        },
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "Whiskey Collection"
    assert [c.name for c in cfg.collections] == ["Good"]


def test_registry_rejects_duplicate_names(tmp_path):
    root = tmp_path / "config"
    _write_config(
        root,
        {},
        {
            "a.json": {"name": "Home", "file": "a.json"},
            "b.json": {"name": "Home", "file": "b.json"},
        },
    )

    with pytest.raises(ConfigError):
        load_collection_registry(root)


def test_registry_maps_names(tmp_path):
    root = tmp_path / "config"
    _write_config(root, {}, {"a.json": {"name": "Home", "file": "a.json"}})

    _global, cfg_by_name = load_collection_registry(root)

    assert list(cfg_by_name) == ["Home"]
    assert cfg_by_name["Home"].path.name == "a.json"
