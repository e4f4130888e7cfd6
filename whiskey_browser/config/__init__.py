from .model import CollectionConfig, GlobalConfig
from .loader import load_collection_registry, load_global_config

__all__ = [
    "CollectionConfig",
    "GlobalConfig",
    "load_collection_registry",
    "load_global_config",
]
