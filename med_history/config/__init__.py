"""MedHistory — Модуль конфігурації"""
from .settings import (
    MedHistoryConfig,
    get_default_config,
    StoreConfig,
    ExportConfig,
    ImportConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "MedHistoryConfig",
    "get_default_config",
    "StoreConfig",
    "ExportConfig",
    "ImportConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
