"""
MedHistory — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Легкого доступу через config.export.indent
- Серіалізації в YAML
"""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict


# =============================================================================
# STORE CONFIGURATION
# =============================================================================

@dataclass
class StoreConfig:
    """Параметри Record Store"""

    # Заповнювати нову форму стандартним списком захворювань
    seed_defaults: bool = True


# =============================================================================
# EXPORT CONFIGURATION
# =============================================================================

@dataclass
class ExportConfig:
    """Параметри експорту в JSON"""

    indent: int = 2
    filename_prefix: str = "medical-history"
    ensure_ascii: bool = False


# =============================================================================
# IMPORT CONFIGURATION
# =============================================================================

@dataclass
class ImportConfig:
    """Параметри імпорту з JSON"""

    encoding: str = "utf-8-sig"  # BOM допускається
    accept_legacy_key: bool = True  # ключ "diseases" замість "entries"
    error_message: str = "Error loading file. Please ensure it's a valid JSON file."


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class MedHistoryConfig:
    """
    Головна конфігурація MedHistory

    Приклад використання:
        config = MedHistoryConfig()
        print(config.export.indent)  # 2
        print(config.import_.encoding)  # utf-8-sig
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "MedHistory"

    # Компоненти
    store: StoreConfig = field(default_factory=StoreConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    import_: ImportConfig = field(default_factory=ImportConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MedHistoryConfig":
        """Створити конфігурацію зі словника (наприклад, з YAML)"""
        return _build(cls, data or {})


def _build(cls, data: Dict[str, Any]):
    kwargs = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        # Вкладені секції
        nested = f.default_factory if is_dataclass(f.default_factory) else None
        if nested is not None and isinstance(value, dict):
            value = _build(nested, value)
        kwargs[f.name] = value
    return cls(**kwargs)


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> MedHistoryConfig:
    """Отримати конфігурацію за замовчуванням"""
    return MedHistoryConfig()
