"""設定管理器。"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Optional

from . import defaults
from .schema import validate_config


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigManager:
    """預設值、使用者 JSON 與執行期覆寫三層合併，以點號路徑存取。"""

    def __init__(self, user_config_path: Optional[Path] = None) -> None:
        self._config = copy.deepcopy(defaults.DEFAULT_CONFIG)
        if user_config_path is not None and user_config_path.exists():
            with user_config_path.open("r", encoding="utf-8") as handle:
                self._config = _merge(self._config, json.load(handle))

    def get(self, key: str, default: Any = None) -> Any:
        current: Any = self._config
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key: str, value: Any) -> None:
        *parents, leaf = key.split(".")
        override: dict[str, Any] = {leaf: value}
        for part in reversed(parents):
            override = {part: override}
        self._config = _merge(self._config, override)

    def validate_config(self) -> list[str]:
        return validate_config(self._config)
