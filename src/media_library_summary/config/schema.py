"""設定檔驗證邏輯。"""

from __future__ import annotations

from typing import Any


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def validate_config(config: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    def add_error(path: str, message: str) -> None:
        errors.append(f"{path}: {message}")

    def section(name: str) -> dict[str, Any]:
        value = config.get(name, {})
        if not isinstance(value, dict):
            add_error(name, "必須是物件")
            return {}
        return value

    equivalence = config.get("extension_equivalence", {})
    if not isinstance(equivalence, dict):
        add_error("extension_equivalence", "必須是字串對應表")
    else:
        for key, value in equivalence.items():
            if not isinstance(key, str) or not isinstance(value, str) or not value.strip():
                add_error(f"extension_equivalence.{key}", "必須是非空字串")
        chained = set(equivalence) & set(equivalence.values())
        if chained:
            add_error("extension_equivalence", f"對應目標不可再被對應: {sorted(chained)}")

    file_extensions = config.get("file_extensions", [])
    if not _is_str_list(file_extensions):
        add_error("file_extensions", "必須是字串清單")
    elif any(not item.startswith(".") for item in file_extensions):
        add_error("file_extensions", "副檔名必須以 '.' 開頭")

    scan = section("scan")
    excluded_patterns = scan.get("excluded_patterns", [])
    if not _is_str_list(excluded_patterns):
        add_error("scan.excluded_patterns", "必須是字串清單")

    output = section("output")
    file_name = output.get("file_name")
    raw_base_url = output.get("raw_base_url")
    if not isinstance(file_name, str) or not file_name.strip():
        add_error("output.file_name", "必須是非空字串")
    elif "/" in file_name or "\\" in file_name:
        add_error("output.file_name", "不可包含路徑分隔符號")
    if not isinstance(raw_base_url, str) or not raw_base_url.strip():
        add_error("output.raw_base_url", "必須是非空字串")
    elif not raw_base_url.startswith(("http://", "https://")):
        add_error("output.raw_base_url", "必須是 http(s) 網址")

    error_log = section("logging").get("error_log", "error.log")
    if not isinstance(error_log, str) or not error_log.strip():
        add_error("logging.error_log", "必須是非空字串")

    return errors
