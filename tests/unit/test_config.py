import json
from pathlib import Path

from media_library_summary.config import ConfigManager
from media_library_summary.core import ContentSummary


def test_config_load_defaults() -> None:
    config = ConfigManager()
    assert config.get("extension_equivalence") == {"jpeg": "jpg", "tiff": "tif"}
    assert config.get("output.file_name") == "ContentSummary.md"
    assert config.get("output.raw_base_url").startswith("https://")
    assert ".jpg" in config.get("file_extensions")
    assert "metadata" in config.get("scan.excluded_patterns")
    assert config.validate_config() == []


def test_config_user_file_overrides(tmp_path: Path) -> None:
    user_path = tmp_path / "user.json"
    user_path.write_text(
        json.dumps({"output": {"file_name": "Summary.md"}}), encoding="utf-8"
    )

    config = ConfigManager(user_path)

    assert config.get("output.file_name") == "Summary.md"
    assert config.get("output.raw_base_url").startswith("https://")
    assert ContentSummary.from_config(config).file_name == "Summary.md"


def test_config_validation() -> None:
    config = ConfigManager()
    config.set("output.raw_base_url", "ftp://example.com")
    config.set("file_extensions", ["jpg"])
    config.set("extension_equivalence", {"jpeg": "jpg", "jpg": "jpe"})

    errors = config.validate_config()

    assert any(error.startswith("output.raw_base_url") for error in errors)
    assert any(error.startswith("file_extensions") for error in errors)
    assert any(error.startswith("extension_equivalence") for error in errors)


def test_config_set_nested_keeps_siblings() -> None:
    config = ConfigManager()
    config.set("output.file_name", "Other.md")

    assert config.get("output.file_name") == "Other.md"
    assert config.get("output.raw_base_url").startswith("https://")
    assert config.get("output.missing", "fallback") == "fallback"


def test_config_validation_rejects_non_object_sections(tmp_path: Path) -> None:
    user_path = tmp_path / "user.json"
    user_path.write_text(
        json.dumps({"scan": "metadata", "output": ["x"], "logging": 1}), encoding="utf-8"
    )

    errors = ConfigManager(user_path).validate_config()

    assert "scan: 必須是物件" in errors
    assert "output: 必須是物件" in errors
    assert "logging: 必須是物件" in errors
