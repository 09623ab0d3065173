"""預設設定值。"""

DEFAULT_OUTPUT_FILE_NAME = "ContentSummary.md"
DEFAULT_RAW_BASE_URL = (
    "https://raw.githubusercontent.com/drewnoakes/metadata-extractor-images/master"
)
DEFAULT_EXTENSION_EQUIVALENCE = {"jpeg": "jpg", "tiff": "tif"}

DEFAULT_CONFIG = {
    "extension_equivalence": dict(DEFAULT_EXTENSION_EQUIVALENCE),
    "file_extensions": [
        ".jpg",
        ".jpeg",
        ".tif",
        ".tiff",
        ".png",
        ".webp",
        ".heic",
        ".heif",
    ],
    "scan": {
        "excluded_patterns": ["metadata", ".git"],
    },
    "output": {
        "file_name": DEFAULT_OUTPUT_FILE_NAME,
        "raw_base_url": DEFAULT_RAW_BASE_URL,
    },
    "logging": {
        "error_log": "error.log",
    },
}
