"""資料模型模組。"""

from .error_record import READ_FAILED, ErrorLevel, ProcessError
from .metadata_directory import (
    MAKERNOTE_MARKER,
    TAG_EXIF_VERSION,
    TAG_IMAGE_HEIGHT,
    TAG_IMAGE_WIDTH,
    TAG_MAKE,
    TAG_MAKERNOTE,
    TAG_MODEL,
    DirectoryKind,
    MetadataDirectory,
)
from .summary_row import SummaryRow

__all__ = [
    "DirectoryKind",
    "ErrorLevel",
    "MAKERNOTE_MARKER",
    "MetadataDirectory",
    "ProcessError",
    "READ_FAILED",
    "SummaryRow",
    "TAG_EXIF_VERSION",
    "TAG_IMAGE_HEIGHT",
    "TAG_IMAGE_WIDTH",
    "TAG_MAKE",
    "TAG_MAKERNOTE",
    "TAG_MODEL",
]
