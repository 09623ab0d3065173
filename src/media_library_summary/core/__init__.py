"""核心流程模組。"""

from .content_summary import COLUMNS, ContentSummary
from .metadata_reader import MetadataReadError, build_directories, read_directories
from .row_builder import build_row
from .scanner import LibraryScanner, ScanResult

__all__ = [
    "COLUMNS",
    "ContentSummary",
    "LibraryScanner",
    "MetadataReadError",
    "ScanResult",
    "build_directories",
    "build_row",
    "read_directories",
]
