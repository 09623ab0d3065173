"""掃描資料夾、萃取 metadata 並餵入內容摘要。"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..config import ConfigManager
from ..models import ErrorLevel, MetadataDirectory, ProcessError, SummaryRow
from ..utils import path_utils
from ..utils.error_handler import ErrorHandler
from ..utils.logger import get_logger
from .content_summary import ContentSummary
from .metadata_reader import MetadataReadError, read_directories


@dataclass
class ScanResult:
    processed: int = 0
    skipped: int = 0
    errors: ErrorHandler = field(default_factory=ErrorHandler)
    cancelled: bool = False

    @property
    def failed(self) -> list[ProcessError]:
        return self.errors.get_by_level(ErrorLevel.RECOVERABLE)


class LibraryScanner:
    def __init__(
        self,
        config: ConfigManager,
        summary: ContentSummary,
        logger=None,
        reader: Callable[[Path], list[MetadataDirectory]] = read_directories,
    ) -> None:
        self.config = config
        self.summary = summary
        self.logger = logger or get_logger(
            self.__class__.__name__, Path(config.get("logging.error_log", "error.log"))
        )
        self.reader = reader
        self._excluded_patterns = list(config.get("scan.excluded_patterns", []))
        self._extensions = {
            str(item).lower() for item in config.get("file_extensions", [])
        }

    def should_exclude_path(self, path: Path, root: Path) -> bool:
        return path_utils.should_exclude_path(
            path, self._excluded_patterns, self.logger, root=root
        )

    def is_supported(self, path: Path) -> bool:
        return path.suffix.lower() in self._extensions

    def scan_directory(
        self,
        root: Path,
        cancel_event=None,
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> ScanResult:
        result = ScanResult()
        if not root.exists():
            self.logger.warning(f"來源資料夾不存在: {root}")
            return result

        handled = 0
        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            dirnames[:] = sorted(
                name
                for name in dirnames
                if not self.should_exclude_path(current_dir / name, root)
            )

            for name in sorted(filenames):
                if cancel_event is not None and cancel_event.is_set():
                    self.logger.info(f"掃描已取消，已處理 {result.processed} 個檔案")
                    result.cancelled = True
                    return result

                file_path = current_dir / name
                if self.should_exclude_path(file_path, root) or not self.is_supported(file_path):
                    result.skipped += 1
                    continue
                if not file_path.is_file():
                    continue

                if self._process_file(file_path, root, result):
                    result.processed += 1

                handled += 1
                if progress_callback:
                    progress_callback(handled)

        return result

    def _process_file(self, file_path: Path, root: Path, result: ScanResult) -> bool:
        try:
            directories = self.reader(file_path)
        except MetadataReadError as exc:
            self.logger.warning(f"無法讀取 metadata: {exc}")
            result.errors.add(ProcessError.read_failed(str(file_path), exc.reason))
            return False

        self.on_file_processed(
            str(file_path), directories, path_utils.relative_folder(file_path, root)
        )
        return True

    def on_file_processed(
        self,
        file_path: str,
        directories: Sequence[MetadataDirectory],
        relative_path: str,
    ) -> Optional[SummaryRow]:
        row = self.summary.record_file(file_path, directories, relative_path)
        if row is None:
            self.logger.info(f"略過無副檔名檔案: {file_path}")
        return row

    def on_scan_completed(self, output_dir: Path) -> Path:
        output_path = self.summary.write(output_dir)
        self.logger.info(f"內容摘要已寫入: {output_path} ({len(self.summary)} 個檔案)")
        return output_path
