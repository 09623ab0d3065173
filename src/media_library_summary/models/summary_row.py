"""單一檔案的摘要列。"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional


@dataclass(frozen=True)
class SummaryRow:
    file_path: str
    relative_path: str
    directory_count: int
    manufacturer: Optional[str]
    model: Optional[str]
    exif_version: Optional[str]
    thumbnail: Optional[str]
    makernote: str

    @property
    def file_name(self) -> str:
        # 同時接受 Windows 與 POSIX 分隔符號
        return PurePath(self.file_path.replace("\\", "/")).name
