"""錯誤與警告記錄。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

READ_FAILED = "W-READ"


class ErrorLevel(str, Enum):
    INFO = "I"
    RECOVERABLE = "W"
    FATAL = "E"


@dataclass
class ProcessError:
    code: str
    level: ErrorLevel
    message: str
    file_path: Optional[str] = None

    @classmethod
    def read_failed(cls, file_path: str, reason: str) -> "ProcessError":
        """metadata 萃取失敗；該檔案不會出現在摘要中。"""
        return cls(
            code=READ_FAILED,
            level=ErrorLevel.RECOVERABLE,
            message=reason,
            file_path=file_path,
        )
