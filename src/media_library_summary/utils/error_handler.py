"""錯誤收集與報告工具。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..models.error_record import ErrorLevel, ProcessError


@dataclass
class ErrorHandler:
    """集中管理錯誤與警告。"""

    errors: List[ProcessError] = field(default_factory=list)

    def add(self, error: ProcessError) -> None:
        self.errors.append(error)

    def get_by_level(self, level: ErrorLevel) -> List[ProcessError]:
        return [error for error in self.errors if error.level == level]

    def __len__(self) -> int:
        return len(self.errors)
