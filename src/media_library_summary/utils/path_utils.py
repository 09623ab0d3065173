"""路徑處理工具。"""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Iterable, Optional


def should_exclude_path(
    path: Path, excluded_patterns: Iterable[str], logger=None, root: Optional[Path] = None
) -> bool:
    patterns = list(excluded_patterns)
    parts = path.relative_to(root).parts if root is not None else path.parts
    for part in parts:
        for pattern in patterns:
            if fnmatch.fnmatch(part, pattern):
                return True

    try:
        if path.is_symlink() or os.path.islink(path):
            if logger is not None:
                logger.info(f"SKIPPED_SYMLINK: {path}")
            return True
    except OSError:
        if logger is not None:
            logger.info(f"SKIPPED_SYMLINK: {path}")
        return True

    return False


def relative_folder(path: Path, root: Path) -> str:
    """檔案所在資料夾相對於 root 的 POSIX 路徑；位於 root 時回傳空字串。"""
    try:
        relative = path.parent.relative_to(root)
    except ValueError:
        return path.parent.as_posix()
    text = relative.as_posix()
    return "" if text == "." else text
