"""日誌工具。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def get_logger(
    name: str,
    log_file: Optional[Path] = None,
    console_level: int = logging.INFO,
) -> logging.Logger:
    logger = logging.getLogger(f"media_library_summary.{name}")
    if logger.handlers:
        return logger

    logger.setLevel(min(console_level, logging.WARNING))

    log_path = log_file or (Path.cwd() / "error.log")
    formatter = logging.Formatter(LOG_FORMAT)

    # 只有出現警告時才建立 error.log
    file_handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    file_handler.setLevel(logging.WARNING)
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    return logger
