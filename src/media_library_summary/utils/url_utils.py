"""摘要表格中連結網址的組合工具。"""

from __future__ import annotations

from urllib.parse import quote


def encode_file_name(file_name: str) -> str:
    # 只保留 unreserved 字元，空白最後以 "+" 表示
    return quote(file_name, safe="").replace("%20", "+")


def build_raw_url(base_url: str, relative_path: str, *segments: str) -> str:
    parts = [base_url.rstrip("/")]
    relative = relative_path.replace("\\", "/").strip("/")
    # 位於根目錄的檔案不產生空路徑段，網址中不會出現 "//"
    if relative and relative != ".":
        parts.append(relative)
    parts.extend(segment for segment in segments if segment)
    return "/".join(parts)
