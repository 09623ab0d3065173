"""萃取結果的 metadata directory 模型。

每個 directory 以穩定的 ``kind`` 識別類型，``name`` 則是給人看的顯示名稱。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


TAG_IMAGE_WIDTH = 0x0100
TAG_IMAGE_HEIGHT = 0x0101
TAG_MAKE = 0x010F
TAG_MODEL = 0x0110
TAG_EXIF_VERSION = 0x9000
TAG_MAKERNOTE = 0x927C
TAG_FLASHPIX_VERSION = 0xA000

MAKERNOTE_MARKER = "Makernote"

_VERSION_TAGS = {TAG_EXIF_VERSION, TAG_FLASHPIX_VERSION}


class DirectoryKind(str, Enum):
    FILE_TYPE = "FileType"
    EXIF_IFD0 = "ExifIfd0"
    EXIF_SUB_IFD = "ExifSubIfd"
    EXIF_INTEROP = "ExifInterop"
    EXIF_THUMBNAIL = "ExifThumbnail"
    GPS = "Gps"


def _decode_text(value: bytes) -> str:
    return value.decode("utf-8", errors="ignore").strip("\x00").strip()


def _format_version(text: str) -> str:
    # "0230" -> "2.30"
    if len(text) == 4 and text.isdigit():
        return f"{int(text[:2])}.{text[2:]}"
    return text


def _describe_value(value: Any) -> str:
    if isinstance(value, bytes):
        return _decode_text(value)
    if isinstance(value, tuple):
        if len(value) == 2 and all(isinstance(item, int) for item in value):
            return f"{value[0]}/{value[1]}"
        return " ".join(_describe_value(item) for item in value)
    return str(value).strip()


@dataclass
class MetadataDirectory:
    kind: str
    name: str
    tags: dict[int, Any] = field(default_factory=dict)

    def contains_tag(self, tag: int) -> bool:
        return tag in self.tags

    def get_description(self, tag: int) -> Optional[str]:
        """回傳標籤的可讀描述；標籤不存在或內容為空時回傳 None。"""
        if tag not in self.tags:
            return None
        text = _describe_value(self.tags[tag])
        if tag in _VERSION_TAGS:
            text = _format_version(text)
        return text or None

    def get_int(self, tag: int) -> Optional[int]:
        value = self.tags.get(tag)
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, bytes):
            value = _decode_text(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None

    def is_kind(self, kind: str) -> bool:
        return self.kind == kind
