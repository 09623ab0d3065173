"""以 Pillow 與 piexif 讀取檔案的 metadata directory。"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Any, Optional

import piexif
from PIL import Image

from ..models import (
    MAKERNOTE_MARKER,
    TAG_IMAGE_HEIGHT,
    TAG_IMAGE_WIDTH,
    TAG_MAKE,
    TAG_MAKERNOTE,
    DirectoryKind,
    MetadataDirectory,
)

TAG_DETECTED_FORMAT = 0x0001

# piexif IFD 名稱 -> (kind, 顯示名稱)
_IFD_DIRECTORIES = (
    ("0th", DirectoryKind.EXIF_IFD0, "Exif IFD0"),
    ("Exif", DirectoryKind.EXIF_SUB_IFD, "Exif SubIFD"),
    ("GPS", DirectoryKind.GPS, "GPS"),
    ("Interop", DirectoryKind.EXIF_INTEROP, "Interoperability"),
    ("1st", DirectoryKind.EXIF_THUMBNAIL, "Exif Thumbnail"),
)

# MakerNote 開頭簽章 -> 廠商
_MAKERNOTE_SIGNATURES = (
    (b"Nikon", "Nikon"),
    (b"OLYMPUS", "Olympus"),
    (b"OLYMP", "Olympus"),
    (b"OM SYSTEM", "Olympus"),
    (b"FUJIFILM", "Fujifilm"),
    (b"Panasonic", "Panasonic"),
    (b"SONY", "Sony"),
    (b"PENTAX", "Pentax"),
    (b"AOC\x00", "Pentax"),
    (b"Apple iOS", "Apple"),
)

# 無簽章時依相機廠牌判斷
_MAKERNOTE_MAKES = (
    ("Canon", "Canon"),
    ("NIKON", "Nikon"),
    ("SONY", "Sony"),
    ("Apple", "Apple"),
)


class MetadataReadError(Exception):
    """檔案無法開啟或 EXIF 無法解析。"""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _register_heif_opener() -> None:
    try:
        from pillow_heif import register_heif_opener

        register_heif_opener()
    except ImportError:
        return


def _load_exif(path: Path, image: Image.Image) -> Optional[dict[str, Any]]:
    exif_bytes = image.info.get("exif")
    if exif_bytes:
        return piexif.load(exif_bytes)
    if image.format == "TIFF":
        return piexif.load(str(path))
    return None


def identify_makernote_vendor(makernote: Any, make: Optional[str]) -> Optional[str]:
    if isinstance(makernote, bytes):
        for signature, vendor in _MAKERNOTE_SIGNATURES:
            if makernote.startswith(signature):
                return vendor
    if make:
        for prefix, vendor in _MAKERNOTE_MAKES:
            if make.upper().startswith(prefix.upper()):
                return vendor
    return None


def build_directories(
    exif_dict: Optional[dict[str, Any]],
    image_format: Optional[str] = None,
    size: Optional[tuple[int, int]] = None,
) -> list[MetadataDirectory]:
    directories: list[MetadataDirectory] = []

    file_type_tags: dict[int, Any] = {}
    if image_format:
        file_type_tags[TAG_DETECTED_FORMAT] = image_format
    if size:
        file_type_tags[TAG_IMAGE_WIDTH], file_type_tags[TAG_IMAGE_HEIGHT] = size
    directories.append(
        MetadataDirectory(kind=DirectoryKind.FILE_TYPE, name="File Type", tags=file_type_tags)
    )

    if not exif_dict:
        return directories

    for ifd_name, kind, display_name in _IFD_DIRECTORIES:
        tags = exif_dict.get(ifd_name) or {}
        if tags:
            directories.append(MetadataDirectory(kind=kind, name=display_name, tags=dict(tags)))

    sub_ifd_tags = exif_dict.get("Exif") or {}
    if TAG_MAKERNOTE in sub_ifd_tags:
        ifd0 = next(
            (item for item in directories if item.is_kind(DirectoryKind.EXIF_IFD0)), None
        )
        make = ifd0.get_description(TAG_MAKE) if ifd0 is not None else None
        vendor = identify_makernote_vendor(sub_ifd_tags[TAG_MAKERNOTE], make)
        if vendor is not None:
            directories.append(
                MetadataDirectory(
                    kind=f"{vendor}{MAKERNOTE_MARKER}",
                    name=f"{vendor} {MAKERNOTE_MARKER}",
                )
            )

    return directories


def read_directories(path: Path) -> list[MetadataDirectory]:
    """讀取檔案並回傳依固定順序排列的 directory 清單。"""
    _register_heif_opener()
    try:
        with Image.open(path) as image:
            image_format = image.format
            size = image.size
            exif_dict = _load_exif(path, image)
    except piexif.InvalidImageDataError as exc:
        raise MetadataReadError(path, f"EXIF 格式錯誤 ({exc})") from exc
    except (OSError, ValueError, struct.error) as exc:
        raise MetadataReadError(path, f"無法開啟檔案 ({exc})") from exc
    except Exception as exc:
        # 例如 Image.DecompressionBombError
        raise MetadataReadError(path, f"無法讀取影像 ({exc})") from exc

    return build_directories(exif_dict, image_format, size)
