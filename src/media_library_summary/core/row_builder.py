"""由 metadata directory 推導摘要列欄位。"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..models import (
    MAKERNOTE_MARKER,
    TAG_EXIF_VERSION,
    TAG_IMAGE_HEIGHT,
    TAG_IMAGE_WIDTH,
    TAG_MAKE,
    TAG_MAKERNOTE,
    TAG_MODEL,
    DirectoryKind,
    MetadataDirectory,
    SummaryRow,
)

MAKERNOTE_UNKNOWN = "(Unknown)"
MAKERNOTE_NONE = "N/A"


def find_first(
    directories: Iterable[MetadataDirectory], kind: str
) -> Optional[MetadataDirectory]:
    for directory in directories:
        if directory.is_kind(kind):
            return directory
    return None


def describe_thumbnail(directory: Optional[MetadataDirectory]) -> Optional[str]:
    if directory is None:
        return None
    width = directory.get_int(TAG_IMAGE_WIDTH)
    height = directory.get_int(TAG_IMAGE_HEIGHT)
    if width is not None and height is not None:
        return f"Yes ({width} x {height})"
    return "Yes"


def makernote_label(
    directories: Iterable[MetadataDirectory], has_makernote_tag: bool
) -> str:
    """第一個 kind 含 marker 的 directory 決定標籤，否則依 MakerNote 標籤回退。"""
    for directory in directories:
        if MAKERNOTE_MARKER in directory.kind:
            return directory.name.replace(MAKERNOTE_MARKER, "", 1).strip()
    return MAKERNOTE_UNKNOWN if has_makernote_tag else MAKERNOTE_NONE


def build_row(
    file_path: str,
    directories: Sequence[MetadataDirectory],
    relative_path: str,
) -> SummaryRow:
    ifd0 = find_first(directories, DirectoryKind.EXIF_IFD0)
    sub_ifd = find_first(directories, DirectoryKind.EXIF_SUB_IFD)
    thumbnail_dir = find_first(directories, DirectoryKind.EXIF_THUMBNAIL)

    manufacturer = model = None
    if ifd0 is not None:
        manufacturer = ifd0.get_description(TAG_MAKE)
        model = ifd0.get_description(TAG_MODEL)

    exif_version = None
    has_makernote_tag = False
    if sub_ifd is not None:
        exif_version = sub_ifd.get_description(TAG_EXIF_VERSION)
        has_makernote_tag = sub_ifd.contains_tag(TAG_MAKERNOTE)

    return SummaryRow(
        file_path=str(file_path),
        relative_path=relative_path,
        directory_count=len(directories),
        manufacturer=manufacturer,
        model=model,
        exif_version=exif_version,
        thumbnail=describe_thumbnail(thumbnail_dir),
        makernote=makernote_label(directories, has_makernote_tag),
    )
