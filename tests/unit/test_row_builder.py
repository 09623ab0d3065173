from media_library_summary.core import build_row
from media_library_summary.models import (
    TAG_EXIF_VERSION,
    TAG_IMAGE_HEIGHT,
    TAG_IMAGE_WIDTH,
    TAG_MAKE,
    TAG_MAKERNOTE,
    TAG_MODEL,
    DirectoryKind,
    MetadataDirectory,
)


def _ifd0(make=b"Canon", model=b"Canon EOS 5D") -> MetadataDirectory:
    return MetadataDirectory(
        kind=DirectoryKind.EXIF_IFD0,
        name="Exif IFD0",
        tags={TAG_MAKE: make, TAG_MODEL: model},
    )


def _sub_ifd(with_makernote: bool = False) -> MetadataDirectory:
    tags = {TAG_EXIF_VERSION: b"0230"}
    if with_makernote:
        tags[TAG_MAKERNOTE] = b"\x00\x01\x02"
    return MetadataDirectory(kind=DirectoryKind.EXIF_SUB_IFD, name="Exif SubIFD", tags=tags)


def _thumbnail() -> MetadataDirectory:
    return MetadataDirectory(kind=DirectoryKind.EXIF_THUMBNAIL, name="Exif Thumbnail")


def test_row_without_known_directories() -> None:
    directories = [MetadataDirectory(kind=DirectoryKind.FILE_TYPE, name="File Type")]

    row = build_row("/lib/a.png", directories, "png")

    assert row.directory_count == 1
    assert row.manufacturer is None
    assert row.model is None
    assert row.exif_version is None
    assert row.thumbnail is None
    assert row.makernote == "N/A"


def test_row_reads_make_model_and_version() -> None:
    row = build_row("/lib/a.jpg", [_ifd0(make=b"Canon\x00"), _sub_ifd()], "jpg")

    assert row.manufacturer == "Canon"
    assert row.model == "Canon EOS 5D"
    assert row.exif_version == "2.30"
    assert row.directory_count == 2


def test_row_uses_first_directory_of_kind() -> None:
    row = build_row("/lib/a.jpg", [_ifd0(make=b"First"), _ifd0(make=b"Second")], "")

    assert row.manufacturer == "First"


def test_makernote_tag_without_directory_is_unknown() -> None:
    row = build_row("/lib/a.jpg", [_ifd0(), _sub_ifd(with_makernote=True)], "")

    assert row.makernote == "(Unknown)"


def test_makernote_directory_label_is_stripped() -> None:
    vendor = MetadataDirectory(kind="AcmeMakernote", name="Acme Makernote")

    without_tag = build_row("/lib/a.jpg", [_ifd0(), _sub_ifd(), vendor], "")
    with_tag = build_row("/lib/a.jpg", [_ifd0(), _sub_ifd(with_makernote=True), vendor], "")

    assert without_tag.makernote == "Acme"
    assert with_tag.makernote == "Acme"


def test_makernote_matches_kind_not_display_name() -> None:
    misleading = MetadataDirectory(kind="Custom", name="Foo Makernote")
    vendor = MetadataDirectory(kind="NikonType2Makernote", name="Nikon Makernote")

    assert build_row("/lib/a.jpg", [misleading], "").makernote == "N/A"
    assert build_row("/lib/a.jpg", [misleading, vendor], "").makernote == "Nikon"


def test_makernote_first_directory_wins_and_first_marker_removed() -> None:
    first = MetadataDirectory(kind="OddMakernote", name="Makernote Makernote")
    second = MetadataDirectory(kind="SonyMakernote", name="Sony Makernote")

    row = build_row("/lib/a.jpg", [first, second], "")

    assert row.makernote == "Makernote"


def test_thumbnail_with_dimensions() -> None:
    thumb = MetadataDirectory(
        kind=DirectoryKind.EXIF_THUMBNAIL,
        name="Exif Thumbnail",
        tags={TAG_IMAGE_WIDTH: 160, TAG_IMAGE_HEIGHT: 120},
    )

    row = build_row("/lib/a.jpg", [thumb], "")

    assert row.thumbnail == "Yes (160 x 120)"


def test_thumbnail_with_text_dimensions() -> None:
    thumb = MetadataDirectory(
        kind=DirectoryKind.EXIF_THUMBNAIL,
        name="Exif Thumbnail",
        tags={TAG_IMAGE_WIDTH: "320", TAG_IMAGE_HEIGHT: b"240"},
    )

    assert build_row("/lib/a.jpg", [thumb], "").thumbnail == "Yes (320 x 240)"


def test_thumbnail_without_dimensions() -> None:
    partial = MetadataDirectory(
        kind=DirectoryKind.EXIF_THUMBNAIL,
        name="Exif Thumbnail",
        tags={TAG_IMAGE_WIDTH: 160, TAG_IMAGE_HEIGHT: "abc"},
    )

    assert build_row("/lib/a.jpg", [_thumbnail()], "").thumbnail == "Yes"
    assert build_row("/lib/a.jpg", [partial], "").thumbnail == "Yes"
    assert build_row("/lib/a.jpg", [_ifd0()], "").thumbnail is None
