from media_library_summary.utils.url_utils import build_raw_url, encode_file_name


def test_encode_file_name() -> None:
    assert encode_file_name("My Photo.jpg") == "My+Photo.jpg"
    assert encode_file_name("a+b.jpg") == "a%2Bb.jpg"
    assert encode_file_name("x_y-z~1.jpg") == "x_y-z~1.jpg"
    assert encode_file_name("100%.jpg") == "100%25.jpg"


def test_build_raw_url() -> None:
    base = "https://example.com/raw/"

    assert build_raw_url(base, "Samples\\Canon", "a.jpg") == "https://example.com/raw/Samples/Canon/a.jpg"
    assert build_raw_url(base, "", "a.jpg") == "https://example.com/raw/a.jpg"
    assert build_raw_url(base, ".", "metadata", "a.jpg.txt") == "https://example.com/raw/metadata/a.jpg.txt"
