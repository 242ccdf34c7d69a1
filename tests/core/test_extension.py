import pytest

from core.utils.extension import resolve_extension


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("me.png", ".png"),
        ("photo.JPG", ".JPG"),
        ("pic.v2.jpg", ".jpg"),
        (".hidden", ".hidden"),
        ("archive.tar.gz", ".gz"),
    ],
)
def test_extension_is_suffix_from_last_dot(filename: str, expected: str) -> None:
    assert resolve_extension(filename) == expected
    assert filename.endswith(resolve_extension(filename))


@pytest.mark.parametrize("filename", ["avatar", "", None])
def test_defaults_to_png_without_dot(filename) -> None:
    assert resolve_extension(filename) == ".png"


def test_trailing_dot_is_kept_verbatim() -> None:
    assert resolve_extension("pic.") == "."
