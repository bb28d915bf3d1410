import pytest

from qor import filesystem as fs


def test_get_file_name():
    assert fs.get_file_name("a/b\\c.txt") == "c.txt"
    assert fs.get_file_name("plain") == "plain"


def test_get_path():
    assert fs.get_path("dir/sub/file.png") == "dir/sub/"
    assert fs.get_path("file.png") == ""


def test_extension_helpers():
    assert fs.get_extension("dir/file.tar.gz") == "gz"
    assert fs.get_extension("noext") == ""
    assert fs.cut_extension("dir/file.png") == "dir/file"
    assert fs.cut_extension("noext") == ""
    assert fs.change_extension("image.png", "jpg") == "image.jpg"
    assert fs.get_file_name_no_ext("dir/image.png") == "image"


def test_internal_paths():
    path = "file.zip:test.txt"
    assert fs.has_internal(path)
    assert fs.cut_internal(path) == "file.zip"
    assert fs.get_internal(path) == "test.txt"
    assert not fs.has_internal("file.zip")
    assert fs.cut_internal("file.zip") == "file.zip"
    assert fs.get_internal("file.zip") == ""


def test_drive_letter_colon_is_skipped():
    assert not fs.has_internal("c:")
    assert fs.cut_internal("c:/data/file.zip:inner.txt") == "c:/data/file.zip"


def test_file_name_no_internal():
    assert fs.get_file_name_no_internal("dir/file.zip:test.txt") == "file.zip:test.txt"


@pytest.mark.parametrize(
    "path, ext, expected",
    [
        ("image.PNG", "png", True),
        ("image.png", ".png", True),
        ("image.png", "jpg", False),
    ],
)
def test_has_given_extension(path, ext, expected):
    assert fs.has_extension(path, ext) is expected


def test_has_any_extension():
    assert fs.has_extension("file.txt")
    assert not fs.has_extension("file")
    assert not fs.has_extension("dir.d/file")
    assert fs.has_extension("dir/file.txt")


def test_path_compare(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("x")
    assert fs.path_compare(str(target), str(tmp_path / "." / "a.txt"))
    assert not fs.path_compare(str(target), str(tmp_path / "missing"))
    with pytest.raises(FileNotFoundError):
        fs.path_compare(str(tmp_path / "m1"), str(tmp_path / "m2"))


def test_locate_with_extensions(tmp_path):
    (tmp_path / "sound.ogg").write_bytes(b"")
    found = fs.locate("sound", [tmp_path], ["wav", "ogg"])
    assert found == tmp_path / "sound.ogg"


def test_locate_exact_and_missing(tmp_path):
    (tmp_path / "a.png").write_bytes(b"")
    other = tmp_path / "other"
    other.mkdir()
    assert fs.locate("a.png", [other, tmp_path]) == tmp_path / "a.png"
    assert fs.locate("b.png", [tmp_path]) is None


def test_locate_returns_given_path():
    assert str(fs.locate("dir/x.png", [])) == str(fs.Path("dir/x.png"))


def test_file_to_buffer_and_string(tmp_path):
    target = tmp_path / "data.txt"
    target.write_bytes(b"hello\nworld")
    assert fs.file_to_buffer(target) == b"hello\nworld\0"
    assert fs.file_to_string(target) == "hello\nworld"


def test_missing_file_reads_empty(tmp_path):
    assert fs.file_to_buffer(tmp_path / "nope") == b""
    assert fs.file_to_string(tmp_path / "nope") == ""