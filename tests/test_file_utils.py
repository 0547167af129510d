"""File helper tests: probes, folders, whole-file read/write, suffix walk and copy."""

import os
import sys

import pytest

from fileutil.utils.file_utils import (
    O_APPEND,
    O_CREAT,
    O_RDONLY,
    O_WRONLY,
    copy_file,
    create_folder,
    create_folders,
    file_exists,
    folder_exists,
    path_exists,
    put_content_file,
    read_file_content,
    walk_dir,
    write_content_to_file,
)


# -- probes -------------------------------------------------------------------

def test_file_exists_for_regular_file(tmp_path):
    target = tmp_path / "data.txt"
    target.write_text("hello")
    assert file_exists(str(target)) is True


def test_file_exists_false_for_missing_and_directory(tmp_path):
    assert file_exists(str(tmp_path / "missing.txt")) is False
    assert file_exists(str(tmp_path)) is False


def test_folder_exists_for_directory(tmp_path):
    assert folder_exists(str(tmp_path)) is True


def test_folder_exists_false_for_missing_and_file(tmp_path):
    target = tmp_path / "data.txt"
    target.write_text("hello")
    assert folder_exists(str(tmp_path / "nope")) is False
    assert folder_exists(str(target)) is False


def test_probes_swallow_stat_errors(tmp_path):
    """A path that cannot be stat'ed (file used as a directory) reads as absent."""
    target = tmp_path / "data.txt"
    target.write_text("hello")
    nested = str(target / "child")
    assert file_exists(nested) is False
    assert folder_exists(nested) is False


def test_path_exists_only_false_when_missing(tmp_path, monkeypatch):
    assert path_exists(str(tmp_path)) is True
    assert path_exists(str(tmp_path / "missing")) is False

    def denied(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr("fileutil.utils.file_utils.os.stat", denied)
    assert path_exists(str(tmp_path / "locked")) is True
    assert file_exists(str(tmp_path / "locked")) is False


# -- folders ------------------------------------------------------------------

def test_create_folder_makes_parents(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    assert create_folder(str(target)) == str(target)
    assert target.is_dir()
    # Existing folders are fine.
    create_folder(str(target))


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permission bits")
def test_create_folder_uses_owner_only_permissions(tmp_path):
    target = tmp_path / "private"
    create_folder(str(target))
    assert (target.stat().st_mode & 0o777) & ~0o700 == 0


def test_create_folders_stops_at_first_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder")
    first = tmp_path / "first"
    last = tmp_path / "last"

    with pytest.raises(OSError):
        create_folders([str(first), str(blocker / "child"), str(last)])

    assert first.is_dir()
    assert not last.exists()


# -- whole-file read/write ----------------------------------------------------

def test_read_file_content_returns_bytes(tmp_path):
    target = tmp_path / "blob.bin"
    target.write_bytes(b"\x00\x01binary\xff")
    assert read_file_content(str(target)) == b"\x00\x01binary\xff"


def test_read_file_content_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_content(str(tmp_path / "missing.bin"))


def test_write_content_default_flags_truncate(tmp_path):
    target = tmp_path / "out.txt"
    target.write_bytes(b"old content that is long")
    write_content_to_file(b"new", str(target))
    assert target.read_bytes() == b"new"


def test_write_content_append_twice_concatenates(tmp_path):
    target = str(tmp_path / "log.txt")
    flags = O_WRONLY | O_CREAT | O_APPEND
    write_content_to_file(b"first;", target, flags)
    write_content_to_file(b"second", target, flags)
    assert read_file_content(target) == b"first;second"


def test_write_content_accepts_text(tmp_path):
    target = tmp_path / "text.txt"
    write_content_to_file("héllo", str(target))
    assert target.read_bytes() == "héllo".encode("utf-8")


def test_write_content_rejects_non_bytes_content(tmp_path):
    target = tmp_path / "int.bin"
    with pytest.raises(TypeError):
        write_content_to_file(5, str(target))
    assert not target.exists()


def test_write_content_accepts_bytearray_and_memoryview(tmp_path):
    target = str(tmp_path / "views.bin")
    write_content_to_file(bytearray(b"ab"), target)
    write_content_to_file(memoryview(b"cd"), target, O_WRONLY | O_APPEND)
    assert read_file_content(target) == b"abcd"


def test_write_content_without_create_flag_fails_for_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_content_to_file(b"data", str(tmp_path / "missing.txt"), O_WRONLY)


def test_write_content_read_only_flag_propagates_error(tmp_path):
    target = tmp_path / "ro.txt"
    target.write_bytes(b"keep")
    with pytest.raises(OSError):
        write_content_to_file(b"data", str(target), O_RDONLY)
    assert target.read_bytes() == b"keep"


def test_put_content_file_creates_then_appends(tmp_path):
    target = str(tmp_path / "notes.txt")
    put_content_file(target, "one\n")
    put_content_file(target, "two\n")
    assert read_file_content(target) == b"one\ntwo\n"


# -- suffix walk --------------------------------------------------------------

def test_walk_dir_matches_suffix_case_insensitively(tmp_path):
    (tmp_path / "a.TXT").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "c.md").write_text("c")

    found = walk_dir(str(tmp_path), "txt")

    assert sorted(found) == sorted([str(tmp_path / "a.TXT"), str(tmp_path / "b.txt")])


def test_walk_dir_recurses_and_skips_directories(tmp_path):
    nested = tmp_path / "sub" / "deeper.txt"
    nested.mkdir(parents=True)
    (nested / "inner.txt").write_text("x")
    (tmp_path / "sub" / "other.log").write_text("y")

    found = walk_dir(str(tmp_path), ".TXT")

    assert found == [str(nested / "inner.txt")]


def test_walk_dir_empty_suffix_lists_every_file_in_lexical_order(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "z.dat").write_text("z")
    (tmp_path / "a.dat").write_text("a")
    (tmp_path / "c.dat").write_text("c")

    found = walk_dir(str(tmp_path), "")

    assert found == [
        str(tmp_path / "a.dat"),
        os.path.join(str(tmp_path / "b"), "z.dat"),
        str(tmp_path / "c.dat"),
    ]


def test_walk_dir_missing_root_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        walk_dir(str(tmp_path / "missing"), "txt")


def test_walk_dir_on_single_file_root(tmp_path):
    target = tmp_path / "only.txt"
    target.write_text("x")
    assert walk_dir(str(target), "TXT") == [str(target)]
    assert walk_dir(str(target), "md") == []


# -- copy ---------------------------------------------------------------------

def test_copy_file_duplicates_bytes(tmp_path):
    source = tmp_path / "source.bin"
    source.write_bytes(bytes(range(256)) * 64)
    dest = tmp_path / "dest.bin"

    assert copy_file(str(source), str(dest)) is True
    assert dest.read_bytes() == source.read_bytes()


def test_copy_file_truncates_existing_destination(tmp_path):
    source = tmp_path / "short.txt"
    source.write_bytes(b"short")
    dest = tmp_path / "long.txt"
    dest.write_bytes(b"a much longer previous body")

    assert copy_file(str(source), str(dest)) is True
    assert dest.read_bytes() == b"short"


def test_copy_file_missing_source_raises_and_leaves_dest_alone(tmp_path):
    dest = tmp_path / "dest.txt"
    with pytest.raises(FileNotFoundError):
        copy_file(str(tmp_path / "missing.txt"), str(dest))
    assert not dest.exists()
