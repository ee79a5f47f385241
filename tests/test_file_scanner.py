import contextlib
import os

import pytest

from file_scanner import FileEntry, FileScanner, ScanError, scan_files


def test_scan_lists_every_file_with_its_size(sample_tree):
    entries = scan_files(str(sample_tree))

    by_name = {os.path.relpath(e.path, sample_tree): e.size for e in entries}
    assert by_name == {
        "a.bin": 500,
        os.path.join("docs", "b.bin"): 2048,
        "c.bin": 10,
        os.path.join("docs", "deep", "d.bin"): 1048576,
        "e.bin": 300,
    }


def test_scan_excludes_directories(tmp_path, make_tree):
    make_tree(tmp_path, {"x/y/z.txt": 3})
    (tmp_path / "empty").mkdir()

    entries = scan_files(str(tmp_path))

    assert entries == [FileEntry(path=str(tmp_path / "x" / "y" / "z.txt"), size=3)]


def test_scan_empty_directory(tmp_path):
    assert scan_files(str(tmp_path)) == []


def test_scan_root_that_is_a_file(tmp_path):
    f = tmp_path / "single.dat"
    f.write_bytes(b"abcd")

    assert scan_files(str(f)) == [FileEntry(path=str(f), size=4)]


def test_scan_missing_root_raises(tmp_path):
    missing = tmp_path / "nope"

    with pytest.raises(ScanError) as excinfo:
        scan_files(str(missing))

    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert "nope" in str(excinfo.value)


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="needs an unprivileged user")
def test_scan_unreadable_directory_fails_whole_scan(tmp_path, make_tree):
    make_tree(tmp_path, {"ok.txt": 1, "locked/inner.txt": 1})
    locked = tmp_path / "locked"
    locked.chmod(0)
    try:
        with pytest.raises(ScanError) as excinfo:
            scan_files(str(tmp_path))
        assert excinfo.value.path == str(locked)
    finally:
        locked.chmod(0o755)


def test_scan_does_not_follow_symlinks(tmp_path, make_tree):
    make_tree(tmp_path, {"real/big.bin": 4096})
    try:
        os.symlink(tmp_path / "real", tmp_path / "link_to_real")
        os.symlink(tmp_path, tmp_path / "real" / "loop")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")

    entries = scan_files(str(tmp_path))
    paths = {e.path for e in entries}

    assert str(tmp_path / "real" / "big.bin") in paths
    assert str(tmp_path / "link_to_real") in paths
    assert str(tmp_path / "real" / "loop") in paths
    assert not any("link_to_real" + os.sep in p for p in paths)
    assert len(entries) == 3


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs mkfifo")
def test_scan_skips_special_files(tmp_path, make_tree):
    make_tree(tmp_path, {"file.txt": 7})
    os.mkfifo(tmp_path / "pipe")

    entries = scan_files(str(tmp_path))

    assert [os.path.basename(e.path) for e in entries] == ["file.txt"]


def test_scan_order_is_reproducible(sample_tree):
    assert scan_files(str(sample_tree)) == scan_files(str(sample_tree))


def test_progress_callback_called_per_directory(sample_tree):
    calls = []
    FileScanner(progress_callback=lambda seen, d: calls.append(d)).scan(str(sample_tree))

    assert calls == [
        str(sample_tree),
        str(sample_tree / "docs"),
        str(sample_tree / "docs" / "deep"),
    ]


def test_scan_handles_trees_deeper_than_recursion_limit(tmp_path):
    dirs = [str(tmp_path)]
    for _ in range(1100):
        dirs.append(os.path.join(dirs[-1], "a"))
        os.mkdir(dirs[-1])
    leaf = os.path.join(dirs[-1], "leaf.txt")
    with open(leaf, "wb") as f:
        f.write(b"abc")

    try:
        entries = scan_files(str(tmp_path))
        assert entries == [FileEntry(path=leaf, size=3)]
    finally:
        # Tear down bottom-up, a recursive rmtree could hit the same limit
        os.remove(leaf)
        for d in reversed(dirs[1:]):
            os.rmdir(d)


def test_scan_fails_when_subdirectory_cannot_be_read(tmp_path, make_tree, monkeypatch):
    make_tree(tmp_path, {"a.txt": 1, "locked/inner.txt": 1, "z.txt": 1})
    locked = str(tmp_path / "locked")
    real_scandir = os.scandir

    def scandir(path):
        if path == locked:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

    with pytest.raises(ScanError) as excinfo:
        scan_files(str(tmp_path))

    assert excinfo.value.path == locked
    assert isinstance(excinfo.value.__cause__, PermissionError)


class _UnstattableEntry:
    def __init__(self, entry):
        self.name = entry.name
        self.path = entry.path

    def stat(self, follow_symlinks=True):
        raise PermissionError(13, "Permission denied", self.path)


def test_scan_fails_when_entry_cannot_be_stat(tmp_path, make_tree, monkeypatch):
    make_tree(tmp_path, {"a.txt": 1, "sub/bad.txt": 1, "sub/good.txt": 1})
    real_scandir = os.scandir

    @contextlib.contextmanager
    def scandir(path):
        with real_scandir(path) as it:
            yield [_UnstattableEntry(e) if e.name == "bad.txt" else e for e in it]

    monkeypatch.setattr(os, "scandir", scandir)

    with pytest.raises(ScanError) as excinfo:
        scan_files(str(tmp_path))

    assert excinfo.value.path == str(tmp_path / "sub" / "bad.txt")
    assert isinstance(excinfo.value.__cause__, PermissionError)
