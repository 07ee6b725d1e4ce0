from pathlib import Path

import pytest

from noahkit.installer import (
    Action,
    adjust_manual,
    b2e_extensions,
    copy_tree,
    is_valid_install_path,
    main,
    pending_delete_entries,
    pending_replace_entries,
    remove_installation,
    select_action,
)


@pytest.mark.parametrize(
    "options, params, expected",
    [
        (["-i"], [], Action.INSTALL),
        (["-u"], ["C:\\Noah"], Action.UNINSTALL),
        (["-u"], [], Action.BOOT_UNINSTALLER),
        ([], [], Action.BOOT_UNINSTALLER),
        (["-x"], ["a"], Action.BOOT_UNINSTALLER),
    ],
)
def test_select_action(options, params, expected):
    assert select_action(options, params) is expected


def test_b2e_extensions_plain():
    assert b2e_extensions("LZH.b2e") == ("lzh",)


def test_b2e_extensions_cut_at_first_dot():
    assert b2e_extensions("tar.gz.b2e") == ("tar",)


def test_b2e_extensions_compress_only():
    assert b2e_extensions("#zip.b2e") == ()


def test_pending_delete_entries_appends():
    entries = ["a=b"]
    result = pending_delete_entries(entries, "C:\\X")
    assert result == ["a=b", "NUL=C:\\X"]
    assert entries == ["a=b"]


def test_pending_replace_entries():
    result = pending_replace_entries([], "C:\\T.DLL", "C:\\T.NEW")
    assert result == ["NUL=C:\\T.DLL", "C:\\T.DLL=C:\\T.NEW"]


@pytest.mark.parametrize(
    "path, expected",
    [("C:\\Noah\\", True), ("C:/Noah", False), ("Noah", False), ("", False)],
)
def test_is_valid_install_path(path, expected):
    assert is_valid_install_path(path) is expected


def test_copy_tree_round_trip(tmp_path):
    source = tmp_path / "src"
    (source / "b2e").mkdir(parents=True)
    (source / "Noah.exe").write_bytes(b"binary")
    (source / "b2e" / "jak.b2e").write_text("script")
    dest = tmp_path / "out" / "Noah"

    staged = copy_tree(source, dest)

    assert staged == []
    assert (dest / "Noah.exe").read_bytes() == b"binary"
    assert (dest / "b2e" / "jak.b2e").read_text() == "script"


def test_copy_tree_missing_source_raises(tmp_path):
    with pytest.raises(OSError):
        copy_tree(tmp_path / "missing.txt", tmp_path / "dest.txt")


def test_adjust_manual_english(tmp_path):
    (tmp_path / "manual.htm").write_text("ja")
    (tmp_path / "manual-e.htm").write_text("en")
    adjust_manual(tmp_path, 1252)
    assert (tmp_path / "manual.htm").read_text() == "en"
    assert not (tmp_path / "manual-e.htm").exists()


def test_adjust_manual_japanese(tmp_path):
    (tmp_path / "manual.htm").write_text("ja")
    (tmp_path / "manual-e.htm").write_text("en")
    adjust_manual(tmp_path, 932)
    assert (tmp_path / "manual.htm").read_text() == "ja"
    assert not (tmp_path / "manual-e.htm").exists()


def _make_install(directory: Path) -> None:
    (directory / "html").mkdir(parents=True)
    (directory / "b2e").mkdir()
    for filename in ("Noah.exe", "Noah.ini", "manual.htm", "NoahXt.dll"):
        (directory / filename).write_text("x")
    (directory / "html" / "index.htm").write_text("x")
    (directory / "b2e" / "jak.b2e").write_text("x")
    (directory / "b2e" / "aboutb2e.txt").write_text("x")


def test_remove_installation_removes_everything(tmp_path):
    target = tmp_path / "Noah"
    _make_install(target)
    leftovers = remove_installation(target)
    assert leftovers == []
    assert not target.exists()


def test_remove_installation_keeps_user_files(tmp_path):
    target = tmp_path / "Noah"
    _make_install(target)
    (target / "b2e" / "mine.b2e").write_text("user")
    leftovers = remove_installation(target)
    assert leftovers == []
    assert (target / "b2e" / "mine.b2e").read_text() == "user"
    assert not (target / "Noah.exe").exists()
    assert not (target / "html").exists()


def test_main_uninstall(tmp_path):
    target = tmp_path / "Noah"
    _make_install(target)
    assert main(["-u", str(target)]) == 0
    assert not target.exists()


def test_main_install_rejects_bad_path(tmp_path):
    assert main(["-i", "relative\\dir", str(tmp_path)]) == 1
    assert not (tmp_path / "relative").exists()