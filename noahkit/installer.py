"""Installing and uninstalling the program's files.

The installer copies the directory it lives in to a destination, fixes up
the manual for the user's language, and on uninstall removes exactly the
files it put there. Files that cannot be replaced or removed while in use
are reported so that they can be handled after a restart.
"""

from __future__ import annotations

import locale
import shutil
import subprocess
import sys
from collections.abc import Iterable, Sequence
from contextlib import suppress
from enum import Enum
from pathlib import Path

from noahkit.paths import ext

JAPANESE_CODEPAGE = 932

INSTALLED_FILES = (
    "Noah.exe",
    "Noah.ini",
    "uninst.exe",
    "caldix.exe",
    "caldix.ini",
    "ReadMe.txt",
    "manual.htm",
)
B2E_FILES = ("jak.b2e", "aboutb2e.txt")
SHELL_DLL = "NoahXt.dll"

_JAPANESE_ENCODINGS = frozenset({"cp932", "ms932", "shift_jis", "shift-jis", "sjis", "mbcs_932"})


class Action(Enum):
    """What the installer was started to do."""

    INSTALL = "install"
    UNINSTALL = "uninstall"
    BOOT_UNINSTALLER = "boot_uninstaller"


def select_action(options: Sequence[str], params: Sequence[str]) -> Action:
    """Choose the action from the command-line switches and parameters.

    "-i" installs; "-u" with a directory parameter uninstalls from that
    directory; anything else starts the uninstaller.
    """
    if options:
        letter = options[0][1:2]
        if letter == "i":
            return Action.INSTALL
        if letter == "u" and params:
            return Action.UNINSTALL
    return Action.BOOT_UNINSTALLER


def b2e_extensions(filename: str) -> tuple[str, ...]:
    """Extensions handled by a b2e script, read from its file name.

    Names starting with '#' belong to compress-only scripts and give none.
    The name is lower-cased and cut at its first dot (a leading dot does not
    count); the rest is split on dots, stopping at the first empty part.
    """
    if filename.startswith("#"):
        return ()
    lowered = filename.lower()
    start = 1 if lowered.startswith(".") else 0
    dot = lowered.find(".", start)
    base = lowered[:dot] if dot != -1 else lowered[:-1]
    result: list[str] = []
    for part in base.split("."):
        if not part:
            break
        result.append(part)
    return tuple(result)


def pending_delete_entries(entries: Iterable[str], short_path: str) -> list[str]:
    """Rename-section entries with a request to delete ``short_path`` at restart."""
    return [*entries, f"NUL={short_path}"]


def pending_replace_entries(entries: Iterable[str], short_to: str, short_from: str) -> list[str]:
    """Rename-section entries replacing ``short_to`` by ``short_from`` at restart."""
    return [*entries, f"NUL={short_to}", f"{short_to}={short_from}"]


def is_valid_install_path(path: str) -> bool:
    """Tell whether ``path`` is an absolute path on a drive, like "C:\\..."."""
    return path[1:2] == ":" and path[2:3] == "\\"


def _copy_entry(source: Path, dest: Path, staged: list[tuple[Path, Path]]) -> None:
    if not source.is_dir():
        try:
            shutil.copy2(source, dest)
            return
        except OSError:
            if ext(source.name).lower() != "dll":
                raise
        staged_path = dest.with_name(dest.name + ".new")
        shutil.copy2(source, staged_path)
        staged.append((dest, staged_path))
        return

    dest.mkdir(parents=True, exist_ok=True)
    for child in sorted(source.iterdir()):
        _copy_entry(child, dest / child.name, staged)


def copy_tree(source, dest) -> list[tuple[Path, Path]]:
    """Copy ``source`` (a file or a directory tree) to ``dest``.

    A library that cannot be overwritten is copied next to its target with
    ".new" appended; the returned list holds those (target, staged copy)
    pairs so that they can be swapped after a restart. Any other failure
    raises OSError.
    """
    staged: list[tuple[Path, Path]] = []
    _copy_entry(Path(source), Path(dest), staged)
    return staged


def adjust_manual(dest_dir, codepage: int) -> None:
    """Keep the Japanese manual on Japanese systems, else use the English one.

    The English manual file is removed afterwards in either case.
    """
    directory = Path(dest_dir)
    english = directory / "manual-e.htm"
    manual = directory / "manual.htm"
    if codepage != JAPANESE_CODEPAGE:
        with suppress(OSError):
            shutil.copy2(english, manual)
    with suppress(OSError):
        english.unlink()


def _remove_path(path: Path) -> None:
    if path.is_dir():
        shutil.rmtree(path, ignore_errors=True)
    else:
        with suppress(OSError):
            path.unlink()


def remove_installation(dest_dir) -> list[Path]:
    """Remove the installed files from ``dest_dir``.

    Only the files the installer puts there are touched; the directory
    itself goes if it ends up empty. Returns the paths still left that
    need removing after a restart (the shell library and its directory).
    """
    directory = Path(dest_dir)
    for filename in INSTALLED_FILES:
        with suppress(OSError):
            (directory / filename).unlink()
    _remove_path(directory / "html")

    b2e_dir = directory / "b2e"
    for filename in B2E_FILES:
        with suppress(OSError):
            (b2e_dir / filename).unlink()
    with suppress(OSError):
        b2e_dir.rmdir()

    dll = directory / SHELL_DLL
    with suppress(OSError):
        dll.unlink()
    with suppress(OSError):
        directory.rmdir()

    if dll.exists():
        return [dll, directory]
    return []


def _current_codepage() -> int:
    encoding = locale.getpreferredencoding(False).lower()
    return JAPANESE_CODEPAGE if encoding in _JAPANESE_ENCODINGS else 0


def _program_dir() -> Path:
    return Path(sys.argv[0]).resolve().parent


def _install(params: Sequence[str]) -> int:
    if not params or not is_valid_install_path(params[0]):
        print("The destination must be a full path such as C:\\Noah\\", file=sys.stderr)
        return 1
    dest = params[0] if params[0].endswith(("\\", "/")) else params[0] + "\\"
    source = Path(params[1]) if len(params) > 1 else _program_dir()
    try:
        staged = copy_tree(source, dest)
    except OSError as error:
        print(f"Failed to copy files: {error}", file=sys.stderr)
        return 1
    adjust_manual(dest, _current_codepage())
    for target, staged_copy in staged:
        print(f"{target} will be replaced by {staged_copy} after a restart.")
    print("Installation finished.")
    return 0


def _uninstall(dest_dir: str) -> int:
    for leftover in remove_installation(dest_dir):
        print(f"{leftover} will be removed after a restart.")
    print("Uninstallation finished.")
    return 0


def _boot_uninstaller() -> int:
    answer = input("Uninstall Noah? [y/N] ")
    if answer.strip().lower() not in ("y", "yes"):
        return 0
    subprocess.Popen(
        [sys.executable, "-m", "noahkit.installer", "-u", str(_program_dir())],
    )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the installer: "-i DEST [SOURCE]" installs, "-u DIR" uninstalls."""
    words = list(sys.argv[1:] if argv is None else argv)
    options = [word for word in words if word.startswith("-")]
    params = [word for word in words if not word.startswith("-")]
    action = select_action(options, params)
    if action is Action.INSTALL:
        return _install(params)
    if action is Action.UNINSTALL:
        return _uninstall(params[0])
    return _boot_uninstaller()


if __name__ == "__main__":
    sys.exit(main())