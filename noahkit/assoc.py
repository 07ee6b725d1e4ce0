"""File associations and shell-extension settings kept in a registry tree.

The registry is modelled as a tree of case-insensitive keys, each holding
named string values, standing for the classes root of the system registry.
The value named "" is a key's default value.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum

CLSID = "{953AFAE9-C2A9-4674-9811-D7E281B001E1}"
PROG_ID = "NoahXt"
CLSID_KEY = f"CLSID\\{CLSID}"
COMPRESS_KEY = f"{CLSID_KEY}\\CShl"
EXTRACT_KEY = f"{CLSID_KEY}\\MShl"
FOLDER_HANDLER_KEY = "Folder\\shellex\\DragDropHandlers\\NoahXt"
DRIVE_HANDLER_KEY = "Drive\\shellex\\DragDropHandlers\\NoahXt"
APPROVED_KEY = "Software\\Microsoft\\Windows\\CurrentVersion\\Shell Extensions\\Approved"
CAB_FOLDER_CLSID_KEY = "CLSID\\{0CD7A5C0-9F37-11CE-AE65-08002B2E1262}"
ASSOC_PREFIX = "NoahXt."

COMPRESS_VERB = "Com&press Here"
EXTRACT_VERB = "E&xtract Here"


def _normalize(key: str) -> tuple[str, ...]:
    return tuple(part.lower() for part in key.split("\\") if part)


class Registry:
    """An in-memory tree of keys with string values."""

    def __init__(self) -> None:
        self._keys: dict[tuple[str, ...], dict[str, str]] = {}

    def exists(self, key: str) -> bool:
        """Tell whether ``key`` exists."""
        return _normalize(key) in self._keys

    def create(self, key: str) -> None:
        """Create ``key`` and any missing parents; existing keys are kept."""
        parts = _normalize(key)
        for depth in range(1, len(parts) + 1):
            self._keys.setdefault(parts[:depth], {})

    def set_value(self, key: str, name: str, value: str) -> None:
        """Store ``value`` under ``name`` in ``key``, creating the key if needed."""
        self.create(key)
        self._keys[_normalize(key)][name.lower()] = value

    def get_value(self, key: str, name: str) -> str | None:
        """Return the value ``name`` of ``key``, or None if either is missing."""
        values = self._keys.get(_normalize(key))
        if values is None:
            return None
        return values.get(name.lower())

    def delete_value(self, key: str, name: str) -> bool:
        """Remove a value; return whether it existed."""
        values = self._keys.get(_normalize(key))
        if values is None or name.lower() not in values:
            return False
        del values[name.lower()]
        return True

    def delete_key(self, key: str) -> bool:
        """Remove ``key`` with all of its subkeys; return whether it existed."""
        parts = _normalize(key)
        if parts not in self._keys:
            return False
        depth = len(parts)
        for candidate in [k for k in self._keys if k[:depth] == parts]:
            del self._keys[candidate]
        return True


class ArchiveKind(IntEnum):
    """Standard archive kinds; the value doubles as the icon number."""

    LZH = 0
    ZIP = 1
    CAB = 2
    RAR = 3
    TAR = 4
    YZ1 = 5
    GCA = 6
    ARJ = 7
    BGA = 8
    ACE = 9
    CPT = 10
    JAK = 11
    OTHER = 12
    SEVEN_Z = 10

    @property
    def extensions(self) -> tuple[str, ...]:
        """File extensions of this kind; the first names the class key."""
        return _EXTENSIONS.get(self, ())


_EXTENSIONS: dict[ArchiveKind, tuple[str, ...]] = {
    ArchiveKind.LZH: ("lzh", "lzs", "lha"),
    ArchiveKind.ZIP: ("zip",),
    ArchiveKind.CAB: ("cab",),
    ArchiveKind.RAR: ("rar",),
    ArchiveKind.TAR: ("tar", "tgz", "tbz", "taz", "gz", "bz2", "z", "xz", "lzma"),
    ArchiveKind.YZ1: ("yz1",),
    ArchiveKind.GCA: ("gca",),
    ArchiveKind.ARJ: ("arj",),
    ArchiveKind.BGA: ("gza", "bza"),
    ArchiveKind.ACE: ("ace",),
    ArchiveKind.CPT: ("cpt",),
    ArchiveKind.JAK: ("jak",),
}

_STANDARD_KINDS = tuple(kind for kind in ArchiveKind if kind in _EXTENSIONS)


def _as_extensions(exts: str | Iterable[str]) -> tuple[str, ...]:
    return (exts,) if isinstance(exts, str) else tuple(exts)


class AssociationManager:
    """Reads and writes the file associations and shell-extension switches."""

    def __init__(self, registry: Registry, dll_path: str, noah_path: str,
                 japanese: bool = False, is_nt: bool = True) -> None:
        self.registry = registry
        self.dll_path = dll_path
        self.noah_path = noah_path
        self.japanese = japanese
        self.is_nt = is_nt
        self.changed = False
        self.icon_template = f"{dll_path},%d"
        self.open_command = f'{noah_path} -x "%1"'

    # -- shell extension ----------------------------------------------------

    def load_shell_extension(self) -> tuple[bool, bool]:
        """Return whether "compress here" and "extract here" are switched on."""
        return self.registry.exists(COMPRESS_KEY), self.registry.exists(EXTRACT_KEY)

    def save_shell_extension(self, compress: bool, extract: bool) -> None:
        """Register or remove the shell extension and its two menu commands."""
        reg = self.registry
        if not compress and not extract:
            reg.delete_key(CLSID_KEY)
            reg.delete_key(FOLDER_HANDLER_KEY)
            reg.delete_key(DRIVE_HANDLER_KEY)
            if reg.exists(APPROVED_KEY):
                reg.delete_value(APPROVED_KEY, CLSID)
            return

        reg.set_value(CLSID_KEY, "", PROG_ID)
        server = f"{CLSID_KEY}\\InprocServer32"
        reg.set_value(server, "", self.dll_path)
        reg.set_value(server, "ThreadingModel", "Apartment")
        for enabled, key in ((compress, COMPRESS_KEY), (extract, EXTRACT_KEY)):
            if enabled:
                reg.create(key)
            else:
                reg.delete_key(key)

        reg.set_value(FOLDER_HANDLER_KEY, "", CLSID)
        reg.set_value(DRIVE_HANDLER_KEY, "", CLSID)

        if self.is_nt and reg.exists(APPROVED_KEY):
            reg.set_value(APPROVED_KEY, CLSID, PROG_ID)

    # -- associations -------------------------------------------------------

    def is_associated(self, exts: str | Iterable[str]) -> bool:
        """Tell whether the first extension is bound to this program."""
        main = _as_extensions(exts)[0]
        value = self.registry.get_value(f".{main}", "")
        return value == ASSOC_PREFIX + main

    def _type_name(self, icon: int, main: str) -> str:
        if icon == ArchiveKind.JAK:
            template = "分割ファイル(%s)" if self.japanese else "RipperedFile(%s)"
        else:
            template = "書庫(%s)" if self.japanese else "Archive(%s)"
        return template % main

    def _command_name(self, icon: int) -> str:
        if icon == ArchiveKind.JAK:
            return "結合(&E)" if self.japanese else "Combin&e"
        return "解凍(&E)" if self.japanese else "&Extract"

    def associate(self, exts: str | Iterable[str], icon: int) -> None:
        """Bind the extensions to this program, showing icon number ``icon``."""
        extensions = _as_extensions(exts)
        if self.is_associated(extensions):
            return
        self.changed = True
        reg = self.registry
        main = extensions[0]
        class_key = ASSOC_PREFIX + main

        for extension in extensions:
            ext_key = f".{extension}"
            reg.set_value(ext_key, "", class_key)
            reg.delete_key(f"{ext_key}\\ShellNew")

        reg.set_value(class_key, "", self._type_name(icon, main))
        reg.delete_value(class_key, "EditFlags")
        reg.set_value(f"{class_key}\\DefaultIcon", "", self.icon_template % int(icon))
        shell = f"{class_key}\\Shell"
        reg.set_value(shell, "", "Open")
        reg.set_value(f"{shell}\\Open", "", self._command_name(icon))
        reg.set_value(f"{shell}\\Open\\Command", "", self.open_command)

    def dissociate(self, exts: str | Iterable[str], icon: int) -> None:
        """Remove the binding; zip and cab fall back to the system defaults."""
        extensions = _as_extensions(exts)
        if not self.is_associated(extensions):
            return
        self.changed = True
        reg = self.registry
        reg.delete_key(ASSOC_PREFIX + extensions[0])
        for extension in extensions:
            reg.delete_key(f".{extension}")

        if icon == ArchiveKind.CAB:
            self._recover_cab()
        elif icon == ArchiveKind.ZIP:
            self._recover_zip()

    def _recover_zip(self) -> None:
        reg = self.registry
        if reg.exists("CompressedFolder"):
            reg.set_value(".zip", "", "CompressedFolder")
            reg.set_value(".zip\\ShellNew", "NullFIle", "")

    def _recover_cab(self) -> None:
        reg = self.registry
        if reg.exists(CAB_FOLDER_CLSID_KEY):
            reg.set_value(".cab", "", CAB_FOLDER_CLSID_KEY)

    def load_standard(self) -> dict[ArchiveKind, bool]:
        """Return, for each standard archive kind, whether it is associated."""
        return {kind: self.is_associated(kind.extensions) for kind in _STANDARD_KINDS}

    def save_standard(self, flags) -> None:
        """Associate or dissociate each standard kind; ``flags`` is indexed by kind."""
        for kind in _STANDARD_KINDS:
            icon = ArchiveKind.OTHER if kind is ArchiveKind.CPT else kind
            if flags[kind]:
                self.associate(kind.extensions, icon)
            else:
                self.dissociate(kind.extensions, icon)

    def load_extension(self, ext: str) -> bool:
        """Tell whether a single extension is associated."""
        return self.is_associated(ext)

    def save_extension(self, ext: str, enabled: bool) -> None:
        """Associate or dissociate a single extension."""
        icon = ArchiveKind.SEVEN_Z if ext == "7z" else ArchiveKind.OTHER
        if enabled:
            self.associate(ext, icon)
        else:
            self.dissociate(ext, icon)


def menu_command(index: int, compress: bool, extract: bool) -> int | None:
    """Map a context-menu item number to 0 (compress), 1 (extract) or None."""
    if compress and extract:
        return index if index in (0, 1) else None
    if compress:
        return 0 if index == 0 else None
    if extract:
        return 1 if index == 0 else None
    return None


def context_menu_items(compress: bool, extract: bool,
                       japanese: bool = False) -> list[tuple[str, str, str]]:
    """Context-menu entries as (label, help text, verb), in menu order."""
    items: list[tuple[str, str, str]] = []
    if compress:
        items.append((
            "ここに圧縮(&P)" if japanese else COMPRESS_VERB,
            "ファイルをNoahで圧縮します。" if japanese else "Compress These Files By Noah",
            COMPRESS_VERB,
        ))
    if extract:
        items.append((
            "ここに解凍(&X)" if japanese else EXTRACT_VERB,
            "ファイルをNoahで展開" if japanese else "Extract Files By Noah",
            EXTRACT_VERB,
        ))
    return items


def build_noah_command(noah: str, option: str, dest_dir: str,
                       files: Sequence[str]) -> str | None:
    """Command line that hands ``files`` to the program; None without files."""
    if not files:
        return None
    parts = [f'{noah} {option} "-D{dest_dir}"']
    parts.extend(f'"{path}"' for path in files)
    return " ".join(parts)