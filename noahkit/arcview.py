"""Presentation of an archive's member list: columns, sorting and selections.

These helpers produce what the archive view shows: the text of each column,
the order of rows when a column header is clicked, the list of files handed
to a drag and drop or a "send to" target, and the status line figures.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key

from noahkit.arcinfo import ArchiveEntry
from noahkit.paths import dir_only, ext, format_int, name

UNKNOWN_TEXT = "????"


class SortColumn(IntEnum):
    """Columns of the archive list, in display order."""

    NAME = 0
    SIZE = 1
    DATETIME = 2
    RATIO = 3
    METHOD = 4
    PATH = 5


@dataclass
class ListRow:
    """Text shown for one archive member, with the entry it came from."""

    name: str
    size: str
    timestamp: str | None
    ratio: str
    method: str
    path: str
    entry: ArchiveEntry


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _cmp(first: str, second: str) -> int:
    return (first > second) - (first < second)


def format_size(entry: ArchiveEntry) -> str:
    """Original size with thousands separators, or "????" when unknown."""
    if not entry.size_known:
        return UNKNOWN_TEXT
    return format_int(_signed32(entry.original_size), commas=True)


def format_timestamp(entry: ArchiveEntry) -> str | None:
    """Modification time as "yy/MM/dd HH:mm", or None if the stamp is invalid."""
    stamp = entry.timestamp
    if stamp is None:
        return None
    return stamp.strftime("%y/%m/%d %H:%M")


def _ratio_value(entry: ArchiveEntry) -> int:
    if entry.original_size == 0:
        return 100
    if entry.compressed_size == 0:
        return -1
    return entry.compressed_size * 100 // entry.original_size


def format_ratio(entry: ArchiveEntry) -> str:
    """Compressed size as a percentage of the original size."""
    if entry.original_size == 0:
        return "100%"
    if entry.compressed_size == 0:
        return UNKNOWN_TEXT
    return f"{_ratio_value(entry)}%"


def build_rows(entries: Iterable[ArchiveEntry]) -> list[ListRow]:
    """Build the list rows for the file members of an archive; directories are skipped."""
    return [
        ListRow(
            name=name(entry.filename),
            size=format_size(entry),
            timestamp=format_timestamp(entry),
            ratio=format_ratio(entry),
            method=entry.mode,
            path=dir_only(entry.filename),
            entry=entry,
        )
        for entry in entries
        if entry.is_file
    ]


def compare_entries(first: ArchiveEntry, second: ArchiveEntry, column: SortColumn | int) -> int:
    """Compare two entries by a column: negative, zero or positive."""
    column = SortColumn(column)
    if column is SortColumn.NAME:
        return _cmp(name(first.filename), name(second.filename))
    if column is SortColumn.SIZE:
        return _signed32(first.original_size) - _signed32(second.original_size)
    if column is SortColumn.DATETIME:
        diff = first.date - second.date
        return diff if diff else first.time - second.time
    if column is SortColumn.RATIO:
        return _ratio_value(first) - _ratio_value(second)
    if column is SortColumn.METHOD:
        return _cmp(first.mode, second.mode)
    return _cmp(dir_only(first.filename), dir_only(second.filename))


class ArchiveSorter:
    """Sorts entries by a column, flipping the direction on each repeated sort."""

    def __init__(self) -> None:
        self._ascending = {column: True for column in SortColumn}

    def sort(self, entries: Iterable[ArchiveEntry], column: SortColumn | int) -> list[ArchiveEntry]:
        """Return the entries sorted by ``column``; the next call reverses it."""
        column = SortColumn(column)
        sign = 1 if self._ascending[column] else -1
        key = cmp_to_key(lambda a, b: sign * compare_entries(a, b, column))
        result = sorted(entries, key=key)
        self._ascending[column] = not self._ascending[column]
        return result


def help_contents_companion(names: Sequence[str], selected: Sequence[bool]) -> int | None:
    """Find the ".cnt" file that goes with a selected ".hlp" file.

    When the first selected name has the extension "hlp", the index of the
    unselected member of the same name with extension "cnt" is returned, so
    that the caller can select it while opening the help file. None means
    there is nothing to add.
    """
    first = next((i for i, flag in enumerate(selected) if flag), None)
    if first is None:
        return None
    help_name = names[first]
    extension = ext(help_name)
    if extension.lower() != "hlp":
        return None
    contents_name = (help_name[: len(help_name) - len(extension)] + "cnt").lower()
    for index, candidate in enumerate(names):
        if candidate.lower() == contents_name:
            return None if selected[index] else index
    return None


def drop_file_list(temp_dir: str, names: Iterable[str]) -> list[str]:
    """Full paths of extracted members, with backslashes, for a file drop."""
    return [(temp_dir + member).replace("/", "\\") for member in names]


def send_to_arguments(temp_dir: str, names: Iterable[str]) -> str:
    """Command-line arguments naming extracted members, each quoted."""
    return "".join(
        f'"{temp_dir}{member.replace("/", chr(92))}" ' for member in names
    )


def compression_percent(archive_size: int, total_size: int) -> int:
    """Archive size as a percentage of the total original size of its files."""
    if total_size == 0:
        total_size = 1
    return archive_size * 100 // total_size


def melt_error_message(prefix: str, code: int) -> str:
    """Message shown when extraction fails with ``code``."""
    return f"{prefix}\nError No: [{code:x}]"