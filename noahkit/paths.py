"""Path and string helpers for archive member names and file system paths.

Both ``\\`` and ``/`` count as separators. A dot at the start of a file
name is part of the name and never starts an extension.
"""

from __future__ import annotations

_SEPARATORS = ("\\", "/")


def _last_separator(path: str) -> int:
    """Index of the last separator in ``path``, or -1 if there is none."""
    return max(path.rfind(sep) for sep in _SEPARATORS)


def name(path: str) -> str:
    """Return the file name part of ``path``, without any directory."""
    return path[_last_separator(path) + 1:]


def _split_name(path: str) -> tuple[str, int]:
    """Return the file name and where its extension search starts."""
    base = name(path)
    start = 1 if base.startswith(".") else 0
    return base, start


def ext(path: str) -> str:
    """Return the last extension of the file name, or "" if it has none."""
    base, start = _split_name(path)
    dot = base.rfind(".", start)
    return base[dot + 1:] if dot != -1 else ""


def ext_all(path: str) -> str:
    """Return everything after the first dot of the file name, or ""."""
    base, start = _split_name(path)
    dot = base.find(".", start)
    return base[dot + 1:] if dot != -1 else ""


def body(path: str) -> str:
    """Return the file name with all of its extensions removed."""
    base, start = _split_name(path)
    dot = base.find(".", start)
    return base[:dot] if dot != -1 else base


def body_all(path: str) -> str:
    """Return the file name with only its last extension removed."""
    base, start = _split_name(path)
    dot = base.rfind(".", start)
    return base[:dot] if dot != -1 else base


def dir_only(path: str) -> str:
    """Return the directory part of ``path``, up to and including the last separator."""
    return path[:_last_separator(path) + 1]


def ends_with_separator(path: str) -> bool:
    """Tell whether ``path`` ends with a separator."""
    return path.endswith(_SEPARATORS)


def with_backslash(path: str, add: bool) -> str:
    """Add or remove a trailing separator.

    When ``add`` is true a backslash is appended unless the path already ends
    with a separator or is shorter than two characters. When ``add`` is false
    a trailing separator is removed.
    """
    if ends_with_separator(path):
        return path if add else path[:-1]
    if add and len(path) > 1:
        return path + "\\"
    return path


def is_in_same_dir(first: str, second: str) -> bool:
    """Tell whether two paths name entries of the same directory."""
    differed = False
    for a, b in zip(first, second):
        if a != b:
            differed = True
        elif differed and a in _SEPARATORS:
            return False
    common = min(len(first), len(second))
    rest = first[common:] or second[common:]
    return not any(ch in _SEPARATORS for ch in rest)


def format_int(number: int, commas: bool = False) -> str:
    """Format an integer in decimal, optionally grouping digits by three."""
    return f"{number:,}" if commas else str(number)


def remove_trailing_ws(text: str) -> str:
    """Strip trailing spaces, tabs and newlines."""
    return text.rstrip(" \t\n")


def replace_to_slash(text: str) -> str:
    """Turn every backslash into a forward slash."""
    return text.replace("\\", "/")