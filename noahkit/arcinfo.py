"""Shared definitions for archiver back ends: error codes and member entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

ERROR_START = 0x8000
FNAME_MAX = 512
UNKNOWN_SIZE = 0xFFFFFFFF


class ArcError(IntEnum):
    """Result codes reported by archiver operations."""

    DISK_SPACE = 0x8005
    READ_ONLY = 0x8006
    USER_SKIP = 0x8007
    UNKNOWN_TYPE = 0x8008
    METHOD = 0x8009
    PASSWORD_FILE = 0x800A
    VERSION = 0x800B
    FILE_CRC = 0x800C
    FILE_OPEN = 0x800D
    MORE_FRESH = 0x800E
    NOT_EXIST = 0x800F
    ALREADY_EXIST = 0x8010
    TOO_MANY_FILES = 0x8011
    MAKEDIRECTORY = 0x8012
    CANNOT_WRITE = 0x8013
    HUFFMAN_CODE = 0x8014
    COMMENT_HEADER = 0x8015
    HEADER_CRC = 0x8016
    HEADER_BROKEN = 0x8017
    ARC_FILE_OPEN = 0x8018
    NOT_ARC_FILE = 0x8019
    CANNOT_READ = 0x801A
    FILE_STYLE = 0x801B
    COMMAND_NAME = 0x801C
    MORE_HEAP_MEMORY = 0x801D
    ENOUGH_MEMORY = 0x801E
    ALREADY_RUNNING = 0x801F
    USER_CANCEL = 0x8020
    HARC_ISNOT_OPENED = 0x8021
    NOT_SEARCH_MODE = 0x8022
    NOT_SUPPORT = 0x8023
    TIME_STAMP = 0x8024
    TMP_OPEN = 0x8025
    LONG_FILE_NAME = 0x8026
    ARC_READ_ONLY = 0x8027
    SAME_NAME_FILE = 0x8028
    NOT_FIND_ARC_FILE = 0x8029
    RESPONSE_READ = 0x802A
    NOT_FILENAME = 0x802B
    TMP_COPY = 0x802C
    EOF = 0x802D
    ADD_TO_LARC = 0x802E
    TMP_BACK_SPACE = 0x802F
    SHARING = 0x8030
    NOT_FIND_FILE = 0x8031
    LOG_FILE = 0x8032
    NO_DEVICE = 0x8033
    GET_ATTRIBUTES = 0x8034
    SET_ATTRIBUTES = 0x8035
    GET_INFORMATION = 0x8036
    GET_POINT = 0x8037
    SET_POINT = 0x8038
    CONVERT_TIME = 0x8039
    GET_TIME = 0x803A
    SET_TIME = 0x803B
    CLOSE_FILE = 0x803C
    HEAP_MEMORY = 0x803D
    HANDLE = 0x803E
    TIME_STAMP_RANGE = 0x803F
    MAKE_ARCHIVE = 0x8040
    BUF_TOO_SMALL = 0x8041

    @property
    def is_warning(self) -> bool:
        """True for the codes that only warn rather than report a failure."""
        return self <= ArcError.TOO_MANY_FILES


def is_error(code: int) -> bool:
    """Tell whether an archiver result code reports a problem."""
    return code >= ERROR_START


def dos_datetime(date: int, time: int) -> datetime | None:
    """Decode a DOS date and time pair; None if they name no valid moment."""
    try:
        return datetime(
            1980 + (date >> 9),
            (date >> 5) & 0x0F,
            date & 0x1F,
            time >> 11,
            (time >> 5) & 0x3F,
            (time & 0x1F) * 2,
        )
    except ValueError:
        return None


@dataclass
class ArchiveEntry:
    """One member of an archive as listed by an archiver."""

    filename: str = ""
    original_size: int = 0
    compressed_size: int = 0
    crc: int = 0
    flag: int = 0
    os_type: int = 0
    ratio: int = 0
    date: int = 0
    time: int = 0
    attribute: str = ""
    mode: str = ""
    is_file: bool = True
    selected: bool = False

    @property
    def size_known(self) -> bool:
        """False when the archiver could not report the original size."""
        return self.original_size != UNKNOWN_SIZE

    @property
    def timestamp(self) -> datetime | None:
        """The member's modification time, if its DOS stamp is valid."""
        return dos_datetime(self.date, self.time)