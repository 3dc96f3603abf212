import logging
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InvalidMagicError, TruncatedHeaderError

if TYPE_CHECKING:
    from .tzif_body import TimezoneData

_LOGGER = logging.getLogger(__name__)

MAGIC = b"TZif"
# Big endian, 4 byte magic, 1 byte version, skip 15 bytes, 6 unsigned counts
HEADER_FORMAT = ">4sB15x6I"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)  # 0x2C


@dataclass(frozen=True)
class TZifHeader:
    magic: bytes
    version: int
    is_gmt_count: int
    is_std_count: int
    leap_count: int
    time_count: int
    type_count: int
    char_count: int

    @property
    def format_version(self) -> int | None:
        if self.version == 0:
            return 1
        if ord("0") <= self.version <= ord("9"):
            return self.version - ord("0")
        return None

    @classmethod
    def parse(cls, buffer: bytes) -> "TZifHeader":
        if len(buffer) < HEADER_SIZE:
            raise TruncatedHeaderError(
                f"Invalid TZif file: header needs {HEADER_SIZE} bytes, got {len(buffer)}."
            )

        (
            magic,
            version,
            is_gmt_count,
            is_std_count,
            leap_count,
            time_count,
            type_count,
            char_count,
        ) = struct.unpack_from(HEADER_FORMAT, buffer)

        if magic != MAGIC:
            raise InvalidMagicError("Invalid TZif file: Magic sequence not found.")

        header = cls(
            magic,
            version,
            is_gmt_count,
            is_std_count,
            leap_count,
            time_count,
            type_count,
            char_count,
        )
        _LOGGER.debug("Parsed TZif header: %r", header)
        return header

    def parse_body(self, buffer: bytes) -> "TimezoneData":
        from .tzif_body import TimezoneData

        return TimezoneData.parse(self, buffer)
