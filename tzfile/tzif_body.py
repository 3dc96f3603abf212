import logging
import struct
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .errors import InvalidEncodingError, TruncatedBodyError
from .models import TransitionType
from .tzif_header import HEADER_SIZE, TZifHeader

_LOGGER = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TRANSITION_TIME_SIZE = 4
TRANSITION_INDEX_SIZE = 1
# 4-byte signed offset, 1-byte dst flag, 1-byte abbreviation index
TTINFO_FORMAT = ">i?B"
TTINFO_SIZE = struct.calcsize(TTINFO_FORMAT)
LEAP_SECOND_SIZE = 8


@dataclass(frozen=True)
class TimezoneData:
    """
    Decoded V1 data block of a TZif file.

    All fields are owning copies; the source buffer is not referenced once
    parsing returns.
    """

    transition_times: list[datetime]
    transition_indices: list[int]
    transition_types: list[TransitionType]
    abbreviations: list[str]

    def abbreviation_for(self, type_index: int) -> str:
        """Abbreviation referenced by the type record at `type_index`."""
        return self.abbreviations[self.transition_types[type_index].abbrev_index]

    @classmethod
    def parse(cls, header: TZifHeader, buffer: bytes) -> "TimezoneData":
        """
        Decode the data sections following a V1 header.

        `buffer` must be the buffer `header` was parsed from. Sections are laid
        out back to back after the header in the order: transition times,
        transition indices, ttinfo records, leap second records, abbreviation
        characters. Anything after the abbreviation characters is ignored.
        """
        times_end = HEADER_SIZE + header.time_count * TRANSITION_TIME_SIZE
        indices_end = times_end + header.time_count * TRANSITION_INDEX_SIZE
        types_end = indices_end + header.type_count * TTINFO_SIZE
        leaps_end = types_end + header.leap_count * LEAP_SECOND_SIZE
        chars_end = leaps_end + header.char_count

        if chars_end > len(buffer):
            raise TruncatedBodyError(
                f"Invalid TZif file: data block needs {chars_end} bytes, "
                f"got {len(buffer)}."
            )
        _LOGGER.debug(
            "TZif section boundaries: times=%d indices=%d types=%d leaps=%d chars=%d",
            times_end,
            indices_end,
            types_end,
            leaps_end,
            chars_end,
        )

        view = memoryview(buffer)
        return cls(
            cls._read_transition_times(view[HEADER_SIZE:times_end]),
            cls._read_transition_indices(view[times_end:indices_end]),
            cls._read_ttinfo_structures(view[indices_end:types_end]),
            cls._read_abbreviations(view[leaps_end:chars_end]),
        )

    @classmethod
    def _read_transition_times(cls, section: memoryview) -> list[datetime]:
        raw = struct.unpack(f">{len(section) // TRANSITION_TIME_SIZE}i", section)
        return [_EPOCH + timedelta(seconds=t) for t in raw]

    @classmethod
    def _read_transition_indices(cls, section: memoryview) -> list[int]:
        return list(section)

    @classmethod
    def _read_ttinfo_structures(cls, section: memoryview) -> list[TransitionType]:
        return [
            TransitionType(gmt_offset, is_dst, abbrev_index // 4)
            for gmt_offset, is_dst, abbrev_index in struct.iter_unpack(
                TTINFO_FORMAT, section
            )
        ]

    @classmethod
    def _read_abbreviations(cls, section: memoryview) -> list[str]:
        try:
            text = bytes(section).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError(
                f"Invalid TZif file: abbreviations are not valid UTF-8 ({exc.reason})."
            ) from exc
        # Last entry is whatever follows the final NUL terminator
        return text.split("\x00")[:-1]
