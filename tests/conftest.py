import struct
from datetime import datetime, timezone

import pytest

PHOENIX_TRANSITION_TIMES = [
    datetime(1918, 3, 31, 9, 0, 0, tzinfo=timezone.utc),
    datetime(1918, 10, 27, 8, 0, 0, tzinfo=timezone.utc),
    datetime(1919, 3, 30, 9, 0, 0, tzinfo=timezone.utc),
    datetime(1919, 10, 26, 8, 0, 0, tzinfo=timezone.utc),
    datetime(1942, 2, 9, 9, 0, 0, tzinfo=timezone.utc),
    datetime(1944, 1, 1, 6, 1, 0, tzinfo=timezone.utc),
    datetime(1944, 4, 1, 7, 1, 0, tzinfo=timezone.utc),
    datetime(1944, 10, 1, 6, 1, 0, tzinfo=timezone.utc),
    datetime(1967, 4, 30, 9, 0, 0, tzinfo=timezone.utc),
    datetime(1967, 10, 29, 8, 0, 0, tzinfo=timezone.utc),
]
PHOENIX_TRANSITION_INDICES = [0, 1, 0, 1, 2, 1, 2, 1, 0, 1]
# (utc offset, dst flag, raw abbreviation byte offset)
PHOENIX_TTINFOS = [(-21600, 1, 0), (-25200, 0, 4), (-21600, 1, 8)]
PHOENIX_ABBREVS = b"MDT\x00MST\x00MWT\x00"


def build_tzif(
    transition_times=(),
    transition_indices=(),
    ttinfos=(),
    abbrevs=b"",
    leap_seconds=(),
    version=b"2",
    is_gmt_count=None,
    is_std_count=None,
    trailer=b"",
) -> bytes:
    """
    Assemble a V1 TZif block. `leap_seconds` is a sequence of
    (transition time, correction) pairs packed as two 4-byte integers.
    """
    timestamps = [int(t.timestamp()) for t in transition_times]
    header = struct.pack(
        ">4sc15x6I",
        b"TZif",
        version,
        len(ttinfos) if is_gmt_count is None else is_gmt_count,
        len(ttinfos) if is_std_count is None else is_std_count,
        len(leap_seconds),
        len(timestamps),
        len(ttinfos),
        len(abbrevs),
    )
    body = b"".join(
        [
            struct.pack(f">{len(timestamps)}i", *timestamps),
            bytes(transition_indices),
            b"".join(struct.pack(">iBB", *ttinfo) for ttinfo in ttinfos),
            b"".join(struct.pack(">ii", *leap) for leap in leap_seconds),
            abbrevs,
        ]
    )
    return header + body + trailer


@pytest.fixture
def phoenix_buffer() -> bytes:
    # std/wall and ut/local indicators follow the abbreviations in a real file
    return build_tzif(
        PHOENIX_TRANSITION_TIMES,
        PHOENIX_TRANSITION_INDICES,
        PHOENIX_TTINFOS,
        PHOENIX_ABBREVS,
        trailer=bytes(6),
    )


@pytest.fixture
def tzif_builder():
    return build_tzif
