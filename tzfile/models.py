from dataclasses import dataclass


@dataclass(frozen=True)
class TransitionType:
    """
    Represents a ttinfo structure in a TZif file.

    The dst byte is read as a bool, so any nonzero flag (e.g. 2) is True.
    """

    gmt_offset: int
    is_dst: bool
    abbrev_index: int  # raw stored byte // 4
