from .errors import (
    InvalidEncodingError,
    InvalidMagicError,
    TruncatedBodyError,
    TruncatedHeaderError,
    TZifError,
)
from .models import TransitionType
from .tzfile import TZFile, parse, parse_header, read_tzfile
from .tzif_body import TimezoneData
from .tzif_header import TZifHeader

__all__ = [
    "InvalidEncodingError",
    "InvalidMagicError",
    "TimezoneData",
    "TransitionType",
    "TruncatedBodyError",
    "TruncatedHeaderError",
    "TZFile",
    "TZifError",
    "TZifHeader",
    "parse",
    "parse_header",
    "read_tzfile",
]
