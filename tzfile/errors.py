class TZifError(ValueError):
    """
    Base class for errors raised while decoding a TZif buffer.
    """


class InvalidMagicError(TZifError):
    """
    The buffer does not start with the TZif magic sequence.
    """


class TruncatedHeaderError(TZifError):
    """
    The buffer is shorter than the fixed V1 header.
    """


class TruncatedBodyError(TZifError):
    """
    A data section declared by the header runs past the end of the buffer.
    """


class InvalidEncodingError(TZifError):
    """
    The abbreviation table is not valid UTF-8.
    """
