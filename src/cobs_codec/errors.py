# File: src/cobs_codec/errors.py
"""Exception types raised by the COBS codec."""


class CobsError(ValueError):
    """Base class for all codec errors.

    Subclasses ValueError so callers that treat malformed COBS data as a
    plain ValueError keep working.
    """


class InvalidArgument(CobsError):
    """Raised when a codec entry point is called with an empty input."""


class InvalidEncoding(CobsError):
    """Raised when a frame handed to the decoder is not valid COBS.

    Attributes:
        reason (str): Short tag for the failure ("missing-terminator",
            "zero-length-byte" or "truncated-block").
        offset (int or None): Index into the frame of the offending byte.
    """

    MESSAGES = {
        "missing-terminator": "frame does not end with the 0x00 terminator",
        "zero-length-byte": "length byte is 0x00",
        "truncated-block": "block runs past the end of the frame",
    }

    def __init__(self, reason, offset=None):
        text = self.MESSAGES.get(reason, reason)
        if offset is not None:
            text = f"{text} (offset {offset})"
        super().__init__(f"Invalid COBS encoding: {text}")
        self.reason = reason
        self.offset = offset
