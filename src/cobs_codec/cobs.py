# File: src/cobs_codec/cobs.py
"""COBS (Consistent Overhead Byte Stuffing) encoding for zero-delimited framing.

COBS rewrites a payload so that it contains no 0x00 bytes, which lets a single
0x00 act as the packet delimiter on a byte stream. The encoded frame is a run of
blocks, each a length byte followed by (length - 1) literal bytes:

- 0x01..0xFE: the literals are followed by an implicit 0x00 in the original
  payload, except in the last block of the frame.
- 0xFF: 254 literals with no implicit zero (a zero-free run that hit the
  block size limit).

Overhead is at most one byte per 254 payload bytes, plus the optional
terminator.

References:
- Cheshire and Baker (1997), "Consistent Overhead Byte Stuffing"
- https://en.wikipedia.org/wiki/Consistent_Overhead_Byte_Stuffing
"""

from .adapters import as_byte_view
from .errors import InvalidArgument, InvalidEncoding
from .logger import CodecLogger

DELIMITER = 0x00
MAX_BLOCK_LENGTH = 0xFF
MAX_RUN = MAX_BLOCK_LENGTH - 1  # 254 literal bytes

_LOG_TAG = "COBS"


def max_encoded_length(size, append_terminator=True):
    """Upper bound on the encoded size of a payload of the given length.

    Useful for pre-sizing buffers; encoding never depends on it.

    Parameters:
        size (int): Payload length in bytes (>= 1).
        append_terminator (bool): Whether the 0x00 terminator is counted.

    Returns:
        int: Maximum number of bytes encode() can produce.
    """
    if size < 1:
        raise InvalidArgument("Payload size must be at least 1 byte")
    return size + 1 + size // MAX_RUN + (1 if append_terminator else 0)


def _flush_full_runs(view, block_start, end, sink):
    """Emit 0xFF blocks while at least MAX_RUN literals remain before end."""
    while end - block_start >= MAX_RUN:
        sink.append(MAX_BLOCK_LENGTH)
        sink.extend(view[block_start:block_start + MAX_RUN])
        block_start += MAX_RUN
    return block_start


def encode_into(data, sink, append_terminator=True):
    """Encode data using COBS, appending the frame to sink.

    Parameters:
        data: Payload (bytes-like or iterable of ints), may contain 0x00.
        sink (bytearray): Append-only output buffer (needs append/extend).
        append_terminator (bool): Append a trailing 0x00 delimiter.

    Raises:
        InvalidArgument: If data is empty.
    """
    # Views are released on exit so the caller may resize its buffer,
    # including inside an except block that still holds the traceback
    with as_byte_view(data) as view:
        if len(view) == 0:
            CodecLogger.debug(_LOG_TAG, "encode rejected empty payload")
            raise InvalidArgument("Data to encode cannot be empty")
        _encode_blocks(view, sink)

    if append_terminator:
        sink.append(DELIMITER)


def _encode_blocks(view, sink):
    length = len(view)
    block_start = 0

    for i, byte in enumerate(view):
        if byte != DELIMITER:
            continue
        block_start = _flush_full_runs(view, block_start, i, sink)
        # The zero itself is represented by this block's length byte
        sink.append(i - block_start + 1)
        sink.extend(view[block_start:i])
        block_start = i + 1

    block_start = _flush_full_runs(view, block_start, length, sink)
    sink.append(length - block_start + 1)
    sink.extend(view[block_start:length])


def encode(data, append_terminator=True):
    """Encode data using COBS algorithm.

    Parameters:
        data: Payload (bytes-like or iterable of ints), may contain 0x00.
        append_terminator (bool): Append a trailing 0x00 delimiter.

    Returns:
        bytes: COBS frame. Without the terminator it contains no 0x00.

    Raises:
        InvalidArgument: If data is empty.

    Example:
        >>> encode(b'\\x00', append_terminator=False)
        b'\\x01\\x01'
        >>> encode(b'\\x01\\x00\\x02')
        b'\\x02\\x01\\x02\\x02\\x00'
    """
    sink = bytearray()
    encode_into(data, sink, append_terminator)
    return bytes(sink)


def _reject(reason, offset=None):
    err = InvalidEncoding(reason, offset)
    CodecLogger.debug(_LOG_TAG, str(err))
    return err


def decode_into(frame, sink, expect_terminator=False):
    """Decode a COBS frame, appending the original payload to sink.

    A trailing 0x00 is stripped whenever present, even when
    expect_terminator is False. expect_terminator only adds the check that
    the terminator is there. Existing encoders rely on this lenient
    stripping, so it is kept as is.

    On error the call stops at the faulty block. Bytes appended to sink
    before that point are left in place and must be discarded by the caller.

    Parameters:
        frame: COBS-encoded bytes (bytes-like or iterable of ints).
        sink (bytearray): Append-only output buffer (needs append/extend).
        expect_terminator (bool): Require the frame to end with 0x00.

    Raises:
        InvalidArgument: If frame is empty.
        InvalidEncoding: If the terminator is required but missing, a length
            byte is 0x00, or a block runs past the end of the frame.
    """
    with as_byte_view(frame) as view:
        if len(view) == 0:
            CodecLogger.debug(_LOG_TAG, "decode rejected empty frame")
            raise InvalidArgument("Data to decode cannot be empty")

        last = len(view) - 1
        if expect_terminator and view[last] != DELIMITER:
            raise _reject("missing-terminator", last)

        with (view[:last] if view[last] == DELIMITER else view[:]) as span:
            _decode_blocks(span, sink)


def _decode_blocks(span, sink):
    span_length = len(span)
    block_start = 0

    while block_start < span_length:
        distance = span[block_start]
        block_end = block_start + distance

        if distance == 0:
            raise _reject("zero-length-byte", block_start)
        if block_end > span_length:
            raise _reject("truncated-block", block_start)

        if distance > 1:
            sink.extend(span[block_start + 1:block_end])

        if distance < MAX_BLOCK_LENGTH and block_end < span_length:
            sink.append(DELIMITER)

        block_start = block_end


def decode(frame, expect_terminator=False):
    """Decode COBS-encoded data back to the original payload.

    Parameters:
        frame: COBS-encoded bytes, optionally ending in the 0x00 terminator.
        expect_terminator (bool): Require the frame to end with 0x00.

    Returns:
        bytes: Decoded original data (may contain 0x00 bytes).

    Raises:
        InvalidArgument: If frame is empty.
        InvalidEncoding: If frame is not valid COBS.

    Example:
        >>> decode(b'\\x01\\x01')
        b'\\x00'
        >>> decode(b'\\x02\\x01\\x02\\x02\\x00', expect_terminator=True)
        b'\\x01\\x00\\x02'
    """
    sink = bytearray()
    decode_into(frame, sink, expect_terminator)
    return bytes(sink)
