# File: src/cobs_codec/adapters.py
"""Input adaptors that reduce every accepted payload shape to one byte view."""


def as_byte_view(data):
    """Return a flat unsigned-byte memoryview over data.

    Accepted shapes:
    - Buffer-protocol objects (bytes, bytearray, memoryview, array.array):
      viewed without copying, cast to format 'B' when needed.
    - Lists, tuples and any other finite iterable of ints in 0..255:
      materialised with bytes().

    Parameters:
        data: Payload in one of the shapes above.

    Returns:
        memoryview: One-dimensional view with format 'B'.

    Raises:
        TypeError: If data is a str, a bare int, or not iterable.
        ValueError: If an iterable yields a value outside 0..255.

    Example:
        >>> bytes(as_byte_view([1, 0, 2]))
        b'\\x01\\x00\\x02'
    """
    if isinstance(data, str):
        raise TypeError("str payloads are not supported, encode to bytes first")
    if isinstance(data, int):
        # bytes(5) would silently produce five zero bytes
        raise TypeError("int payloads are not supported, wrap the value in a sequence")

    try:
        view = memoryview(data)
    except TypeError:
        view = memoryview(bytes(data))

    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view
