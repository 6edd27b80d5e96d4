# File: src/cobs_codec/__init__.py
"""Consistent Overhead Byte Stuffing encoder and decoder."""

from .adapters import as_byte_view
from .cobs import (
    DELIMITER,
    MAX_BLOCK_LENGTH,
    MAX_RUN,
    decode,
    decode_into,
    encode,
    encode_into,
    max_encoded_length,
)
from .errors import CobsError, InvalidArgument, InvalidEncoding
from .logger import CodecLogger, LogLevel

__all__ = [
    'as_byte_view',
    'DELIMITER',
    'MAX_BLOCK_LENGTH',
    'MAX_RUN',
    'decode',
    'decode_into',
    'encode',
    'encode_into',
    'max_encoded_length',
    'CobsError',
    'InvalidArgument',
    'InvalidEncoding',
    'CodecLogger',
    'LogLevel',
    ]
