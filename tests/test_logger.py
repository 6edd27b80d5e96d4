#!/usr/bin/env python3
"""Unit tests for the codec logger."""

import pytest

from cobs_codec import CodecLogger, InvalidArgument, InvalidEncoding, LogLevel, decode, encode


def test_log_format(capsys):
    """Console lines carry level, source and module tags."""
    CodecLogger.set_level(LogLevel.DEBUG)
    CodecLogger.debug("TEST", "hello")

    out = capsys.readouterr().out
    assert "[DBUG]" in out
    assert "[CDC ]" in out
    assert "[TEST] hello" in out
    assert out.startswith(CodecLogger.DEBUG_COLOR)


def test_level_filtering(capsys):
    """Nothing is printed while LEVEL is above DEBUG."""
    for level in (LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR):
        CodecLogger.set_level(level)
        CodecLogger.debug("TEST", "quiet")
    assert capsys.readouterr().out == ""


def test_source_tag(capsys):
    CodecLogger.set_level(LogLevel.DEBUG)
    CodecLogger.SOURCE = "APP"
    CodecLogger.debug("TEST", "msg")
    assert "[APP ]" in capsys.readouterr().out


def test_decode_error_logged_at_debug(capsys):
    """Rejected frames are reported at DEBUG with the COBS tag."""
    CodecLogger.set_level(LogLevel.DEBUG)
    with pytest.raises(InvalidEncoding):
        decode(b'\x05\x01\x02')

    out = capsys.readouterr().out
    assert "[DBUG]" in out
    assert "[COBS]" in out
    assert "block runs past the end of the frame" in out


def test_encode_error_logged_at_debug(capsys):
    CodecLogger.set_level(LogLevel.DEBUG)
    with pytest.raises(InvalidArgument):
        encode(b'')
    assert "encode rejected empty payload" in capsys.readouterr().out


def test_codec_silent_at_default_level(capsys):
    """At the default INFO level the codec prints nothing, even on errors."""
    assert CodecLogger.LEVEL == LogLevel.INFO
    encode(b'\x01\x00')
    with pytest.raises(InvalidEncoding):
        decode(b'\x00\x00', expect_terminator=True)
    assert capsys.readouterr().out == ""


def test_file_logging(tmp_path, capsys):
    """File logging appends plain lines without colour codes."""
    log_file = tmp_path / "codec.log"
    CodecLogger.set_level(LogLevel.DEBUG)
    CodecLogger.PRINT_TO_CONSOLE = False
    CodecLogger.enable_file_logging(True, path=str(log_file))

    with pytest.raises(InvalidEncoding):
        decode(b'\x02\x01', expect_terminator=True)
    CodecLogger.debug("TEST", "second")

    lines = log_file.read_text().splitlines()
    assert len(lines) == 2
    assert "[COBS]" in lines[0]
    assert lines[1].endswith("[TEST] second")
    assert "\033[" not in lines[0]
    assert capsys.readouterr().out == ""


def test_file_logging_os_error(tmp_path, capsys):
    """An unwritable log path is reported on the console, not raised."""
    CodecLogger.set_level(LogLevel.DEBUG)
    CodecLogger.enable_file_logging(True, path=str(tmp_path / "missing" / "codec.log"))
    CodecLogger.debug("TEST", "still works")

    out = capsys.readouterr().out
    assert "[TEST] still works" in out
    assert "Logger OS Error" in out
