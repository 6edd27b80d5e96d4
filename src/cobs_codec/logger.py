# File: src/cobs_codec/logger.py
"""
Diagnostic logging for the COBS codec.

The codec only reports rejected input, always at DEBUG. The class attributes
below are the whole configuration surface. LEVEL defaults to INFO, so the
codec stays silent until it is lowered to DEBUG.
"""

import time


class LogLevel:
    """
    Thresholds for CodecLogger.LEVEL.
    """
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class CodecLogger:
    """Class-configured logger for codec diagnostics."""

    # Global Configuration
    LEVEL = LogLevel.INFO
    SOURCE = "CDC"  # Source tag printed on every line
    PRINT_TO_CONSOLE = True
    WRITE_TO_FILE = False
    LOG_FILE_PATH = "cobs_codec.log"

    DEBUG_COLOR = "\033[90m"  # Gray
    ERROR_COLOR = "\033[91m"  # Red
    RESET = "\033[0m"

    @classmethod
    def set_level(cls, level):
        cls.LEVEL = level

    @classmethod
    def enable_file_logging(cls, enable=True, path=None):
        cls.WRITE_TO_FILE = enable
        if path is not None:
            cls.LOG_FILE_PATH = path

    @classmethod
    def format_line(cls, module_tag, message):
        # Format: [ 123.456][DBUG][CDC ][COBS] length byte is 0x00
        return f"[{time.monotonic():>8.3f}][DBUG][{cls.SOURCE:<4}][{module_tag:<4}] {message}"

    @classmethod
    def debug(cls, module_tag, message):
        """Emit a DEBUG line to the console and, if enabled, the log file."""
        if cls.LEVEL > LogLevel.DEBUG:
            return

        line = cls.format_line(module_tag, message)

        if cls.PRINT_TO_CONSOLE:
            print(f"{cls.DEBUG_COLOR}{line}{cls.RESET}")

        if cls.WRITE_TO_FILE:
            try:
                with open(cls.LOG_FILE_PATH, "a") as f:
                    f.write(line + "\n")
            except OSError as e:
                # A read-only or missing location must not break encode/decode
                if cls.PRINT_TO_CONSOLE:
                    print(f"{cls.ERROR_COLOR}Logger OS Error: {e}{cls.RESET}")
