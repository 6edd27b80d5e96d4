# tests/conftest.py
import os
import sys

import pytest

src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if src_path not in sys.path:
    sys.path.append(src_path)

from cobs_codec.logger import CodecLogger  # noqa: E402


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the class-level logger configuration after every test."""
    saved = {
        name: getattr(CodecLogger, name)
        for name in ('LEVEL', 'SOURCE', 'PRINT_TO_CONSOLE', 'WRITE_TO_FILE', 'LOG_FILE_PATH')
    }
    yield
    for name, value in saved.items():
        setattr(CodecLogger, name, value)
