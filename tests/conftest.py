# conftest.py

import io
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


class FailingStream(io.StringIO):
    """StringIO that raises OSError on write while `fail` is set."""

    def __init__(self):
        super().__init__()
        self.fail = False
        self.writes = 0

    def write(self, data):
        if self.fail:
            raise OSError("broken pipe")
        self.writes += 1
        return super().write(data)


@pytest.fixture
def stream():
    return FailingStream()
