import io

import pytest
from loguru import logger

import prgrs.terminal


class BrokenStream(io.StringIO):
    """
    Stream whose writes fail, like stdout piped into a closed reader.
    Fails `failures` times, then behaves like StringIO. None fails forever.
    """

    def __init__(self, failures=None):
        super().__init__()
        self.failures = failures

    def write(self, data):
        if self.failures is None or self.failures > 0:
            if self.failures is not None:
                self.failures -= 1
            raise BrokenPipeError("broken pipe")
        return super().write(data)


@pytest.fixture(autouse=True)
def reset_terminal_state():
    prgrs.terminal._active = None
    yield
    prgrs.terminal._active = None
    logger.remove()
    logger.disable("prgrs")


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def broken_stream():
    return BrokenStream
