import io

import pytest


class PipeSource:
    """Read-only, unseekable source that hands out at most `step` bytes per read."""

    def __init__(self, data, step=None):
        self._data = bytes(data)
        self._pos = 0
        self._step = step
        self.reads = []

    def seekable(self):
        return False

    def read(self, size=-1):
        self.reads.append(size)
        if size is None or size < 0:
            size = len(self._data) - self._pos
        if self._step is not None:
            size = min(size, self._step)
        data = self._data[self._pos:self._pos + size]
        self._pos += len(data)
        return data


class FailingSource:
    """Hands out `good` bytes, then raises on every read."""

    def __init__(self, good=b""):
        self._good = good
        self.reads = 0

    def read(self, size=-1):
        self.reads += 1
        if self._good:
            data, self._good = self._good[:size], self._good[size:]
            return data
        raise OSError(5, "Input/output error")


@pytest.fixture
def pipe_source():
    return PipeSource


@pytest.fixture
def failing_source():
    return FailingSource


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"Hello world\nHello again\x00\x01\xff")
    return path


@pytest.fixture
def no_forced_color(monkeypatch):
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def stdin_bytes(monkeypatch):
    def feed(data):
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))
    return feed
