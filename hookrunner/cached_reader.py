"""A reader that replays everything it read once the source is exhausted."""

from __future__ import annotations

import io
from typing import BinaryIO


class CachedReader:
    """Reads the wrapped stream to its end, caching the data.

    After the end of the stream is reached, every further read serves the
    cached data again, starting over each time the cache runs out.
    """

    def __init__(self, source: BinaryIO) -> None:
        self._source = source
        self._buffer = bytearray()
        self._use_buffer = False
        self._reader = io.BytesIO()

    def read(self, size: int = -1) -> bytes:
        if self._use_buffer:
            data = self._reader.read(size)
            if size < 0 or (not data and size != 0):
                self._reader.seek(0)
            return data

        data = self._source.read(size) if size >= 0 else self._source.read()
        if isinstance(data, str):
            data = data.encode()
        self._buffer.extend(data)
        if size < 0 or (not data and size != 0):
            self._use_buffer = True
            self._reader = io.BytesIO(bytes(self._buffer))
        return data