"""
An in-memory binary stream that connects byte buffers to the stream interface of units.
"""
from __future__ import annotations

import io

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from upcase.lib.types import buf


class MemoryFile(io.BytesIO):
    """
    A binary stream over a byte sequence. In contrast to `io.BytesIO`, the stream operates on the
    given object itself: read results are sliced from it, and writes go directly into it when it is
    a `bytearray`. A stream created without data collects its output in a new `bytearray`, which
    `upcase.lib.structures.MemoryFile.getvalue` returns without copying. Streams over immutable
    data are read-only.
    """
    _data: buf
    _cursor: int
    _closed: bool

    def __init__(self, data: Optional[buf] = None) -> None:
        if data is None:
            data = bytearray()
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(F'cannot create a memory file over {type(data).__name__}')
        self._data = data
        self._cursor = 0
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, ex_type, ex_value, trace) -> bool:
        return False

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def flush(self) -> None:
        pass

    def readable(self) -> bool:
        return not self._closed

    def writable(self) -> bool:
        if self._closed:
            return False
        if isinstance(self._data, memoryview):
            return not self._data.readonly
        return isinstance(self._data, bytearray)

    def tell(self) -> int:
        return self._cursor

    def getvalue(self) -> buf:
        return self._data

    def read(self, size: Optional[int] = -1) -> bytes:
        if self._closed:
            raise ValueError('I/O operation on closed file.')
        end = len(self._data)
        if size is not None and size >= 0:
            end = min(self._cursor + size, end)
        chunk = bytes(self._data[self._cursor:end])
        self._cursor = end
        return chunk

    def write(self, data: buf) -> int:
        if self._closed:
            raise ValueError('I/O operation on closed file.')
        if not self.writable():
            raise PermissionError('the memory file is read-only')
        size = len(memoryview(data))
        self._data[self._cursor:self._cursor + size] = data
        self._cursor += size
        return size
