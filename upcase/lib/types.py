"""
This module is used as a unified resource for various types that are primarily used for type hints.
It also exports the two stream capabilities that the transformation operates on.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Union
    buf = Union[bytes, bytearray, memoryview]
else:
    buf = Any


__all__ = [
    'buf',
    'isbuffer',
    'isstream',
    'Readable',
    'typename',
    'Writable',
]


@runtime_checkable
class Readable(Protocol):
    """
    Any source of bytes that can be read to completion by calling `read` without arguments. This
    includes binary files, `io.BytesIO`, and `upcase.lib.structures.MemoryFile`.
    """
    def read(self) -> bytes:
        ...


@runtime_checkable
class Writable(Protocol):
    """
    Any sink that accepts a sequence of bytes through `write`. The return value is the number of
    bytes that were accepted, or `None` for sinks that always accept all of the data. When fewer
    bytes are accepted, the remainder is passed to further calls.
    """
    def write(self, data: buf, /) -> Optional[int]:
        ...


def isstream(obj) -> bool:
    """
    Tests whether `obj` is a stream. This is currently done by simply testing whether the object
    has an attribute called `read`.
    """
    return hasattr(obj, 'read')


def isbuffer(obj) -> bool:
    """
    Test whether `obj` is an object that supports the buffer API, like a bytes or bytearray object.
    """
    try:
        with memoryview(obj):
            return True
    except TypeError:
        return False


def typename(thing):
    """
    Determines the name of the type of an object.
    """
    if not isinstance(thing, type):
        thing = type(thing)
    mro = [c for c in thing.__mro__ if c is not object]
    if mro:
        thing = mro[~0]
    try:
        return thing.__name__
    except AttributeError:
        return repr(thing)
