"""
Exceptions raised by units and the library.
"""
from __future__ import annotations


class UpcaseException(Exception):
    """
    This is an exception that was not generated by an external library.
    """
    pass


class UpcaseCriticalException(UpcaseException):
    """
    An error that terminates the processing of the input. Attached units report it as a critical
    error before it is raised to the caller.
    """
    pass


class TransformIOError(UpcaseCriticalException, OSError):
    """
    The single error raised by a unit operating on streams. It is raised when the input could not
    be read to completion, when it could not be decoded as text, and when the output could not be
    written. The underlying error is attached as the cause.
    """
