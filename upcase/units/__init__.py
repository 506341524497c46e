"""
This package contains all units. A unit is a class inheriting from `upcase.units.Unit` which
implements `upcase.units.Unit.process`. The method receives the entire input as a `bytearray` and
returns the output buffer. For example, the following would be a minimalistic unit that converts
text to lowercase:

    from upcase import Unit

    class clower(Unit):
        def process(self, data):
            return data.decode(self.codec).lower().encode(self.codec)

### Streams

The primary interface of a unit is `upcase.units.Unit.stream`, which reads a readable source to
completion, processes the data, and writes the entire result to a writable sink:

    with open('input', 'rb') as src, open('output', 'wb') as dst:
        clower().stream(src, dst)

Any failure to read, decode, or write is raised as `upcase.lib.exceptions.TransformIOError`.

### Pipe Syntax in Code

Units can be combined with buffers, strings, and streams using the binary or operator `|`.
Combining a unit from the left with a byte string, a string, or an io stream object will feed this
input into the unit. Connecting the unit to an object on the right produces the output:

    >>> B'Binary Data' | clower | bytes
    b'binary data'
    >>> 'Some Text' | clower | str
    'some text'
    >>> B'Binary Data' | clower | ...
    bytearray(b'binary data')

You can connect a unit to any writable binary stream, and the output will be written to that
stream; the stream is returned. Connecting to a callable applies it to the output, and connecting
to `None` executes the unit but discards the output. Finally, a unit can be called directly on a
buffer:

    >>> clower()(B'ABC')
    bytearray(b'abc')
"""
from __future__ import annotations

import abc
import sys

from abc import ABCMeta
from typing import TYPE_CHECKING, Any, Callable, Optional, cast

from upcase.lib.environment import Logger, LogLevel, environment, logger
from upcase.lib.exceptions import TransformIOError, UpcaseCriticalException, UpcaseException
from upcase.lib.structures import MemoryFile
from upcase.lib.tools import exception_to_string, normalize_to_display
from upcase.lib.types import Readable, Writable, buf, isbuffer, isstream, typename

if TYPE_CHECKING:
    from typing import Self


__all__ = [
    'Executable',
    'Unit',
    'UnitBase',
]


class Executable(ABCMeta):
    """
    This is the metaclass for units. It provides the class level properties that are shared by all
    instances of a unit, and it allows the class itself to be used in place of an instance within
    pipe expressions.
    """

    def __new__(mcs, name: str, bases: tuple[type, ...], nmspc: dict[str, Any]):
        nmspc.setdefault('__doc__', '')
        return super().__new__(mcs, name, bases, nmspc)

    def __or__(cls, other):
        return cls().__or__(other)

    def __ror__(cls, other) -> Unit:
        return cls().__ror__(other)

    @property
    def codec(cls) -> str:
        """
        The codec for encoding textual information between units. The value of this property is
        hardcoded to `UTF8`.
        """
        return 'UTF8'

    @property
    def name(cls) -> str:
        """
        The name of the unit, derived from the class name by `upcase.lib.tools.normalize_to_display`.
        """
        return normalize_to_display(cls.__name__)

    @property
    def logger(cls) -> Logger:
        """
        The logger of the unit; it is shared by all instances.
        """
        try:
            return cls.__dict__['_logger']
        except KeyError:
            pass
        cls._logger = _logger = logger(cls.name)
        return _logger


class UnitBase(metaclass=Executable):
    """
    This base class is an abstract interface specifying the abstract methods that have to be
    present on any unit. Units should inherit from its only child class `upcase.units.Unit`.
    """

    @abc.abstractmethod
    def process(self, data: bytearray, /) -> buf:
        """
        This routine is overridden by children of `upcase.units.Unit` to define how the unit
        processes the entire input.
        """


class Unit(UnitBase):
    """
    The base class for all units. It implements the stream handling, logging, and the pipe
    syntax that is shared by all units.
    """
    _source: Optional[Readable]

    def __init__(self):
        self._source = None
        if environment.verbosity.value is None:
            self.log_detach()

    @property
    def codec(self) -> str:
        """
        Proxy to `upcase.units.Executable.codec`.
        """
        cls = self.__class__
        assert isinstance(cls, Executable)
        return cls.codec

    @property
    def logger(self) -> Logger:
        """
        Proxy to `upcase.units.Executable.logger`.
        """
        logger: Logger = self.__class__.logger
        return logger

    @property
    def name(self) -> str:
        """
        Proxy to `upcase.units.Executable.name`.
        """
        cls = self.__class__
        assert isinstance(cls, Executable)
        return cls.name

    @property
    def source(self) -> Optional[Readable]:
        """
        The readable stream that was attached to this unit with the pipe operator, if any.
        """
        return self._source

    @property
    def log_level(self) -> LogLevel:
        """
        Returns the current log level as an element of `upcase.lib.environment.LogLevel`.
        """
        return LogLevel(self.logger.getEffectiveLevel())

    @log_level.setter
    def log_level(self, value: int | LogLevel) -> None:
        if not isinstance(value, LogLevel):
            value = LogLevel.FromVerbosity(value)
        self.logger.setLevel(value)

    def log_detach(self) -> Self:
        """
        Detach the unit from its logger. A detached unit produces no log output and any exception
        that occurs during runtime is only communicated by raising it to the caller. Units created
        in code start out detached unless `UPCASE_VERBOSITY` is set; the log level can be raised
        again through `upcase.units.Unit.log_level`.
        """
        self.log_level = LogLevel.DETACHED
        return self

    def _exception_handler(self, exception: BaseException):
        if self.log_level >= LogLevel.DETACHED:
            return
        if isinstance(exception, UpcaseCriticalException):
            self.log_fail(F'critical error, terminating: {exception!s}')
        elif isinstance(exception, UpcaseException):
            self.log_fail(exception.args[0])
        else:
            explanation = exception_to_string(exception)
            message = F'exception of type {exception.__class__.__name__}'
            if explanation and explanation != exception.__class__.__name__:
                message = F'{message}; {explanation!s}'
            self.log_fail(message)
        if self.log_debug():
            import traceback
            traceback.print_exc(file=sys.stderr)

    def _read(self, source: Readable) -> bytearray:
        try:
            data = source.read()
        except (OSError, ValueError) as E:
            raise TransformIOError(F'failed to read input: {exception_to_string(E)}') from E
        if data is None:
            raise TransformIOError('the input stream did not deliver any data')
        if not isbuffer(data):
            raise TransformIOError(F'expected to read binary data, got {typename(data)}')
        self.log_debug(lambda: F'read {len(data)} bytes of input')
        return bytearray(data)

    def _write(self, target: Writable, data: buf) -> None:
        with memoryview(data) as view:
            size = len(view)
            done = 0
            while True:
                try:
                    written = target.write(view[done:])
                except (OSError, ValueError) as E:
                    raise TransformIOError(F'failed to write output: {exception_to_string(E)}') from E
                if written is None:
                    break
                done += written
                if done >= size:
                    break
                if not written:
                    raise TransformIOError(F'the output accepted only {done} of {size} bytes')
                self.log_debug(lambda: F'partial write; {size - done} bytes remaining')
        try:
            flush = getattr(target, 'flush', None)
            if flush is not None:
                flush()
        except (OSError, ValueError) as E:
            raise TransformIOError(F'failed to flush output: {exception_to_string(E)}') from E
        self.log_debug(lambda: F'wrote {size} bytes of output')

    def stream(self, source: Readable, target: Writable) -> None:
        """
        Read all data from `source`, process it, and write the entire result to `target`. The
        result is passed to `write` in one call; when the target accepts only part of it, the
        remainder is written by further calls. The source is consumed but neither stream is
        closed. Any error that occurs while reading, decoding, or writing is raised as a
        `upcase.lib.exceptions.TransformIOError`.
        """
        try:
            data = self._read(source)
            try:
                result = self.process(data)
            except UnicodeError as E:
                raise TransformIOError(F'input is not valid {self.codec} text: {E!s}') from E
            self._write(target, result)
        except BaseException as E:
            self._exception_handler(E)
            raise

    def __call__(self, data: buf | None = None) -> bytearray:
        with MemoryFile(bytes(data or B'')) as stdin:
            with MemoryFile() as stdout:
                self.stream(stdin, stdout)
                return stdout.getvalue()

    def __ror__(self, stream: Readable | str | buf | None) -> Self:
        if stream is None:
            return self
        if isinstance(stream, str):
            stream = stream.encode(self.codec)
        if isbuffer(stream):
            stream = MemoryFile(bytes(cast(buf, stream)))
        elif not isstream(stream):
            raise TypeError(F'unable to read input from an object of type {typename(stream)}')
        self._source = cast(Readable, stream)
        return self

    def __str__(self):
        return self | str

    def __bytes__(self):
        return self | bytes

    def __or__(self, target: Any) -> Any:
        source, self._source = self._source, None
        if source is None:
            source = MemoryFile(B'')
        if hasattr(target, 'write'):
            self.stream(source, cast(Writable, target))
            return target
        with MemoryFile() as stdout:
            self.stream(source, stdout)
            output = stdout.getvalue()
        if target is None:
            return None
        if target is ...:
            return output
        if isinstance(target, type) and issubclass(target, Unit):
            target = target()
        if isinstance(target, Unit):
            return output | target
        if target is str:
            return output.decode(self.codec)
        if isinstance(target, type) and issubclass(target, (bytes, bytearray)):
            return target(output)
        if callable(target):
            return cast(Callable, target)(output)
        raise TypeError(F'unable to write output to an object of type {typename(target)}')

    @classmethod
    def log_fail(cls, *messages) -> bool:
        """
        Log the message if and only if the current log level is at least `upcase.lib.environment.LogLevel.ERROR`.
        """
        rv = cls.logger.isEnabledFor(LogLevel.ERROR)
        if rv and messages:
            cls.logger.error(cls._output(*messages))
        return rv

    @classmethod
    def log_debug(cls, *messages) -> bool:
        """
        Log the message if and only if the current log level is at least `upcase.lib.environment.LogLevel.DEBUG`.
        """
        rv = cls.logger.isEnabledFor(LogLevel.DEBUG)
        if rv and messages:
            cls.logger.debug(cls._output(*messages))
        return rv

    @staticmethod
    def _output(*messages) -> str:
        # callables are evaluated lazily, only when the message is emitted
        return ' '.join(str(m() if callable(m) else m) for m in messages)
