R"""
This is the upcase package documentation. The package converts text read from a binary stream to
uppercase and writes the result to another binary stream:

    >>> import io
    >>> from upcase import upcase
    >>> output = io.BytesIO()
    >>> upcase(io.BytesIO(B'Hello, world!\n'), output)
    >>> output.getvalue()
    b'HELLO, WORLD!\n'

The transformation is implemented by the unit `upcase.units.strings.cupper.cupper`, which can also
be used with the pipe syntax that is documented in `upcase.units`:

    >>> from upcase import cupper
    >>> B'uppercase!' | cupper | bytes
    b'UPPERCASE!'

The following library modules are relevant when using the package from code:

1. `upcase.lib.environment`: configuration via environment variables and the logging setup
2. `upcase.lib.exceptions`: the errors raised by units
3. `upcase.lib.types`: the `Readable` and `Writable` stream capabilities
"""
from __future__ import annotations

__version__ = '0.1.0'
__distribution__ = 'upcase'

from upcase.lib.exceptions import TransformIOError
from upcase.lib.types import Readable, Writable
from upcase.units import Unit
from upcase.units.strings.cupper import cupper

__all__ = [
    'cupper',
    'TransformIOError',
    'Unit',
    'upcase',
]


def upcase(input: Readable, output: Writable) -> None:
    """
    Read the entire `input` stream, decode it as UTF-8 text, convert it to uppercase, and write
    the encoded result to `output` in a single call. Any failure to read, decode, or write the
    data is raised as `upcase.lib.exceptions.TransformIOError`; when the input cannot be read or
    decoded, nothing is written to the output.
    """
    cupper().stream(input, output)
