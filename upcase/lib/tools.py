"""
Miscellaneous helper functions.
"""
from __future__ import annotations

import re


def normalize_to_display(words: str) -> str:
    """
    Joins a sequence of words that are separated by whitespace, punctuation, slashes, dashes, or
    underscores with single dashes. Leading and trailing separators are removed.
    """
    return re.sub('[-\\s_.,;:/\\\\]+', '-', words).strip('-')


def exception_to_string(exception: BaseException) -> str:
    """
    Produces a description of the exception that can be shown to the user: the longest string
    argument of the exception, or the name of its type if it has no arguments.
    """
    if not exception.args:
        return exception.__class__.__name__
    strings = (a for a in exception.args if isinstance(a, str))
    return max(strings, key=len, default=str(exception)).strip()
