"""Regex based whitespace and comment stripping.

Neither function parses its input. ``remove_whitespace`` is blind to string
literals by construction; ``remove_whitespace_and_comments`` relies on
rjsmin's regular expressions, which know about JavaScript strings and regex
literals but not about other languages.
"""

import re

from rjsmin import jsmin

# \s does not cover U+FEFF.
_WHITESPACE = re.compile(r"[\s\ufeff]+")


def remove_whitespace(code: str) -> str:
    return _WHITESPACE.sub("", code)


def remove_whitespace_and_comments(code: str) -> str:
    return jsmin(code).strip()
