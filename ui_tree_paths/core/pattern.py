"""
Pattern sublanguage used inside path expressions.

A pattern is matched against a whole string. Special characters:

- ``*`` matches any sequence of characters (including none)
- ``^x`` matches ``x`` literally, whatever ``x`` is
- ``{...}`` inserts the enclosed text as a regular expression, except for
  ``{#min..max}`` which matches an integer between ``min`` and ``max``
  (either bound may be omitted)
- ``&`` and ``|`` (and ``=`` while scanning a parameter name) end the pattern
"""

import re
from typing import List, Optional, Tuple

from .errors import PathSyntaxError, PatternCompileError

# Characters that need a ``^`` prefix to be matched literally
SPECIAL_CHARACTERS = "*&|{}^"

_NUMERIC_RANGE_BODY = re.compile(r"#(-?[0-9]+)?\.\.(-?[0-9]+)?")


class NumericRange:
    """Inclusive integer bounds; ``None`` means unbounded."""

    def __init__(self, minimum: Optional[int], maximum: Optional[int]):
        self.minimum = minimum
        self.maximum = maximum

    def contains(self, value: int) -> bool:
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True

    def __repr__(self) -> str:
        return f"NumericRange({self.minimum!r}, {self.maximum!r})"


class PathPattern:
    """A compiled, fully anchored pattern with optional numeric ranges."""

    def __init__(self, regex: str, source: str, text: str, ranges: List[NumericRange]):
        """
        Initialize a compiled pattern.

        Args:
            regex: Regular expression equivalent of the pattern
            source: Pattern text exactly as written
            text: Pattern text with ``^`` escapes resolved
            ranges: Numeric ranges, bound to groups ``numeric_range_<n>``

        Raises:
            PatternCompileError: If ``regex`` is not a valid regular expression
        """
        self.regex = regex
        self.source = source
        self.text = text
        self.ranges = ranges
        try:
            self._compiled = re.compile(regex, re.DOTALL)
        except re.error as e:
            raise PatternCompileError(e.msg, regex) from e

    @classmethod
    def from_text(cls, text: str) -> 'PathPattern':
        """
        Compile a standalone pattern that must span all of ``text``.

        Raises:
            PathSyntaxError: If an unescaped ``&`` or ``|`` is present
        """
        pattern, rest, _ = compile_pattern(text)
        if rest != len(text):
            raise PathSyntaxError("Invalid pattern", text)
        return pattern

    def is_match(self, value: str) -> bool:
        """Return whether the whole of ``value`` matches, ranges included."""
        m = self._compiled.fullmatch(value)
        if m is None:
            return False
        for index, numeric_range in enumerate(self.ranges):
            group = m.group(_range_group(index))
            if group is None or not numeric_range.contains(int(group)):
                return False
        return True

    def __repr__(self) -> str:
        return f"PathPattern({self.source!r})"


def _range_group(index: int) -> str:
    return f"numeric_range_{index}"


def _brace_regex(body: str, ranges: List[NumericRange], text: str) -> str:
    m = _NUMERIC_RANGE_BODY.fullmatch(body)
    if m:
        minimum = int(m.group(1)) if m.group(1) is not None else None
        maximum = int(m.group(2)) if m.group(2) is not None else None
        group = f"(?P<{_range_group(len(ranges))}>-?[0-9]+)"
        ranges.append(NumericRange(minimum, maximum))
        return group
    if body.startswith("#") and ".." in body:
        raise PathSyntaxError("Malformed numeric range", text)
    return f"(?:{body})"


def compile_pattern(
    text: str,
    start: int = 0,
    stop_at_equals: bool = False,
) -> Tuple[PathPattern, int, str]:
    """
    Compile the pattern starting at ``start`` in ``text``.

    Args:
        text: Text containing the pattern
        start: Offset where the pattern starts
        stop_at_equals: Also end the pattern at an unescaped ``=``

    Returns:
        Tuple of (pattern, rest_offset, canonical_text) where ``rest_offset``
        is the index of the terminating ``&``, ``|`` or ``=`` (or the length
        of ``text``) and ``canonical_text`` is the pattern with escapes resolved

    Raises:
        PathSyntaxError: On unbalanced braces, a trailing ``^`` or a malformed range
        PatternCompileError: If a brace body is not a valid regular expression
    """
    regex: List[str] = []
    canonical: List[str] = []
    ranges: List[NumericRange] = []
    length = len(text)
    i = start
    while i < length:
        ch = text[i]
        if ch in "&|" or (ch == "=" and stop_at_equals):
            break
        if ch == "^":
            if i == length - 1:
                raise PathSyntaxError("Invalid pattern: '^' at end of text", text)
            i += 1
            regex.append(re.escape(text[i]))
            canonical.append(text[i])
        elif ch == "*":
            regex.append(".*")
            canonical.append(ch)
        elif ch == "{":
            depth = 1
            opened = i
            while depth > 0:
                i += 1
                if i >= length:
                    raise PathSyntaxError("Unbalanced braces", text)
                if text[i] == "{":
                    depth += 1
                elif text[i] == "}":
                    depth -= 1
                elif text[i] == "^":
                    i += 1
            regex.append(_brace_regex(text[opened + 1:i], ranges, text))
            canonical.append(text[opened:i + 1])
        elif ch == "}":
            raise PathSyntaxError("Unbalanced braces", text)
        else:
            regex.append(re.escape(ch))
            canonical.append(ch)
        i += 1

    pattern = PathPattern("".join(regex), text[start:i], "".join(canonical), ranges)
    return pattern, i, pattern.text


def quote(value: str) -> str:
    """Quote ``value`` so that it is matched literally as a pattern."""
    return "".join("^" + ch if ch in SPECIAL_CHARACTERS else ch for ch in value)


def matches(pattern_text: str, value: str) -> bool:
    """Return whether ``value`` matches the standalone pattern ``pattern_text``."""
    return PathPattern.from_text(pattern_text).is_match(value)
