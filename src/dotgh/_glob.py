"""Segment-wise glob matching.

``*`` matches any run of characters and ``?`` any single character, but
neither crosses a ``/``.  ``[...]`` is a character class with ranges,
negated by a leading ``!`` or ``^``.  ``\\`` escapes the next character.
There is no recursive wildcard: ``**`` behaves like ``*``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import NamedTuple

from .exceptions import PatternError

_MAGIC = frozenset("*?[\\")


class Segment(NamedTuple):
    """One ``/``-separated piece of a compiled pattern.

    ``regex`` is ``None`` for literal segments, which are looked up by name
    instead of by listing their parent directory.
    """
    text: str
    regex: re.Pattern[str] | None

    def matches(self, name: str) -> bool:
        if self.regex is None:
            return name == self.text
        return self.regex.fullmatch(name) is not None


def has_magic(segment: str) -> bool:
    """True if *segment* contains a wildcard, a class, or an escape."""
    return any(c in _MAGIC for c in segment)


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> tuple[Segment, ...]:
    """Validate *pattern* and compile it into a tuple of segments.

    Empty and ``.`` segments are dropped, so ``./a//b/`` compiles like
    ``a/b``.  An empty pattern compiles to an empty tuple, which matches
    nothing.

    Raises:
        PatternError: malformed class or escape, an absolute pattern, or
            a ``..`` segment.
    """
    if pattern.startswith("/"):
        raise PatternError(pattern, "absolute patterns are not allowed")
    segments: list[Segment] = []
    for seg in pattern.split("/"):
        if seg in ("", "."):
            continue
        if seg == "..":
            raise PatternError(pattern, "'..' segments are not allowed")
        if has_magic(seg):
            segments.append(Segment(seg, _translate(pattern, seg)))
        else:
            segments.append(Segment(seg, None))
    return tuple(segments)


def validate_patterns(patterns) -> None:
    """Compile every pattern in *patterns*, raising on the first bad one."""
    for p in patterns:
        compile_pattern(p)


def match_path(pattern: str, rel_path: str) -> bool:
    """Match a ``/``-separated relative path against *pattern*.

    The pattern and the path must have the same number of segments.
    """
    segments = compile_pattern(pattern)
    parts = rel_path.split("/")
    if not segments or len(segments) != len(parts):
        return False
    return all(seg.matches(part) for seg, part in zip(segments, parts))


# ---------------------------------------------------------------------------
# Translation to regular expressions
# ---------------------------------------------------------------------------

def _translate(pattern: str, seg: str) -> re.Pattern[str]:
    out: list[str] = []
    i, n = 0, len(seg)
    while i < n:
        c = seg[i]
        i += 1
        if c == "*":
            # Runs of stars collapse into one
            if not out or out[-1] != ".*":
                out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "\\":
            if i >= n:
                raise PatternError(pattern, "trailing backslash")
            out.append(re.escape(seg[i]))
            i += 1
        elif c == "[":
            i = _translate_class(pattern, seg, i, out)
        else:
            out.append(re.escape(c))
    return re.compile("".join(out), re.DOTALL)


def _class_char(pattern: str, seg: str, i: int) -> tuple[str, int]:
    """Read one (possibly escaped) class member starting at *i*."""
    c = seg[i]
    if c == "\\":
        if i + 1 >= len(seg):
            raise PatternError(pattern, "trailing backslash")
        return seg[i + 1], i + 2
    if c in "-]":
        raise PatternError(pattern, f"unexpected {c!r} in character class")
    return c, i + 1


def _translate_class(pattern: str, seg: str, i: int, out: list[str]) -> int:
    """Translate a ``[...]`` class whose body starts at *i*; return the next index."""
    n = len(seg)
    negate = False
    if i < n and seg[i] in "!^":
        negate = True
        i += 1
    parts: list[str] = []
    while True:
        if i >= n:
            raise PatternError(pattern, "unterminated character class")
        if seg[i] == "]" and parts:
            i += 1
            break
        lo, i = _class_char(pattern, seg, i)
        if i + 1 < n and seg[i] == "-" and seg[i + 1] != "]":
            hi, i = _class_char(pattern, seg, i + 1)
            if hi < lo:
                raise PatternError(pattern, f"bad range {lo}-{hi}")
            parts.append(f"{re.escape(lo)}-{re.escape(hi)}")
        else:
            parts.append(re.escape(lo))
    out.append("[" + ("^" if negate else "") + "".join(parts) + "]")
    return i
