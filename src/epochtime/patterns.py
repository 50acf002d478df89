"""Translation of letter date patterns to strftime directives.

Callers write patterns such as ``yyyy-MM-dd HH:mm:ss``; formatting and parsing
are delegated to ``datetime.strftime`` / ``datetime.strptime``, so the letter
pattern is rewritten into the equivalent ``%`` directives first. A pattern that
already contains ``%`` is taken to be a strftime pattern and passed through.

Supported letters (a run of the same letter is one field):

    y     yyyy, y -> %Y   yy -> %y
    M     MMMM -> %B   MMM -> %b   MM, M -> %m
    d     dd, d -> %d
    H     HH, H -> %H
    h     hh, h -> %I
    m     mm, m -> %M
    s     ss, s -> %S
    S     SSS, SS, S -> milliseconds, always three digits
    a     -> %p
    E     EEEE -> %A   E, EE, EEE -> %a
    D     D .. DDD -> %j
    Z     -> %z
    z     -> %Z

Milliseconds have no strftime directive. They are emitted as ``%f``, which the
formatter replaces with the three-digit millisecond value before rendering and
which ``strptime`` reads as a decimal fraction of the second (so ``SSS`` reads
"029" as 29 ms). A literal ``%f`` can only appear in strftime patterns, where it
keeps its usual microsecond meaning.

Text between single quotes is literal and ``''`` is a literal quote. Any other
ASCII letter raises ``PatternError``. Since any ``%`` marks a strftime pattern,
letter patterns cannot contain a literal percent sign.
"""

from __future__ import annotations

from .errors import PatternError

# Directives that carry a year (%c, %x and %D embed one)
_YEAR_DIRECTIVES = frozenset({"%Y", "%y", "%c", "%x", "%D"})

# Stands in for the millisecond field of letter patterns
MILLIS_DIRECTIVE = "%f"


def _field_directive(letter: str, count: int) -> str:
    if letter == "y":
        return "%y" if count == 2 else "%Y"
    if letter == "M":
        if count > 4:
            raise PatternError(f"Invalid pattern: {letter * count}")
        if count == 4:
            return "%B"
        if count == 3:
            return "%b"
        return "%m"
    if letter == "E":
        return "%A" if count >= 4 else "%a"
    if letter == "D":
        if count > 3:
            raise PatternError(f"Invalid pattern: {letter * count}")
        return "%j"
    if letter == "S":
        if count > 3:
            raise PatternError(f"Invalid pattern: {letter * count}")
        return MILLIS_DIRECTIVE

    simple = {
        "d": "%d",
        "H": "%H",
        "h": "%I",
        "m": "%M",
        "s": "%S",
        "a": "%p",
        "Z": "%z",
        "z": "%Z",
    }
    directive = simple.get(letter)
    if directive is None:
        raise PatternError(f"Unsupported pattern letter {letter!r}")
    if count > 2 and letter not in ("a", "Z", "z"):
        raise PatternError(f"Invalid pattern: {letter * count}")
    return directive


def is_strftime_pattern(pattern: str) -> bool:
    """Return True when ``pattern`` is already written with ``%`` directives."""
    return "%" in pattern


def to_strftime(pattern: str) -> str:
    """Rewrite a letter pattern into a strftime pattern.

    Args:
        pattern: Letter pattern (e.g. "yyyy-MM-dd HH:mm:ss") or strftime pattern.

    Returns:
        strftime pattern (e.g. "%Y-%m-%d %H:%M:%S").

    Raises:
        PatternError: If the pattern uses an unsupported letter, an invalid run
            length, or has an unterminated quote.
    """
    if is_strftime_pattern(pattern):
        return pattern

    result: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]

        if c == "'":
            # '' is an escaped quote, inside or outside a quoted section
            if i + 1 < n and pattern[i + 1] == "'":
                result.append("'")
                i += 2
                continue
            i += 1
            while True:
                if i >= n:
                    raise PatternError(f"Unterminated quote in pattern: {pattern}")
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        result.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                result.append(pattern[i])
                i += 1
            continue

        if c.isascii() and c.isalpha():
            count = 1
            while i + count < n and pattern[i + count] == c:
                count += 1
            result.append(_field_directive(c, count))
            i += count
            continue

        result.append(c)
        i += 1

    return "".join(result)


def has_year_field(strftime_pattern: str) -> bool:
    """Return True when a strftime pattern contains a year directive."""
    i = 0
    while i < len(strftime_pattern) - 1:
        if strftime_pattern[i] == "%":
            if strftime_pattern[i : i + 2] in _YEAR_DIRECTIVES:
                return True
            i += 2
            continue
        i += 1
    return False
