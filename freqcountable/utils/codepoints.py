"""Decode text into Unicode code points, pairing UTF-16 surrogate halves.

Character counts are taken from the length of the decoded sequence, so a
surrogate pair always counts as one character. Malformed input (a lone
surrogate half) degrades to one character per code unit instead of failing.
"""

from typing import Iterable

_HIGH_SURROGATE_MIN = 0xD800
_HIGH_SURROGATE_MAX = 0xDBFF
_SURROGATE_MASK = 0xFC00
_LOW_SURROGATE_TAG = 0xDC00


def _utf16_units(text: str) -> list[int]:
    """Return the UTF-16 code units of ``text``, keeping lone surrogates."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def decode_utf16_units(units: Iterable[int]) -> list[int]:
    """Combine a sequence of UTF-16 code units into code points.

    A high surrogate followed by a low surrogate becomes one code point.
    An unmatched high surrogate is emitted on its own and the unit after it
    is left in place, in case that unit starts a pair of its own.
    """
    units = list(units)
    output = []
    length = len(units)
    counter = 0

    while counter < length:
        value = units[counter]
        counter += 1
        if _HIGH_SURROGATE_MIN <= value <= _HIGH_SURROGATE_MAX and counter < length:
            extra = units[counter]
            if (extra & _SURROGATE_MASK) == _LOW_SURROGATE_TAG:
                counter += 1
                output.append(((value & 0x3FF) << 10) + (extra & 0x3FF) + 0x10000)
            else:
                output.append(value)
        else:
            output.append(value)

    return output


def decode_code_points(text: str) -> list[int]:
    """Decode ``text`` into a list of integer code points."""
    if not text:
        return []
    return decode_utf16_units(_utf16_units(text))


def code_point_length(text: str) -> int:
    """Number of characters in ``text`` with surrogate pairs counted once."""
    return len(decode_code_points(text))
