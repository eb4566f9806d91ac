"""Base decoder for share values.

Share y-values arrive as digit strings in bases 2..16, most significant
digit first. Python int gives exact results for any magnitude.
"""

from secretrecon.errors import (
    InvalidDigitCharacter, DigitExceedsBase, UnsupportedBase,
)

MIN_BASE = 2
MAX_BASE = 16

_DIGITS = '0123456789abcdef'


def _check_base(base: int):
    if (isinstance(base, bool) or not isinstance(base, int)
            or not (MIN_BASE <= base <= MAX_BASE)):
        raise UnsupportedBase(base)


def digit_value(char: str, value: str = None, position: int = 0) -> int:
    """Value of a single digit character: '0'-'9' -> 0-9, 'a'-'f'/'A'-'F' -> 10-15."""
    if '0' <= char <= '9':
        return ord(char) - ord('0')
    if 'a' <= char <= 'f':
        return 10 + ord(char) - ord('a')
    if 'A' <= char <= 'F':
        return 10 + ord(char) - ord('A')
    raise InvalidDigitCharacter(char if value is None else value, char, position)


def decode(value: str, base: int) -> int:
    """Convert a digit string in the given base to an integer.

    Walks the string from the rightmost (least significant) character,
    accumulating digit * base^position.

    Raises:
        UnsupportedBase: base not in [2, 16].
        InvalidDigitCharacter: character outside 0-9, a-f, A-F (or empty value).
        DigitExceedsBase: a digit >= base.
    """
    _check_base(base)
    if not value:
        raise InvalidDigitCharacter(value, '', 0)

    result = 0
    power = 1
    last = len(value) - 1
    for i in range(last, -1, -1):
        c = value[i]
        d = digit_value(c, value, i)
        if d >= base:
            raise DigitExceedsBase(value, c, base)
        result += d * power
        power *= base
    return result


def encode(number: int, base: int) -> str:
    """Inverse of decode for non-negative integers, lowercase digits."""
    _check_base(base)
    if number < 0:
        raise ValueError(f"Cannot encode negative value {number}")
    if number == 0:
        return '0'
    out = []
    while number:
        number, d = divmod(number, base)
        out.append(_DIGITS[d])
    return ''.join(reversed(out))
