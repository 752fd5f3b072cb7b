"""Character classification for schematic cells."""

BLANK = '.'
GEAR = '*'

DIGITS = frozenset('0123456789')
LINE_ENDINGS = frozenset('\r\n')


def is_digit(c: str) -> bool:
    """ASCII decimal digit only; other Unicode digits are symbols."""
    return c in DIGITS


def is_special(c: str, blank: str = BLANK) -> bool:
    """True for anything that is not a digit, the blank placeholder or whitespace."""
    # isspace() covers the line endings too
    return not (c in DIGITS or c == blank or c.isspace())


def is_gear(c: str, gear: str = GEAR) -> bool:
    return c == gear
