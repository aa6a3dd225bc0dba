#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/transforms/ordinals.py
"""CJK numerals for figure and table ordinals."""

from __future__ import annotations

from md2pub.constants import CJK_DIGITS, CJK_TEN, MAX_ORDINAL, MIN_ORDINAL
from md2pub.exceptions import OrdinalRangeError


def to_chinese_numeral(number: int) -> str:
    """Convert an integer between 1 and 99 to its Chinese numeral.

    Parameters
    ----------
    number : int
        Ordinal to convert

    Returns
    -------
    str
        The numeral, e.g. ``一`` for 1, ``十`` for 10, ``二十一`` for 21

    Raises
    ------
    OrdinalRangeError
        If ``number`` is not an integer or falls outside 1-99

    Examples
    --------
    >>> to_chinese_numeral(3)
    '三'
    >>> to_chinese_numeral(15)
    '十五'
    >>> to_chinese_numeral(40)
    '四十'

    """
    if isinstance(number, bool) or not isinstance(number, int) or not MIN_ORDINAL <= number <= MAX_ORDINAL:
        raise OrdinalRangeError(number)

    if number < 10:
        return CJK_DIGITS[number]

    tens, ones = divmod(number, 10)
    result = CJK_TEN if tens == 1 else CJK_DIGITS[tens] + CJK_TEN
    if ones:
        result += CJK_DIGITS[ones]
    return result
