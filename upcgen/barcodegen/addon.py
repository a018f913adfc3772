"""
EAN-2 / EAN-5 add-on symbols and their overlay onto a UPC pattern.

RU: Дополнительный символ (цена, номер выпуска) печатается справа от
основного символа через пробел шириной 9 модулей.
"""

from __future__ import annotations

import logging
from typing import Final

from upcgen.barcodegen.content import is_digits
from upcgen.barcodegen.exceptions import InvalidAddOnDataError
from upcgen.barcodegen.tables import DIGIT_SETS, EAN2_PARITY, EAN5_PARITY

logger = logging.getLogger(__name__)

__all__ = [
    "ADD_ON_SEPARATOR",
    "calc_add_on",
    "overlay_add_on",
    "normalize_add_on_text",
]

ADD_ON_SEPARATOR: Final[str] = "9"
ADD_ON_START: Final[str] = "112"
ADD_ON_DELINEATOR: Final[str] = "11"
MAX_ADD_ON_DIGITS: Final[int] = 5


def _build(digits: str, parity: str) -> str:
    parts = [ADD_ON_START]
    for i, (ch, set_name) in enumerate(zip(digits, parity)):
        if i:
            parts.append(ADD_ON_DELINEATOR)
        parts.append(DIGIT_SETS[set_name][int(ch)])
    return "".join(parts)


def _ean2(content: str) -> str:
    digits = content.zfill(2)
    return _build(digits, EAN2_PARITY[int(digits) % 4])


def _ean5(content: str) -> str:
    digits = content.zfill(5)
    odd = sum(int(digits[i]) for i in (0, 2, 4))
    even = sum(int(digits[i]) for i in (1, 3))
    return _build(digits, EAN5_PARITY[(3 * odd + 9 * even) % 10])


def calc_add_on(content: str) -> str:
    """
    Run-length pattern of an EAN-2 (1-2 digits) or EAN-5 (3-5 digits) add-on.

    Returns an empty string when ``content`` cannot be encoded.

    Example:
        >>> calc_add_on("12")
        '1122221112122'
    """
    if not is_digits(content) or len(content) > MAX_ADD_ON_DIGITS:
        logger.debug("Add-on content %r cannot be encoded", content)
        return ""
    if len(content) > 2:
        return _ean5(content)
    return _ean2(content)


def overlay_add_on(pattern: str, add_on_content: str) -> str:
    """
    Append the separator gap and add-on pattern to a finished base pattern.

    Raises:
        InvalidAddOnDataError: the add-on cannot be encoded.
    """
    add_on_pattern = calc_add_on(add_on_content)
    if not add_on_pattern:
        raise InvalidAddOnDataError(
            "Invalid Add-On data", context={"add_on": add_on_content}
        )
    return pattern + ADD_ON_SEPARATOR + add_on_pattern


def normalize_add_on_text(add_on_content: str) -> str:
    """
    Left-pad add-on display text: 1 digit to 2, 3 digits to 4.

    >>> normalize_add_on_text("5")
    '05'
    >>> normalize_add_on_text("123")
    '0123'
    """
    if len(add_on_content) in (1, 3):
        return "0" + add_on_content
    return add_on_content
