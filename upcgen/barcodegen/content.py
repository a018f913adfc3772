from __future__ import annotations

import re
from typing import Final, Optional, Pattern, Tuple

from upcgen.barcodegen.exceptions import InputTooLongError, InvalidCharactersError

__all__ = [
    "ADD_ON_DELIMITER",
    "split_content",
    "is_digits",
    "validate_article_number",
]

ADD_ON_DELIMITER: Final[str] = "+"

_DIGITS_RE: Final[Pattern[str]] = re.compile(r"[0-9]+")


def split_content(content: str) -> Tuple[str, Optional[str]]:
    """
    Split raw input at the first '+' into primary content and add-on content.

    Add-on content is ``None`` when there is no delimiter, and ``""`` when
    the delimiter is the last character. Nothing is validated here.

    Example:
        >>> split_content("0123456+12")
        ('0123456', '12')
        >>> split_content("0123456")
        ('0123456', None)
    """
    primary, sep, add_on = content.partition(ADD_ON_DELIMITER)
    if not sep:
        return primary, None
    return primary, add_on


def is_digits(value: str) -> bool:
    """True when ``value`` is a non-empty string of ASCII digits 0-9."""
    return _DIGITS_RE.fullmatch(value) is not None


def validate_article_number(primary: str, max_length: int, symbology: str) -> str:
    """
    Check digits-only and maximum length, then left-pad with zeros.

    Raises:
        InvalidCharactersError: any character outside 0-9.
        InputTooLongError: more than ``max_length`` digits.
    """
    if not is_digits(primary):
        raise InvalidCharactersError(
            "Invalid characters in input", context={"symbology": symbology}
        )
    if len(primary) > max_length:
        raise InputTooLongError(
            "Input data too long",
            context={"symbology": symbology, "max_length": max_length},
        )
    return primary.zfill(max_length)
