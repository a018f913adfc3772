"""
UPC-A encoder: 11-digit article number -> 95-module run-length pattern.

RU: Дополняет номер нулями слева до 11 цифр, вычисляет контрольную цифру
и кодирует обе половины набором A/C.
"""

from __future__ import annotations

import logging
from typing import Final, NamedTuple

from upcgen.barcodegen.check_digit import calc_check_digit
from upcgen.barcodegen.content import validate_article_number
from upcgen.barcodegen.tables import SET_AC

logger = logging.getLogger(__name__)

__all__ = ["UpcaEncoding", "encode_upca", "START_GUARD", "CENTER_GUARD", "END_GUARD"]

UPCA_MAX_DIGITS: Final[int] = 11

START_GUARD: Final[str] = "111"
CENTER_GUARD: Final[str] = "11111"
END_GUARD: Final[str] = "111"


class UpcaEncoding(NamedTuple):
    readable: str
    pattern: str
    check_digit: str
    encode_info: str


def encode_upca(primary: str) -> UpcaEncoding:
    """
    Encode UPC-A primary content (digits only, up to 11).

    Raises:
        InvalidCharactersError: non-digit input.
        InputTooLongError: more than 11 digits.
    """
    payload = validate_article_number(primary, UPCA_MAX_DIGITS, "UPC-A")
    check = calc_check_digit(payload)
    readable = payload + check

    parts = [START_GUARD]
    for i, ch in enumerate(readable):
        if i == 6:
            parts.append(CENTER_GUARD)
        parts.append(SET_AC[int(ch)])
    parts.append(END_GUARD)

    logger.debug("UPC-A %s check digit: %s", payload, check)
    return UpcaEncoding(
        readable=readable,
        pattern="".join(parts),
        check_digit=check,
        encode_info=f"Check Digit: {check}\n",
    )
