"""
UPC-E encoder (zero-suppressed UPC-A).

The 7-digit source is the number system digit (0 or 1), five data digits
and the encoding mode digit. The check digit comes from the UPC-A number
the source expands to (EN 797 table 5); the number system and check digit
are carried in the parity of the six encoded digits rather than as
symbol characters of their own.
"""

from __future__ import annotations

import logging
from typing import Final, NamedTuple

from upcgen.barcodegen.check_digit import calc_check_digit
from upcgen.barcodegen.content import validate_article_number
from upcgen.barcodegen.exceptions import InvalidInputDataError, InvalidUpcEDataError
from upcgen.barcodegen.tables import DIGIT_SETS, parity_scheme

logger = logging.getLogger(__name__)

__all__ = ["UpceEncoding", "expand_upce", "encode_upce", "UPCE_END_GUARD"]

UPCE_MAX_DIGITS: Final[int] = 7

UPCE_START_GUARD: Final[str] = "111"
UPCE_END_GUARD: Final[str] = "111111"


class UpceEncoding(NamedTuple):
    readable: str
    pattern: str
    check_digit: str
    equivalent_upca: str
    parity: str
    encode_info: str


def expand_upce(source: str) -> str:
    """
    Expand a padded 7-digit UPC-E source into its 11-digit UPC-A equivalent.

    Example:
        >>> expand_upce("0123456")
        '01234500006'

    Raises:
        InvalidUpcEDataError: the source breaks a zero-suppression rule.
    """
    mode = source[6]
    buf = ["0"] * 11
    buf[0:3] = source[0:3]

    if mode in "012":
        buf[3] = mode
        buf[8:11] = source[3:6]
    elif mode == "3":
        # X3 shall not be 0, 1 or 2
        if source[3] in "012":
            raise InvalidUpcEDataError(
                "Invalid UPC-E data", context={"mode": mode, "x3": source[3]}
            )
        buf[3] = source[3]
        buf[9:11] = source[4:6]
    elif mode == "4":
        # X4 shall not be 0
        if source[4] == "0":
            raise InvalidUpcEDataError(
                "Invalid UPC-E data", context={"mode": mode, "x4": source[4]}
            )
        buf[3:5] = source[3:5]
        buf[10] = source[5]
    else:
        # X5 shall not be 0
        if source[5] == "0":
            raise InvalidUpcEDataError(
                "Invalid UPC-E data", context={"mode": mode, "x5": source[5]}
            )
        buf[3:6] = source[3:6]
        buf[10] = mode

    return "".join(buf)


def encode_upce(primary: str) -> UpceEncoding:
    """
    Encode UPC-E primary content (digits only, up to 7, leading 0 or 1).

    Raises:
        InvalidCharactersError: non-digit input.
        InputTooLongError: more than 7 digits.
        InvalidInputDataError: number system digit other than 0/1.
        InvalidUpcEDataError: zero-suppression rule violated.
    """
    source = validate_article_number(primary, UPCE_MAX_DIGITS, "UPC-E")

    if source[0] not in "01":
        raise InvalidInputDataError(
            "Invalid input data", context={"number_system": source[0]}
        )
    number_system = int(source[0])

    equivalent = expand_upce(source)
    check = calc_check_digit(equivalent)
    logger.debug("UPC-E %s expands to %s, check digit: %s", source, equivalent, check)

    parity = parity_scheme(number_system, int(check))
    parts = [UPCE_START_GUARD]
    for ch, set_name in zip(source[1:7], parity):
        parts.append(DIGIT_SETS[set_name][int(ch)])
    parts.append(UPCE_END_GUARD)

    return UpceEncoding(
        readable=source + check,
        pattern="".join(parts),
        check_digit=check,
        equivalent_upca=equivalent,
        parity=parity,
        encode_info=f"Check Digit: {check}\n",
    )
