"""
Таблицы кодирования символов UPC/EAN (EN 797).

Each digit code is four run lengths (space, bar, space, bar) summing to
seven modules. Parity strings pick the table per digit: ``A`` is the odd
parity set (also used for the right half of UPC-A), ``B`` the even set.
"""

from __future__ import annotations

from typing import Final, Mapping, Tuple

__all__ = [
    "SET_AC",
    "SET_B",
    "UPC_PARITY_0",
    "UPC_PARITY_1",
    "EAN2_PARITY",
    "EAN5_PARITY",
    "DIGIT_SETS",
    "parity_scheme",
]

SET_AC: Final[Tuple[str, ...]] = (
    "3211", "2221", "2122", "1411", "1132",
    "1231", "1114", "1312", "1213", "3112",
)

SET_B: Final[Tuple[str, ...]] = (
    "1123", "1222", "2212", "1141", "2311",
    "1321", "4111", "2131", "3121", "2113",
)

# Number system 0, EN 797 table 4
UPC_PARITY_0: Final[Tuple[str, ...]] = (
    "BBBAAA", "BBABAA", "BBAABA", "BBAAAB", "BABBAA",
    "BAABBA", "BAAABB", "BABABA", "BABAAB", "BAABAB",
)

# Number system 1 is the mirror image of number system 0
UPC_PARITY_1: Final[Tuple[str, ...]] = (
    "AAABBB", "AABABB", "AABBAB", "AABBBA", "ABAABB",
    "ABBAAB", "ABBBAA", "ABABAB", "ABABBA", "ABBABA",
)

# EAN-2 add-on, indexed by value mod 4
EAN2_PARITY: Final[Tuple[str, ...]] = ("AA", "AB", "BA", "BB")

# EAN-5 add-on, indexed by (3 * odd + 9 * even digit sums) mod 10
EAN5_PARITY: Final[Tuple[str, ...]] = (
    "BBAAA", "BABAA", "BAABA", "BAAAB", "ABBAA",
    "AABBA", "AAABB", "ABABA", "ABAAB", "AABAB",
)

DIGIT_SETS: Final[Mapping[str, Tuple[str, ...]]] = {"A": SET_AC, "B": SET_B}


def parity_scheme(number_system: int, check_digit: int) -> str:
    """Return the UPC-E parity string for a number system (0/1) and check digit."""
    if number_system == 0:
        return UPC_PARITY_0[check_digit]
    if number_system == 1:
        return UPC_PARITY_1[check_digit]
    raise ValueError(f"UPC-E number system must be 0 or 1, got {number_system}")
