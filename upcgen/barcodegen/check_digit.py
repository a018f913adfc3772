from __future__ import annotations

__all__ = ["calc_check_digit", "UPCA_PAYLOAD_LENGTH"]

UPCA_PAYLOAD_LENGTH = 11


def calc_check_digit(digits: str) -> str:
    """
    Modulo-10 check digit of an 11-digit UPC-A payload.

    Even positions (0, 2, ..., 10) weigh 3, odd positions weigh 1.

    Example:
        >>> calc_check_digit("03600029145")
        '2'
    """
    if len(digits) != UPCA_PAYLOAD_LENGTH or digits.strip("0123456789"):
        raise ValueError(
            f"Check digit needs {UPCA_PAYLOAD_LENGTH} digits, got {digits!r}"
        )
    total = 0
    for i, ch in enumerate(digits):
        value = int(ch)
        total += value * 3 if i % 2 == 0 else value
    return str((10 - total % 10) % 10)
