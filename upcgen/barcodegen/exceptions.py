"""
Централизованные исключения генератора UPC.

Иерархия типизированных исключений для кодирования UPC-A/UPC-E.
Все ошибки фатальны для текущего вызова кодирования: частичного
результата нет, повторов нет.

Example:
    >>> from upcgen.barcodegen.exceptions import UpcError
    >>> try:
    ...     encode(config)
    ... except UpcError as e:
    ...     logger.error(f"UPC encode failed: {e}")
    ...     print(f"Kind: {e.kind}")

Иерархия:
    UpcError (базовое)
    ├── MissingDataError
    ├── InvalidCharactersError
    ├── InputTooLongError
    ├── InvalidInputDataError
    ├── InvalidUpcEDataError
    ├── InvalidAddOnDataError
    ├── UnsupportedConfigurationError
    └── CodewordsNotSupportedError
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "UpcError",
    "MissingDataError",
    "InvalidCharactersError",
    "InputTooLongError",
    "InvalidInputDataError",
    "InvalidUpcEDataError",
    "InvalidAddOnDataError",
    "UnsupportedConfigurationError",
    "CodewordsNotSupportedError",
]


# ==============================================================================
# BASE EXCEPTION
# ==============================================================================


class UpcError(Exception):
    """
    Базовое исключение для всех ошибок кодирования UPC.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        context: Дополнительный контекст для отладки (опционально)

    Example:
        >>> raise UpcError("Encode failed", context={"mode": "upce"})
    """

    kind: str = "UpcError"

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.message]
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")
        return "".join(parts)

    def __repr__(self) -> str:
        """Представление для отладки."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )


# ==============================================================================
# INPUT ERRORS
# ==============================================================================


class MissingDataError(UpcError):
    """Primary content is empty after the add-on split."""

    kind = "MissingData"


class InvalidCharactersError(UpcError):
    """Non-digit character in the primary content."""

    kind = "InvalidCharacters"


class InputTooLongError(UpcError):
    """Primary content exceeds 11 (UPC-A) or 7 (UPC-E) digits."""

    kind = "InputTooLong"


class InvalidInputDataError(UpcError):
    """UPC-E number system digit is not 0 or 1."""

    kind = "InvalidInputData"


class InvalidUpcEDataError(UpcError):
    """
    UPC-E zero-suppression rule violated.

    Раскрытие UPC-E в UPC-A невозможно: для режима 3 цифра X3 не может
    быть 0, 1 или 2; для режима 4 цифра X4 не может быть 0; для режимов
    5-9 цифра X5 не может быть 0.
    """

    kind = "InvalidUpcEData"


class InvalidAddOnDataError(UpcError):
    """Add-on content present but could not be encoded as EAN-2/EAN-5."""

    kind = "InvalidAddOnData"


# ==============================================================================
# CONFIGURATION / CAPABILITY ERRORS
# ==============================================================================


class UnsupportedConfigurationError(UpcError):
    """Human-readable placement or alignment incompatible with UPC."""

    kind = "UnsupportedConfiguration"


class CodewordsNotSupportedError(UpcError):
    """UPC has no intermediate codeword representation, only bar widths."""

    kind = "CodewordsNotSupported"
