"""
model/enums.py

(Краткое RU: Перечисления для UPC-символики: режим, размещение и выравнивание подписи.)

EN: Domain enums for UPC-A/UPC-E symbol generation (fully type-safe).
NO encoding logic here!

- UPC modes (UPC-A and zero-suppressed UPC-E).
- Human-readable text placement options and the subset UPC accepts.
- Human-readable text alignment (UPC text alignment is fixed to CENTER).

See Also:
    - upcgen/barcodegen (for pattern and geometry logic)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, FrozenSet, Literal

_logger: Final[logging.Logger] = logging.getLogger(__name__)


class UpcMode(str, Enum):
    UPCA = "upca"
    UPCE = "upce"

    @property
    def payload_length(self) -> int:
        """Number of article-number digits accepted before the check digit."""
        return 11 if self is UpcMode.UPCA else 7

    @property
    def readable_length(self) -> int:
        return 12 if self is UpcMode.UPCA else 8

    @property
    def module_count(self) -> int:
        """Width of the primary symbol in modules (add-on excluded)."""
        return 95 if self is UpcMode.UPCA else 51

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            UpcMode.UPCA: "UPC-A (полный)",
            UpcMode.UPCE: "UPC-E (сжатый)",
        }
        names_en = {
            UpcMode.UPCA: "UPC-A",
            UpcMode.UPCE: "UPC-E",
        }
        return names_ru[self] if lang == "ru" else names_en[self]

    @classmethod
    def from_string(cls, value: str) -> "UpcMode":
        """Parse 'upca', 'UPC-A', 'upc_e' and similar spellings."""
        normalized = value.strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(normalized)
        except ValueError:
            _logger.warning("Unknown UPC mode string: %r", value)
            raise ValueError(f"Unknown UPC mode: {value!r}") from None


class HumanReadableLocation(str, Enum):
    NONE = "none"
    BOTTOM = "bottom"
    TOP = "top"

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            HumanReadableLocation.NONE: "Без подписи",
            HumanReadableLocation.BOTTOM: "Под штрихкодом",
            HumanReadableLocation.TOP: "Над штрихкодом",
        }
        return names_ru[self] if lang == "ru" else self.name.capitalize()


class HumanReadableAlignment(str, Enum):
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    JUSTIFY = "justify"


# UPC text bands sit between the guard bar extensions, so text above the
# symbol is physically impossible.
UPC_ALLOWED_LOCATIONS: Final[FrozenSet[HumanReadableLocation]] = frozenset(
    {HumanReadableLocation.NONE, HumanReadableLocation.BOTTOM}
)
UPC_ALIGNMENT: Final[HumanReadableAlignment] = HumanReadableAlignment.CENTER
