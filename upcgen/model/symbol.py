# RU: Неизменяемая конфигурация UPC-символа и значения результата кодирования (полосы, подписи, ошибки).
# EN: Immutable UPC symbol configuration plus encode result values (bars, text boxes, tagged result).

import logging
from dataclasses import asdict, dataclass, field, replace
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional, Tuple, cast

from upcgen.barcodegen.exceptions import UnsupportedConfigurationError, UpcError

from .enums import (
    UPC_ALIGNMENT,
    UPC_ALLOWED_LOCATIONS,
    HumanReadableAlignment,
    HumanReadableLocation,
    UpcMode,
)

logger = logging.getLogger(__name__)

DEFAULT_BAR_HEIGHT = 40
DEFAULT_FONT_SIZE = 8
DEFAULT_MODULE_SCALE = 4


@dataclass(frozen=True)
class UpcConfig:
    """
    Configuration of one UPC symbol, fixed before encoding.

    Fail-fast: an incompatible text placement or alignment is rejected
    here, at construction, not at encode time.

    Examples:
        cfg = UpcConfig(mode=UpcMode.UPCE, content="0123456+12")
        cfg2 = cfg.with_linkage(True)
        data = cfg.to_dict()
    """

    schema_version: ClassVar[str] = "1.0"

    mode: UpcMode = UpcMode.UPCA
    content: str = ""
    linkage_flag: bool = False
    human_readable_location: HumanReadableLocation = HumanReadableLocation.BOTTOM
    human_readable_alignment: HumanReadableAlignment = UPC_ALIGNMENT
    default_height: int = DEFAULT_BAR_HEIGHT
    font_size: int = DEFAULT_FONT_SIZE
    module_scale: int = DEFAULT_MODULE_SCALE

    def __post_init__(self) -> None:
        if not isinstance(self.mode, UpcMode):
            raise TypeError(f"mode must be UpcMode enum, got {type(self.mode)!r}")
        if not isinstance(self.content, str):
            raise TypeError(f"content must be str, got {type(self.content)!r}")
        # Строковые значения (из JSON/настроек) приводятся к enum
        object.__setattr__(
            self,
            "human_readable_location",
            HumanReadableLocation(self.human_readable_location),
        )
        object.__setattr__(
            self,
            "human_readable_alignment",
            HumanReadableAlignment(self.human_readable_alignment),
        )
        if self.human_readable_location not in UPC_ALLOWED_LOCATIONS:
            logger.warning(
                "Rejected human-readable location %r for UPC",
                self.human_readable_location,
            )
            raise UnsupportedConfigurationError(
                "Cannot display human-readable text above UPC bar codes.",
                context={"location": self.human_readable_location.value},
            )
        if self.human_readable_alignment is not UPC_ALIGNMENT:
            raise UnsupportedConfigurationError(
                "UPC human-readable text alignment cannot be changed.",
                context={"alignment": self.human_readable_alignment.value},
            )
        if self.default_height <= 0:
            raise ValueError(f"Invalid default_height: {self.default_height}")
        if self.font_size <= 0:
            raise ValueError(f"Invalid font_size: {self.font_size}")
        if self.module_scale <= 0:
            raise ValueError(f"Invalid module_scale: {self.module_scale}")

    @staticmethod
    def allowed_locations() -> FrozenSet[HumanReadableLocation]:
        return UPC_ALLOWED_LOCATIONS

    def with_content(self, content: str) -> "UpcConfig":
        return replace(self, content=content)

    def with_mode(self, mode: UpcMode) -> "UpcConfig":
        return replace(self, mode=mode)

    def with_linkage(self, linkage_flag: bool = True) -> "UpcConfig":
        return replace(self, linkage_flag=linkage_flag)

    @classmethod
    def from_settings(
        cls, settings: Mapping[str, Any], **overrides: Any
    ) -> "UpcConfig":
        """
        Build a config from the package settings dict (see ``load_config``).

        Only rendering-related keys are taken from ``settings``; symbol
        specific fields (mode, content, linkage) come from ``overrides``.
        """
        kwargs: Dict[str, Any] = {}
        if "default_height" in settings:
            kwargs["default_height"] = int(settings["default_height"])
        if "font_size" in settings:
            kwargs["font_size"] = int(settings["font_size"])
        if "module_scale" in settings:
            kwargs["module_scale"] = int(settings["module_scale"])
        if "human_readable_location" in settings:
            kwargs["human_readable_location"] = HumanReadableLocation(
                settings["human_readable_location"]
            )
        kwargs.update(overrides)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        dct: Dict[str, Any] = asdict(self)
        for key in ("mode", "human_readable_location", "human_readable_alignment"):
            dct[key] = dct[key].value
        dct["schema_version"] = self.schema_version
        return dct

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "UpcConfig":
        d = dict(d)
        if "schema_version" in d and d["schema_version"] != cls.schema_version:
            logger.warning(
                "Schema version mismatch (expected %s, got %s)",
                cls.schema_version,
                d["schema_version"],
            )
        d.pop("schema_version", None)
        if "mode" in d:
            d["mode"] = UpcMode(d["mode"])
        if "human_readable_location" in d:
            d["human_readable_location"] = HumanReadableLocation(
                d["human_readable_location"]
            )
        if "human_readable_alignment" in d:
            d["human_readable_alignment"] = HumanReadableAlignment(
                d["human_readable_alignment"]
            )
        return cls(**d)


@dataclass(frozen=True)
class Rectangle:
    """Bar rectangle in module units."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class TextBox:
    """Human-readable text centred in ``[x, x + width]`` on ``baseline``."""

    x: float
    baseline: float
    width: float
    text: str


@dataclass(frozen=True)
class EncodedSymbol:
    """Finished UPC symbol: run-length pattern, readable string and geometry."""

    mode: UpcMode
    pattern: str
    readable: str
    check_digit: str
    add_on_content: Optional[str] = None
    encode_info: str = ""
    equivalent_upca: Optional[str] = None
    rectangles: Tuple[Rectangle, ...] = field(default_factory=tuple)
    texts: Tuple[TextBox, ...] = field(default_factory=tuple)
    width: int = 0
    height: int = 0

    @property
    def module_total(self) -> int:
        return sum(int(c) for c in self.pattern)

    def __str__(self) -> str:
        addon = f"+{self.add_on_content}" if self.add_on_content else ""
        return f"EncodedSymbol({self.mode.name}, readable={self.readable}{addon})"


@dataclass(frozen=True)
class EncodeResult:
    """
    Tagged encode outcome: exactly one of ``symbol`` / ``error`` is set.

    Used by ``try_encode`` where callers prefer explicit propagation over
    exceptions (GUI/API friendly error recording).
    """

    symbol: Optional[EncodedSymbol] = None
    error: Optional[UpcError] = None

    def __post_init__(self) -> None:
        if (self.symbol is None) == (self.error is None):
            raise ValueError("EncodeResult needs exactly one of symbol or error")

    @property
    def ok(self) -> bool:
        return self.symbol is not None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> EncodedSymbol:
        """Return the symbol or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return cast(EncodedSymbol, self.symbol)
