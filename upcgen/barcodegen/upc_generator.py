from __future__ import annotations

import logging
import math
from io import BytesIO
from typing import Any, Optional, Set, TypedDict, Union

from PIL import Image, ImageDraw, ImageFont
from PIL.ImageFont import FreeTypeFont
from PIL.ImageFont import ImageFont as PILImageFont

from upcgen.barcodegen.addon import normalize_add_on_text, overlay_add_on
from upcgen.barcodegen.content import split_content
from upcgen.barcodegen.exceptions import (
    CodewordsNotSupportedError,
    MissingDataError,
    UpcError,
)
from upcgen.barcodegen.renderer import plot_symbol
from upcgen.barcodegen.upca import encode_upca
from upcgen.barcodegen.upce import encode_upce
from upcgen.model.enums import UpcMode
from upcgen.model.symbol import EncodedSymbol, EncodeResult, UpcConfig

logger = logging.getLogger(__name__)

__all__ = [
    "UpcGenerator",
    "UpcRenderOptions",
    "encode",
    "try_encode",
]

# Нижний вынос текста под базовой линией (в модулях)
TEXT_DESCENT = 2


class UpcRenderOptions(TypedDict, total=False):
    """Типобезопасные опции растрового рендеринга UPC-символа."""

    scale: int  # Пикселей на модуль
    font_path: str  # TrueType-шрифт для подписи (иначе встроенный)
    foreground: str
    background: str


def encode(config: UpcConfig) -> EncodedSymbol:
    """
    Encode one UPC symbol: split, validate, build pattern, overlay add-on, lay out.

    Args:
        config: Immutable symbol configuration.

    Returns:
        EncodedSymbol with pattern, readable digits and geometry.

    Raises:
        UpcError: any subclass from ``upcgen.barcodegen.exceptions``.
    """
    logger.debug("Encoding %s content=%r", config.mode.name, config.content)
    primary, add_on = split_content(config.content)
    if not primary:
        raise MissingDataError(
            "Missing UPC data", context={"mode": config.mode.value}
        )

    equivalent: Optional[str] = None
    if config.mode is UpcMode.UPCA:
        upca = encode_upca(primary)
        readable, pattern, check, info = (
            upca.readable,
            upca.pattern,
            upca.check_digit,
            upca.encode_info,
        )
    else:
        upce = encode_upce(primary)
        readable, pattern, check, info = (
            upce.readable,
            upce.pattern,
            upce.check_digit,
            upce.encode_info,
        )
        equivalent = upce.equivalent_upca

    add_on_text: Optional[str] = None
    if add_on is not None:
        pattern = overlay_add_on(pattern, add_on)
        add_on_text = normalize_add_on_text(add_on)

    layout = plot_symbol(
        pattern,
        config.mode,
        readable,
        add_on_text=add_on_text,
        linkage_flag=config.linkage_flag,
        human_readable_location=config.human_readable_location,
        default_height=config.default_height,
        font_size=config.font_size,
    )
    symbol = EncodedSymbol(
        mode=config.mode,
        pattern=pattern,
        readable=readable,
        check_digit=check,
        add_on_content=add_on_text,
        encode_info=info,
        equivalent_upca=equivalent,
        rectangles=layout.rectangles,
        texts=layout.texts,
        width=layout.width,
        height=layout.height,
    )
    logger.debug("Encoded %s", symbol)
    return symbol


def try_encode(config: UpcConfig) -> EncodeResult:
    """Like ``encode`` but returns the failure as a value instead of raising."""
    try:
        return EncodeResult(symbol=encode(config))
    except UpcError as e:
        logger.warning("UPC encode failed: %s", e)
        return EncodeResult(error=e)


class UpcGenerator:
    """
    API for UPC-A/UPC-E symbol generation.

    Args:
        config: Symbol configuration (mode, content, linkage, text placement)

    Examples:
        >>> gen = UpcGenerator(UpcConfig(mode=UpcMode.UPCE, content="0123456+05"))
        >>> gen.encode().readable
        '01234565'
        >>> img = gen.render_image({"scale": 3})
    """

    def __init__(self, config: UpcConfig) -> None:
        if not isinstance(config, UpcConfig):
            raise TypeError(f"config must be UpcConfig, got {type(config)!r}")
        self.config = config

    @classmethod
    def create(cls, mode: UpcMode, content: str, **kwargs: Any) -> "UpcGenerator":
        return cls(UpcConfig(mode=mode, content=content, **kwargs))

    def encode(self) -> EncodedSymbol:
        return encode(self.config)

    def validate(self) -> None:
        """
        Проверяет, что содержимое кодируется в текущем режиме.

        Raises:
            UpcError: при ошибке данных.
        """
        self.encode()

    def codewords(self) -> Any:
        """UPC is encoded straight to bar widths; there are no codewords."""
        raise CodewordsNotSupportedError(
            "UPC does not use codewords", context={"mode": self.config.mode.value}
        )

    def render_image(
        self,
        options: Optional[UpcRenderOptions] = None,
        strict: bool = True,
    ) -> Image.Image:
        """
        Рендеринг символа в растровое изображение.

        Args:
            options: Scale, font and colours (see UpcRenderOptions).
                     Scale defaults to ``config.module_scale``.
            strict: Если True, ошибки кодирования пробрасываются.
                    Если False, возвращается белое placeholder-изображение
                    и логируется предупреждение.

        Returns:
            PIL Image (RGB).

        Raises:
            UpcError: если strict=True и кодирование завершилось с ошибкой.
        """
        opts: UpcRenderOptions = {
            "scale": self.config.module_scale,
            "foreground": "black",
            "background": "white",
        }
        opts.update(options or {})
        scale = int(opts["scale"])
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")

        try:
            symbol = self.encode()
        except UpcError as e:
            if strict:
                raise
            logger.warning("%s; returning placeholder", e)
            placeholder = (113 * scale, (self.config.default_height + 15) * scale)
            return Image.new("RGB", placeholder, color=opts["background"])

        bottom = max(r.bottom for r in symbol.rectangles)
        if symbol.texts:
            text_bottom = max(t.baseline for t in symbol.texts) + TEXT_DESCENT
            bottom = max(bottom, text_bottom)
        size = (symbol.width * scale, int(math.ceil(bottom)) * scale)
        img = Image.new("RGB", size, color=opts["background"])
        draw = ImageDraw.Draw(img)

        for r in symbol.rectangles:
            draw.rectangle(
                (
                    r.x * scale,
                    r.y * scale,
                    r.right * scale - 1,
                    r.bottom * scale - 1,
                ),
                fill=opts["foreground"],
            )

        if symbol.texts:
            font = self._load_font(
                opts.get("font_path"), self.config.font_size * scale
            )
            for t in symbol.texts:
                bbox = font.getbbox(t.text)
                txt_width = bbox[2] - bbox[0]
                txt_height = bbox[3]
                pos = (
                    (t.x + t.width / 2) * scale - txt_width / 2,
                    max(0, t.baseline * scale - txt_height),
                )
                draw.text(pos, t.text, font=font, fill=opts["foreground"])

        logger.info(
            "UPC image rendered: %s %s, %dx%d px",
            symbol.mode.name,
            symbol.readable,
            size[0],
            size[1],
        )
        return img

    def render_bytes(
        self, options: Optional[UpcRenderOptions] = None, image_format: str = "PNG"
    ) -> bytes:
        img = self.render_image(options=options)
        buf = BytesIO()
        img.save(buf, format=image_format)
        buf.seek(0)
        return buf.read()

    @staticmethod
    def _load_font(
        font_path: Optional[str], font_size: int
    ) -> Union[FreeTypeFont, PILImageFont]:
        font: Union[FreeTypeFont, PILImageFont] = ImageFont.load_default()
        if font_path:
            try:
                font = ImageFont.truetype(font_path, font_size)
            except OSError as e:
                logger.warning("Failed to load font (%r): %r", font_path, e)
        return font

    @classmethod
    def supported_modes(cls) -> Set[UpcMode]:
        return set(UpcMode)
