"""
RU: Построение геометрии UPC-символа: прямоугольники полос и подписи.
EN: UPC symbol layout. Turns a run-length pattern into bar rectangles
(with guard bar extensions, add-on drop and composite linkage markers)
and human-readable text boxes. All coordinates are in modules.
"""

from __future__ import annotations

import logging
from typing import Final, List, NamedTuple, Optional, Tuple

from upcgen.model.enums import HumanReadableLocation, UpcMode
from upcgen.model.symbol import Rectangle, TextBox

logger = logging.getLogger(__name__)

__all__ = [
    "SymbolLayout",
    "plot_symbol",
    "pattern_to_modules",
    "SIDE_MARGIN",
    "SHORT_LONG_DIFF",
    "COMPOSITE_OFFSET",
]

SIDE_MARGIN: Final[int] = 6  # Пустая зона слева и справа
SHORT_LONG_DIFF: Final[int] = 5  # Удлинение защитных полос
ADD_ON_DROP: Final[int] = 8  # Полосы дополнения начинаются ниже
COMPOSITE_OFFSET: Final[int] = 6  # Место под строку связи композитного символа
LINKAGE_EXTENSION: Final[int] = 2
ADD_ON_BASELINE: Final[float] = 6.0


class SymbolLayout(NamedTuple):
    rectangles: Tuple[Rectangle, ...]
    texts: Tuple[TextBox, ...]
    width: int
    height: int


# x positions of the outermost guard bars (linkage markers attach here)
_EDGE_BARS = {UpcMode.UPCA: (0, 94), UpcMode.UPCE: (0, 50)}


def _bar_extent(
    mode: UpcMode, x: int, linkage_flag: bool, default_height: int
) -> Tuple[int, int]:
    """Return ``(y, height)`` for a bar starting at module ``x``."""
    y = 0
    h = default_height
    if mode is UpcMode.UPCA:
        if x < 10 or x > 84:
            h += SHORT_LONG_DIFF
        if 45 < x < 49:
            h += SHORT_LONG_DIFF
        add_on_start = 95
    else:
        if x < 4 or x > 45:
            h += SHORT_LONG_DIFF
        add_on_start = 52
    if x > add_on_start:
        h -= ADD_ON_DROP
        y = ADD_ON_DROP
    if linkage_flag and x in _EDGE_BARS[mode]:
        h += LINKAGE_EXTENSION
        y -= LINKAGE_EXTENSION
    return y, h


def _linkage_separators(mode: UpcMode) -> List[Rectangle]:
    left, right = _EDGE_BARS[mode]
    return [
        Rectangle(left + SIDE_MARGIN, 0, 1, 2),
        Rectangle(right + SIDE_MARGIN, 0, 1, 2),
        Rectangle(left - 1 + SIDE_MARGIN, 2, 1, 2),
        Rectangle(right + 1 + SIDE_MARGIN, 2, 1, 2),
    ]


def _text_boxes(
    mode: UpcMode,
    readable: str,
    add_on_text: Optional[str],
    baseline: float,
    add_on_baseline: float,
) -> List[TextBox]:
    if mode is UpcMode.UPCA:
        texts = [
            TextBox(0, baseline, 6, readable[0:1]),
            TextBox(16, baseline, 36, readable[1:6]),
            TextBox(55, baseline, 36, readable[6:11]),
            TextBox(101, baseline, 6, readable[11:12]),
        ]
        add_on_x = 110
    else:
        texts = [
            TextBox(0, baseline, 6, readable[0:1]),
            TextBox(9, baseline, 43, readable[1:7]),
            TextBox(57, baseline, 6, readable[7:8]),
        ]
        add_on_x = 66
    if add_on_text is not None:
        width = 20 if len(add_on_text) == 2 else 47
        texts.append(TextBox(add_on_x, add_on_baseline, width, add_on_text))
    return texts


def plot_symbol(
    pattern: str,
    mode: UpcMode,
    readable: str,
    add_on_text: Optional[str] = None,
    linkage_flag: bool = False,
    human_readable_location: HumanReadableLocation = HumanReadableLocation.BOTTOM,
    default_height: int = 40,
    font_size: float = 8,
) -> SymbolLayout:
    """
    Lay out bars and text for a finished UPC run-length pattern.

    Args:
        pattern: Alternating bar/space run lengths, first run is a bar.
        mode: UPC-A or UPC-E (selects guard zones and text bands).
        readable: Digits including check digit (12 or 8 characters).
        add_on_text: Normalised add-on text, or None.
        linkage_flag: Symbol is the linear part of a composite symbol.
        human_readable_location: NONE suppresses all text boxes.
        default_height: Data bar height in modules.
        font_size: Font size used to place the text baseline.

    Returns:
        SymbolLayout with rectangles, texts, width and height.
    """
    composite_offset = COMPOSITE_OFFSET if linkage_flag else 0
    rectangles: List[Rectangle] = []
    width = 0
    x = 0
    black = True
    for ch in pattern:
        run = int(ch)
        if black:
            y, h = _bar_extent(mode, x, linkage_flag, default_height)
            rectangles.append(
                Rectangle(x + SIDE_MARGIN, y + composite_offset, run, h)
            )
            width = max(width, x + run + 2 * SIDE_MARGIN)
        black = not black
        x += run

    if linkage_flag:
        rectangles.extend(_linkage_separators(mode))

    height = default_height + SHORT_LONG_DIFF

    texts: List[TextBox] = []
    if human_readable_location is not HumanReadableLocation.NONE:
        baseline = height + font_size - SHORT_LONG_DIFF + composite_offset
        texts = _text_boxes(
            mode,
            readable,
            add_on_text,
            baseline,
            ADD_ON_BASELINE + composite_offset,
        )

    logger.debug(
        "Plotted %s: %d bars, width=%d, height=%d",
        mode.name,
        len(rectangles),
        width,
        height,
    )
    return SymbolLayout(tuple(rectangles), tuple(texts), width, height)


def pattern_to_modules(pattern: str) -> str:
    """
    Expand a run-length pattern into a module string ('1' bar, '0' space).

    >>> pattern_to_modules("1112")
    '10100'
    """
    out = []
    black = True
    for ch in pattern:
        out.append(("1" if black else "0") * int(ch))
        black = not black
    return "".join(out)
