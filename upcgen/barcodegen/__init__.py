"""
barcodegen

Модуль кодирования UPC-A / UPC-E (EN 797) с типизированным API.

- Контрольная цифра, раскрытие UPC-E в UPC-A, выбор паритета.
- Дополнения EAN-2 / EAN-5 и маркеры связи композитного символа.
- Геометрия полос и подписей, растровый рендеринг через Pillow.

Public API:
    - UpcGenerator: генератор UPC-символов (class)
    - encode / try_encode: кодирование конфигурации (raise / tagged result)
    - UpcError и подклассы: ошибки кодирования
    - UpcRenderOptions: типобезопасные опции рендеринга (TypedDict)

Примеры:
    >>> from upcgen.barcodegen import UpcGenerator
    >>> from upcgen.model.enums import UpcMode
    >>> symbol = UpcGenerator.create(UpcMode.UPCA, "03600029145").encode()
    >>> symbol.readable
    '036000291452'

Зависимости:
    Pillow
"""

from upcgen.barcodegen.exceptions import (
    CodewordsNotSupportedError,
    InputTooLongError,
    InvalidAddOnDataError,
    InvalidCharactersError,
    InvalidInputDataError,
    InvalidUpcEDataError,
    MissingDataError,
    UnsupportedConfigurationError,
    UpcError,
)
from upcgen.barcodegen.upc_generator import (
    UpcGenerator,
    UpcRenderOptions,
    encode,
    try_encode,
)

__all__ = [
    "UpcGenerator",
    "UpcRenderOptions",
    "encode",
    "try_encode",
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
