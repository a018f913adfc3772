"""
Пакет upcgen
============

Кодировщик штрихкодов UPC-A и UPC-E по стандарту EN 797.

Этот пакет предоставляет:
    - Вычисление контрольной цифры (взвешенный модуль 10)
    - Раскрытие сжатого UPC-E в эквивалентный UPC-A
    - Выбор схемы паритета UPC-E по системе нумерации и контрольной цифре
    - Дополнения EAN-2 / EAN-5 (цена, номер выпуска)
    - Маркеры связи для композитных символов (2D над 1D)
    - Геометрию полос и подписей, растровый рендеринг через Pillow

Пример базового использования:
    >>> from upcgen import UpcConfig, UpcMode, encode, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> symbol = encode(UpcConfig(mode=UpcMode.UPCE, content="0123456+12"))
    >>> symbol.readable
    '01234565'
    >>> logger.info("Pattern: %s", symbol.pattern)

Пример без исключений:
    >>> from upcgen import try_encode
    >>> result = try_encode(UpcConfig(mode=UpcMode.UPCE, content="2345670"))
    >>> result.ok, result.error_kind
    (False, 'InvalidInputData')

Автор: upcgen Development Team
Версия: 0.1.0
Лицензия: MIT
Python: 3.9+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "upcgen Development Team"
__description__ = "UPC-A / UPC-E bar code encoder with EAN-2/EAN-5 add-ons"
__license__ = "MIT"
__python_requires__ = ">=3.9"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 9):
    raise RuntimeError(
        f"upcgen требует Python 3.9 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

LOGGER_NAMESPACE = "upcgen"

_LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета ``upcgen`` с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, если задана переменная
      окружения UPCGEN_LOG_FILE
    - Форматом с временной меткой, уровнем, модулем и сообщением

    Уровень логирования задаётся переменной окружения UPCGEN_LOG_LEVEL
    (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Функция идемпотентна - повторные вызовы не имеют эффекта.
    """
    log_level_str = os.environ.get("UPCGEN_LOG_LEVEL", "INFO").upper()
    log_level = _LOG_LEVELS.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Консольный обработчик (stderr) - WARNING и выше
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("UPCGEN_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер для указанного модуля в пространстве имён ``upcgen``.

    Аргументы:
        module_name: Обычно ``__name__``. Имена вне пакета получают
                    префикс ``upcgen.``; ``__main__`` становится
                    ``upcgen.main``.

    Возвращает:
        Экземпляр logging.Logger, наследующий обработчики пакета.
    """
    if module_name == LOGGER_NAMESPACE or module_name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAMESPACE}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{clean_name}")


_setup_logging()

# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "default_height": 40,
    "font_size": 8,
    "module_scale": 4,
    "human_readable_location": "bottom",
    "log_level": "INFO",
}


def _apply_log_level(level_name: str) -> None:
    """Применить уровень логирования из файла конфигурации к логгеру пакета."""
    level = _LOG_LEVELS.get(level_name.upper())
    if level is None:
        get_logger(__name__).warning(
            f"Неизвестный уровень логирования: {level_name!r}"
        )
        return
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить настройки рендеринга из upcgen.json или использовать
    настройки по умолчанию.

    Ключи конфигурации:
        - default_height: int - Высота информационных полос (модули)
        - font_size: int - Размер шрифта подписи
        - module_scale: int - Пикселей на модуль при растровом выводе
        - human_readable_location: str - "bottom" или "none"
        - log_level: str - Уровень логирования (применяется к логгеру
          пакета, если задан в файле)

    Аргументы:
        config_path: Путь к файлу конфигурации. Если None, ищет
                    'upcgen.json' в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию; значения из файла
        переопределяют значения по умолчанию. При недопустимом JSON
        или ошибке чтения пишется предупреждение и возвращаются
        значения по умолчанию.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("upcgen.json")

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Файл конфигурации должен содержать JSON-объект, "
                    f"получен {type(user_config).__name__}"
                )

            config.update(user_config)
            if "log_level" in user_config:
                _apply_log_level(str(user_config["log_level"]))
            logger.info(f"Конфигурация загружена из {config_path}")
            logger.debug(f"Конфигурация: {config}")

        except json.JSONDecodeError as e:
            logger.warning(
                f"Не удалось разобрать {config_path}: Недопустимый JSON "
                f"в строке {e.lineno}, столбце {e.colno}. "
                f"Используется конфигурация по умолчанию."
            )
        except OSError as e:
            logger.warning(
                f"Не удалось прочитать {config_path}: {e}. "
                f"Используется конфигурация по умолчанию."
            )
        except ValueError as e:
            logger.warning(
                f"Недопустимый формат конфигурации: {e}. "
                f"Используется конфигурация по умолчанию."
            )
    else:
        logger.info(
            f"Файл конфигурации {config_path} не найден. "
            f"Используется конфигурация по умолчанию."
        )

    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Проверить доступность зависимостей пакета.

    Проверяемые зависимости:
        - pillow: растровый рендеринг (обязательная)
        - python-barcode: эталонный кодировщик UPC-A для тестов
          (опциональная)

    Возвращает:
        Словарь, отображающий имена пакетов на статус доступности.
    """
    dependencies: Dict[str, bool] = {}

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    try:
        import barcode  # noqa: F401

        dependencies["python-barcode"] = True
    except ImportError:
        dependencies["python-barcode"] = False

    return dependencies


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

# Примечание: импорты размещены после утилит, чтобы логирование
# было настроено первым.

from .barcodegen import (  # noqa: E402
    CodewordsNotSupportedError,
    InputTooLongError,
    InvalidAddOnDataError,
    InvalidCharactersError,
    InvalidInputDataError,
    InvalidUpcEDataError,
    MissingDataError,
    UnsupportedConfigurationError,
    UpcError,
    UpcGenerator,
    UpcRenderOptions,
    encode,
    try_encode,
)
from .model.enums import (  # noqa: E402
    HumanReadableAlignment,
    HumanReadableLocation,
    UpcMode,
)
from .model.symbol import (  # noqa: E402
    EncodedSymbol,
    EncodeResult,
    Rectangle,
    TextBox,
    UpcConfig,
)

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    "check_dependencies",
    # Модель
    "UpcMode",
    "HumanReadableLocation",
    "HumanReadableAlignment",
    "UpcConfig",
    "EncodedSymbol",
    "EncodeResult",
    "Rectangle",
    "TextBox",
    # Кодирование
    "UpcGenerator",
    "UpcRenderOptions",
    "encode",
    "try_encode",
    # Ошибки
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
