"""
Formatting — Локали и параметры отображения

Тонкая обёртка над Babel (CLDR): разбор идентификаторов локали в стиле
BCP-47 ('en-US') и общие параметры отображения сумм.
"""

import logging
from typing import Final

from babel import Locale, UnknownLocaleError

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ОТОБРАЖЕНИЯ
# =============================================================================

# Локаль по умолчанию для всех format-методов
DEFAULT_LOCALE: Final[str] = "en-US"

# Ровно 2 знака после запятой (минимум и максимум) для денежных сумм
AMOUNT_FRACTION_DIGITS: Final[int] = 2


# =============================================================================
# LOCALE PARSING
# =============================================================================


def parse_locale(locale: str) -> Locale:
    """
    Разбор идентификатора локали.

    Принимает как 'en-US', так и 'en_US'.

    Args:
        locale: Идентификатор локали

    Returns:
        Babel Locale

    Raises:
        UnknownLocaleError: Если локаль отсутствует в CLDR
        ValueError: Если идентификатор синтаксически некорректен
    """
    return Locale.parse(locale.replace("-", "_"))


def parse_locale_or_default(locale: str) -> Locale:
    """
    Разбор локали с откатом на DEFAULT_LOCALE при неизвестном идентификаторе.

    Args:
        locale: Идентификатор локали

    Returns:
        Babel Locale (запрошенная или локаль по умолчанию)
    """
    try:
        return parse_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Locale %r not available (%s), falling back to %s", locale, e, DEFAULT_LOCALE)
        return parse_locale(DEFAULT_LOCALE)
