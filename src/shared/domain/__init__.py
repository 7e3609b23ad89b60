"""
Shared domain — value objects, ошибки и внешние возможности домена.

Содержит DateTime, Currency, Money и инфраструктуру для них
(ValidationError, Clock, IdGenerator, параметры форматирования).
"""

from src.shared.domain.errors import DomainError, ValidationError
from src.shared.domain.formatting import (
    AMOUNT_FRACTION_DIGITS,
    DEFAULT_LOCALE,
    parse_locale,
    parse_locale_or_default,
)
from src.shared.domain.providers import Clock, IdGenerator, SystemClock, UuidGenerator
from src.shared.domain.model import CURRENCY_CODE_PATTERN, Currency, DateTime, Money

__all__ = [
    # Errors
    "DomainError",
    "ValidationError",
    # Formatting
    "DEFAULT_LOCALE",
    "AMOUNT_FRACTION_DIGITS",
    "parse_locale",
    "parse_locale_or_default",
    # Providers
    "Clock",
    "IdGenerator",
    "SystemClock",
    "UuidGenerator",
    # Value objects
    "DateTime",
    "Currency",
    "CURRENCY_CODE_PATTERN",
    "Money",
]
