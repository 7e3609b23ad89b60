"""
Currency — Value object валюты

Immutable Pydantic модель трёхбуквенного кода валюты (A-Z) и
форматирование сумм в этой валюте через Babel.

Пример:
    >>> usd = Currency("USD")
    >>> usd.format_amount(1234.56)
    '$1,234.56'
"""

import re
from typing import Any, Final

from babel.numbers import format_currency, parse_pattern, validate_currency
from pydantic import BaseModel, Field, field_validator

from src.shared.domain.errors import ValidationError
from src.shared.domain.formatting import AMOUNT_FRACTION_DIGITS, DEFAULT_LOCALE, parse_locale


# Ровно три заглавные латинские буквы
CURRENCY_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Z]{3}")


# =============================================================================
# CURRENCY MODEL
# =============================================================================


class Currency(BaseModel):
    """
    Валюта, заданная трёхбуквенным кодом ('USD', 'EUR', 'PEN').

    Immutable модель (frozen=True). Равенство по коду.
    """

    code: str = Field(..., description="Трёхбуквенный код валюты")

    model_config = {"frozen": True}

    def __init__(self, code: str) -> None:
        super().__init__(code=code)

    @field_validator("code", mode="before")
    @classmethod
    def validate_code(cls, v: Any) -> str:
        """Проверка формата кода до приведения типов"""
        if not isinstance(v, str) or not CURRENCY_CODE_PATTERN.fullmatch(v):
            raise ValidationError(f"Invalid currency code: {v}")
        return v

    def format_amount(self, amount: float, locale: str = DEFAULT_LOCALE) -> str:
        """
        Форматирование суммы в этой валюте.

        Всегда ровно 2 знака после запятой, разделители и символ валюты
        по правилам локали.

        Args:
            amount: Сумма
            locale: Идентификатор локали (по умолчанию 'en-US')

        Returns:
            Отформатированная строка

        Raises:
            UnknownCurrencyError: Если код отсутствует в CLDR
            UnknownLocaleError: Если локаль неизвестна
        """
        validate_currency(self.code)
        loc = parse_locale(locale)
        # Свежая копия шаблона локали: кэшированный шаблон CLDR не мутируем.
        # Точность фиксирована, currency digits (JPY и т.п.) не учитываются.
        pattern = parse_pattern(loc.currency_formats["standard"].pattern)
        pattern.frac_prec = (AMOUNT_FRACTION_DIGITS, AMOUNT_FRACTION_DIGITS)
        return format_currency(amount, self.code, format=pattern, locale=loc, currency_digits=False)

    def __str__(self) -> str:
        return self.code
