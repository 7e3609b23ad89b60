"""
Money — Value object денежной суммы

Immutable Pydantic модель: неотрицательная сумма + ссылка на Currency.

ИНВАРИАНТЫ:
1. amount >= 0 и конечен (не NaN/Inf) всегда
2. Каждая операция (add, multiply) возвращает новый экземпляр
3. Совместимость валют определяется сравнением кодов, а не identity

Пример:
    >>> usd = Currency("USD")
    >>> str(Money(100, usd).add(Money(50, usd)))
    'USD 150.00'
"""

import math

from pydantic import BaseModel, Field, field_validator

from src.shared.domain.errors import ValidationError
from src.shared.domain.formatting import AMOUNT_FRACTION_DIGITS, DEFAULT_LOCALE
from src.shared.domain.model.currency import Currency


# =============================================================================
# MONEY MODEL
# =============================================================================


class Money(BaseModel):
    """
    Денежная сумма в конкретной валюте.

    Immutable модель (frozen=True). Currency хранится по ссылке:
    результат арифметики использует валюту левого операнда.
    """

    amount: float = Field(..., description="Сумма (неотрицательная)")
    currency: Currency = Field(..., description="Валюта суммы")

    model_config = {"frozen": True}

    def __init__(self, amount: float, currency: Currency) -> None:
        super().__init__(amount=amount, currency=currency)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: float) -> float:
        """Сумма конечна и неотрицательна"""
        if not math.isfinite(v):
            raise ValidationError(f"Amount must be a finite number: {v}")
        if v < 0:
            raise ValidationError(f"Amount cannot be negative: {v}")
        return v

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    def format(self, locale: str = DEFAULT_LOCALE) -> str:
        """
        Локализованное представление суммы.

        Делегирует в Currency.format_amount; ошибки Babel не перехватываются.
        """
        return self.currency.format_amount(self.amount, locale)

    def __str__(self) -> str:
        """'<CODE> <amount>' с двумя знаками, например 'USD 150.00'"""
        return f"{self.currency.code} {self.amount:.{AMOUNT_FRACTION_DIGITS}f}"

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Money") -> "Money":
        """
        Сложение сумм в одной валюте.

        Args:
            other: Вторая сумма

        Returns:
            Новый Money с суммой и валютой self

        Raises:
            ValidationError: Если коды валют различаются
        """
        if self.currency.code != other.currency.code:
            raise ValidationError(
                f"Cannot add amounts with different currencies: "
                f"{self.currency.code} and {other.currency.code}"
            )
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: float) -> "Money":
        """
        Умножение суммы на неотрицательный множитель.

        factor = 0 допустим и даёт нулевую сумму.

        Args:
            factor: Множитель

        Returns:
            Новый Money с amount * factor

        Raises:
            ValidationError: Если множитель отрицательный или не конечен
        """
        if not math.isfinite(factor):
            raise ValidationError(f"Factor must be a finite number: {factor}")
        if factor < 0:
            raise ValidationError(f"Factor cannot be negative: {factor}")
        return Money(self.amount * factor, self.currency)

    def is_zero(self) -> bool:
        """Нулевая ли сумма"""
        return self.amount == 0

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __mul__(self, factor: float) -> "Money":
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__
