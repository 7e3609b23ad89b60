"""
Value objects shared kernel: DateTime, Currency, Money.
"""

from src.shared.domain.model.currency import CURRENCY_CODE_PATTERN, Currency
from src.shared.domain.model.date_time import DateTime
from src.shared.domain.model.money import Money

__all__ = [
    "DateTime",
    "Currency",
    "CURRENCY_CODE_PATTERN",
    "Money",
]
