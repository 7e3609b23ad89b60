"""
DateTime — Value object момента времени

Immutable Pydantic модель, оборачивающая валидированный момент времени.

ИНВАРИАНТЫ:
1. Момент всегда timezone-aware и нормализован к UTC
2. При создании через конструктор момент не может быть позже "сейчас"
   (без допуска на рассинхронизацию часов)

Naive значения (без смещения) трактуются как UTC.

Пример:
    >>> str(DateTime("2023-10-05T14:48:00.000Z"))
    '2023-10-05T14:48:00.000Z'
"""

import re
from datetime import datetime, timezone
from typing import Any

from babel import Locale
from babel.dates import format_datetime
from pydantic import BaseModel, Field, field_validator

from src.shared.domain.errors import ValidationError
from src.shared.domain.formatting import DEFAULT_LOCALE, parse_locale_or_default
from src.shared.domain.providers import Clock, SystemClock


# =============================================================================
# HELPERS
# =============================================================================


def _as_utc(value: datetime) -> datetime:
    """Naive → UTC; aware → пересчёт в UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_instant(value: datetime | str) -> datetime:
    """
    Разбор входного значения в момент времени.

    Args:
        value: datetime или ISO-8601 строка

    Returns:
        Момент времени в UTC

    Raises:
        ValidationError: Если значение не является корректной датой
    """
    if isinstance(value, datetime):
        return _as_utc(value)

    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as e:
            raise ValidationError(f"Invalid date format: {value}.") from e
        return _as_utc(parsed)

    raise ValidationError(f"Invalid date format: {value}.")


def _widen_fields(pattern: str, substitutions: list[tuple[str, str]]) -> str:
    """Применяет подстановки только вне литералов в кавычках."""
    chunks = pattern.split("'")
    for i in range(0, len(chunks), 2):
        for regex, replacement in substitutions:
            chunks[i] = re.sub(regex, replacement, chunks[i])
    return "'".join(chunks)


_DATE_SUBSTITUTIONS = [
    (r"y+", "y"),  # полный числовой год
    (r"(?<!M)M(?!M)", "MM"),
    (r"(?<!d)d(?!d)", "dd"),
]

_TIME_SUBSTITUTIONS = [
    (r"(?<!h)h(?!h)", "hh"),
    (r"(?<!H)H(?!H)", "HH"),
]


def _numeric_pattern(locale: Locale) -> str:
    """
    Числовой шаблон даты и времени для локали.

    Короткий шаблон даты + средний шаблон времени, соединённые
    локальным short date-time шаблоном. Месяц, день и час дополняются
    до двух цифр, год выводится полностью.
    """
    date_pattern = _widen_fields(locale.date_formats["short"].pattern, _DATE_SUBSTITUTIONS)
    time_pattern = _widen_fields(locale.time_formats["medium"].pattern, _TIME_SUBSTITUTIONS)
    join_pattern = str(locale.datetime_formats["short"])
    return join_pattern.replace("{1}", date_pattern).replace("{0}", time_pattern)


# =============================================================================
# DATETIME MODEL
# =============================================================================


class DateTime(BaseModel):
    """
    Момент времени, не лежащий в будущем.

    Immutable модель (frozen=True). Равенство по значению.
    """

    value: datetime = Field(..., description="Момент времени (UTC)")

    model_config = {"frozen": True}

    def __init__(self, value: datetime | str | None = None, *, clock: Clock | None = None) -> None:
        """
        Args:
            value: datetime или ISO-8601 строка; пустое значение (None, "") → текущий момент
            clock: Источник текущего времени (по умолчанию SystemClock)

        Raises:
            ValidationError: Если значение не разбирается или лежит в будущем
        """
        now = _as_utc((clock or SystemClock()).now())

        if not value:
            instant = now
        else:
            instant = _parse_instant(value)
            if instant > now:
                raise ValidationError(f"Date cannot be in the future: {value}.")

        super().__init__(value=instant)

    @field_validator("value")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        """Нормализация к UTC"""
        return _as_utc(v)

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> "DateTime":
        """
        Восстановление из снапшота (model_dump).

        model_validate проходит через конструктор и проверяет "не в будущем"
        относительно текущих часов. Снапшот уже был валиден в момент записи,
        поэтому здесь проверяется только формат.

        Args:
            data: {"value": ISO-8601 строка или datetime}

        Raises:
            ValidationError: Если значение не разбирается
        """
        return cls.model_construct(value=_parse_instant(data["value"]))

    def format(self, locale: str = DEFAULT_LOCALE) -> str:
        """
        Локализованное числовое представление (в UTC).

        Неизвестная локаль заменяется на DEFAULT_LOCALE.

        Args:
            locale: Идентификатор локали (например, 'en-GB')

        Returns:
            Например, '05/10/2023, 14:48:00' для 'en-GB'
        """
        loc = parse_locale_or_default(locale)
        return format_datetime(self.value, _numeric_pattern(loc), tzinfo=timezone.utc, locale=loc)

    def __str__(self) -> str:
        """ISO-8601 в UTC с точностью до миллисекунд"""
        return self.value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
