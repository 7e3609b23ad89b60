"""
Тесты для value object DateTime

Проверяет:
1. Разбор ISO-8601 строк и datetime (naive → UTC)
2. Запрет моментов в будущем (без допуска)
3. Каноническое представление (UTC, миллисекунды)
4. Локализованное форматирование и откат локали
5. Immutability и равенство по значению
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.shared.domain import DateTime, ValidationError


# =============================================================================
# FAKES
# =============================================================================


class FixedClock:
    """Часы, всегда возвращающие один и тот же момент"""

    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestDateTimeConstruction:
    """Создание DateTime"""

    def test_default_is_now(self, clock: FixedClock) -> None:
        """Без значения берётся текущий момент часов"""
        dt = DateTime(clock=clock)
        assert dt.value == NOW

    def test_default_with_system_clock(self) -> None:
        """Системные часы: момент между до и после создания"""
        before = datetime.now(timezone.utc)
        dt = DateTime()
        after = datetime.now(timezone.utc)
        assert before <= dt.value <= after

    def test_empty_string_is_now(self, clock: FixedClock) -> None:
        """Пустая строка, как и None, означает текущий момент"""
        dt = DateTime("", clock=clock)
        assert dt.value == NOW

    def test_iso_string_with_z(self) -> None:
        """ISO строка с суффиксом Z"""
        dt = DateTime("2023-10-05T14:48:00.000Z")
        assert dt.value == datetime(2023, 10, 5, 14, 48, tzinfo=timezone.utc)

    def test_iso_string_with_offset_normalized(self) -> None:
        """Смещение пересчитывается в UTC"""
        dt = DateTime("2023-10-05T16:48:00+02:00")
        assert dt.value == datetime(2023, 10, 5, 14, 48, tzinfo=timezone.utc)
        assert dt.value.utcoffset() == timedelta(0)

    def test_date_only_string(self) -> None:
        """Дата без времени → полночь UTC"""
        assert str(DateTime("2023-10-05")) == "2023-10-05T00:00:00.000Z"

    def test_naive_datetime_treated_as_utc(self) -> None:
        """Naive datetime трактуется как UTC"""
        dt = DateTime(datetime(2023, 10, 5, 14, 48))
        assert dt.value.tzinfo is not None
        assert str(dt) == "2023-10-05T14:48:00.000Z"

    def test_aware_datetime(self) -> None:
        """Aware datetime в другой зоне"""
        tz = timezone(timedelta(hours=-5))
        dt = DateTime(datetime(2023, 10, 5, 9, 48, tzinfo=tz))
        assert str(dt) == "2023-10-05T14:48:00.000Z"

    @pytest.mark.parametrize("value", ["not a date", "2023-13-45", "05/10/2023"])
    def test_invalid_string(self, value: str) -> None:
        """Неразбираемая строка отклоняется"""
        with pytest.raises(ValidationError, match="Invalid date format"):
            DateTime(value)

    def test_invalid_type(self) -> None:
        """Не строка и не datetime отклоняется"""
        with pytest.raises(ValidationError, match="Invalid date format: 12345"):
            DateTime(12345)  # type: ignore[arg-type]


# =============================================================================
# NOT IN THE FUTURE
# =============================================================================


class TestDateTimeFuture:
    """Запрет будущих моментов"""

    def test_future_string_rejected(self, clock: FixedClock) -> None:
        """Момент на 1 мс позже "сейчас" отклоняется"""
        with pytest.raises(ValidationError, match="Date cannot be in the future"):
            DateTime("2024-01-01T12:00:00.001Z", clock=clock)

    def test_future_datetime_rejected(self, clock: FixedClock) -> None:
        """Будущий datetime отклоняется"""
        with pytest.raises(ValidationError, match="Date cannot be in the future"):
            DateTime(NOW + timedelta(days=1), clock=clock)

    def test_far_future_with_system_clock(self) -> None:
        """Далёкое будущее отклоняется и с системными часами"""
        with pytest.raises(ValidationError, match="Date cannot be in the future: 2999-01-01"):
            DateTime("2999-01-01T00:00:00Z")

    def test_exactly_now_accepted(self, clock: FixedClock) -> None:
        """Ровно "сейчас" допустимо (строго позже нельзя)"""
        dt = DateTime(NOW, clock=clock)
        assert dt.value == NOW

    def test_past_accepted(self, clock: FixedClock) -> None:
        """Прошлое допустимо"""
        dt = DateTime("2023-12-31T23:59:59.999Z", clock=clock)
        assert dt.value < NOW

    def test_naive_clock_is_normalized(self) -> None:
        """Naive время часов трактуется как UTC"""
        naive_clock = FixedClock(datetime(2024, 1, 1, 12, 0, 0))
        dt = DateTime(clock=naive_clock)
        assert dt.value == NOW


# =============================================================================
# REPRESENTATION
# =============================================================================


class TestDateTimeRepresentation:
    """Строковое представление и форматирование"""

    def test_iso_round_trip(self) -> None:
        """Каноническая ISO форма сохраняется"""
        assert str(DateTime("2023-10-05T14:48:00.000Z")) == "2023-10-05T14:48:00.000Z"

    def test_iso_truncated_to_milliseconds(self) -> None:
        """Микросекунды отбрасываются до миллисекунд"""
        assert str(DateTime("2023-10-05T14:48:00.123456Z")) == "2023-10-05T14:48:00.123Z"

    def test_format_en_gb(self) -> None:
        """en-GB: день/месяц/год, 24-часовое время"""
        formatted = DateTime("2023-10-05T14:48:00.000Z").format("en-GB")
        assert formatted == "05/10/2023, 14:48:00"

    def test_format_en_us_default(self) -> None:
        """en-US по умолчанию: месяц/день/год, 12-часовое время с ведущим нулём"""
        dt = DateTime("2023-10-05T14:48:00.000Z")
        formatted = dt.format()
        assert formatted == dt.format("en-US")
        assert formatted == "10/05/2023, 02:48:00\u202fPM"

    def test_format_zero_padding(self) -> None:
        """Месяц и день дополняются до двух цифр"""
        formatted = DateTime("2023-01-02T03:04:05Z").format("en-GB")
        assert formatted == "02/01/2023, 03:04:05"

    def test_format_unknown_locale_falls_back(self) -> None:
        """Неизвестная локаль → локаль по умолчанию"""
        dt = DateTime("2023-10-05T14:48:00.000Z")
        assert dt.format("xx-XX") == dt.format("en-US")


# =============================================================================
# VALUE SEMANTICS
# =============================================================================


class TestDateTimeValueSemantics:
    """Immutability и равенство"""

    def test_immutable(self) -> None:
        """DateTime immutable (frozen=True)"""
        dt = DateTime("2023-10-05T14:48:00Z")
        with pytest.raises(PydanticValidationError):
            dt.value = NOW  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        """Один и тот же момент в разных записях равен"""
        a = DateTime("2023-10-05T14:48:00Z")
        b = DateTime("2023-10-05T16:48:00+02:00")
        assert a == b
        assert hash(a) == hash(b)

    def test_model_validate_normalizes(self) -> None:
        """model_validate проходит через конструктор и нормализует к UTC"""
        dt = DateTime.model_validate({"value": "2023-10-05T16:48:00+02:00"})
        assert str(dt) == "2023-10-05T14:48:00.000Z"

    def test_model_validate_rejects_future(self) -> None:
        """model_validate проверяет "не в будущем", как и конструктор"""
        with pytest.raises(ValidationError, match="Date cannot be in the future"):
            DateTime.model_validate({"value": "2999-01-01T00:00:00Z"})


# =============================================================================
# SNAPSHOT
# =============================================================================


class TestDateTimeFromSnapshot:
    """Восстановление из снапшота"""

    def test_future_value_restored(self) -> None:
        """Будущий момент из снапшота не отклоняется"""
        dt = DateTime.from_snapshot({"value": "2999-01-01T00:00:00Z"})
        assert dt.value == datetime(2999, 1, 1, tzinfo=timezone.utc)

    def test_round_trip(self) -> None:
        original = DateTime("2023-10-05T14:48:00.123Z")
        assert DateTime.from_snapshot(original.model_dump(mode="json")) == original

    def test_offset_normalized(self) -> None:
        dt = DateTime.from_snapshot({"value": "2023-10-05T16:48:00+02:00"})
        assert str(dt) == "2023-10-05T14:48:00.000Z"

    def test_invalid_value(self) -> None:
        with pytest.raises(ValidationError, match="Invalid date format"):
            DateTime.from_snapshot({"value": "not a date"})
