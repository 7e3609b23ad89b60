"""
Providers — Внешние возможности домена (часы и генератор идентификаторов)

Домен не обращается к системному времени и генератору UUID напрямую:
он получает их через протоколы Clock и IdGenerator, чтобы тесты могли
подставлять детерминированные реализации.
"""

import uuid
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class Clock(Protocol):
    """Источник текущего момента времени."""

    def now(self) -> datetime:
        """Текущий момент (timezone-aware, UTC)."""
        ...


@runtime_checkable
class IdGenerator(Protocol):
    """Источник уникальных строковых идентификаторов."""

    def new_id(self) -> str:
        """Новый идентификатор с пренебрежимо малой вероятностью коллизии."""
        ...


# =============================================================================
# DEFAULT IMPLEMENTATIONS
# =============================================================================


class SystemClock:
    """Системные часы (wall clock) в UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidGenerator:
    """Генератор UUID версии 4 в строковой форме."""

    def new_id(self) -> str:
        return str(uuid.uuid4())
