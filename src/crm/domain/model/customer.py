"""
Customer — Агрегат клиента (CRM bounded context)

Сущность с идентичностью: id генерируется один раз при создании и не
меняется. Имя неизменяемо, last_order_price: единственное изменяемое
состояние (ссылка на Money последнего заказа).

Переходы last_order_price:
    None → Money (первое присваивание) → Money (перезапись)
Обратного перехода в None нет.

Согласованность валют между заказами не проверяется.
Параллельная запись last_order_price из нескольких потоков должна
синхронизироваться вызывающим кодом.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, computed_field, field_validator

from src.shared.domain.errors import ValidationError
from src.shared.domain.model.money import Money
from src.shared.domain.providers import IdGenerator, UuidGenerator

logger = logging.getLogger(__name__)


# =============================================================================
# CUSTOMER AGGREGATE
# =============================================================================


class Customer(BaseModel):
    """
    Клиент CRM.

    id и name заморожены (frozen=True на уровне полей).
    Равенство и хэш по id.
    """

    id: str = Field(..., min_length=1, frozen=True, description="Уникальный идентификатор (UUID)")
    name: str = Field(..., frozen=True, description="Имя клиента (непустое)")

    _last_order_price: Money | None = PrivateAttr(default=None)

    def __init__(self, name: str, *, id_generator: IdGenerator | None = None, **snapshot: Any) -> None:
        """
        Новый клиент: Customer(name). Восстановление из снапшота
        (model_validate / model_dump) передаёт id и last_order_price
        как именованные аргументы; тогда id не генерируется.

        Args:
            name: Имя клиента
            id_generator: Генератор идентификаторов (по умолчанию UUID4)
            **snapshot: id и last_order_price сохранённого клиента

        Raises:
            ValidationError: Если имя пустое или состоит из пробелов
        """
        last_order_price = snapshot.pop("last_order_price", None)
        if "id" in snapshot:
            super().__init__(name=name, **snapshot)
            logger.debug("Customer restored: id=%s", self.id)
        else:
            super().__init__(id=(id_generator or UuidGenerator()).new_id(), name=name, **snapshot)
            logger.debug("Customer created: id=%s", self.id)

        if last_order_price is not None:
            self.last_order_price = Money.model_validate(last_order_price)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> Any:
        """Имя не пустое после удаления пробелов (хранится как передано)"""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValidationError("Name cannot be empty")
        return v

    @computed_field
    @property
    def last_order_price(self) -> Money | None:
        """Цена последнего заказа или None, если заказов не было"""
        return self._last_order_price

    @last_order_price.setter
    def last_order_price(self, value: Money) -> None:
        if not isinstance(value, Money):
            raise TypeError(f"last_order_price must be Money, got {type(value).__name__}")
        self._last_order_price = value
        logger.debug("Customer %s last order price set to %s", self.id, value)

    def has_last_order(self) -> bool:
        """Был ли хотя бы один заказ"""
        return self._last_order_price is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
