"""
Errors — Иерархия доменных ошибок

Все нарушения инвариантов value objects и сущностей поднимаются
как ValidationError в точке нарушения (конструктор или операция).
"""


class DomainError(Exception):
    """Базовое исключение доменного слоя."""

    pass


class ValidationError(DomainError):
    """
    Нарушение инварианта доменной модели.

    Не наследуется от ValueError: pydantic оборачивает ValueError из
    валидаторов в собственный pydantic.ValidationError, а доменная ошибка
    должна доходить до вызывающего кода без изменений.
    """

    pass
