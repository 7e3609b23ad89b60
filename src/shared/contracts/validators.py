"""
Snapshot Contracts — JSON Schema контракты снапшотов доменных моделей

Снапшот модели: её model_dump(mode="json"). Схема выбирается по имени
класса модели: DateTime → date_time.json, Money → money.json и т.д.
Схемы лежат в schema/ рядом с модулем и проверяются (meta-validation)
при загрузке. Использует библиотеку jsonschema (Draft 2020-12).

Пример:
    >>> snapshot = validate_snapshot(Money(100, Currency("USD")))
    >>> load_snapshot(Money, snapshot)
    Money(amount=100.0, currency=Currency(code='USD'))
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, Iterator, TypeVar

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def schema_name_for(model_type: type[BaseModel]) -> str:
    """Имя схемы для класса модели: DateTime → 'date_time'"""
    return _CAMEL_BOUNDARY.sub("_", model_type.__name__).lower()


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр схем снапшотов.

    Все *.json каталога загружаются и проверяются при создании реестра,
    валидаторы строятся один раз на схему.
    """

    def __init__(self, schema_dir: Path | None = None):
        schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")

        self._validators: Dict[str, Draft202012Validator] = {}
        for schema_path in sorted(schema_dir.glob("*.json")):
            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
            self._validators[schema_path.stem] = Draft202012Validator(schema)

    @property
    def names(self) -> list[str]:
        return sorted(self._validators)

    def validator_for(self, model_type: type[BaseModel]) -> Draft202012Validator:
        """
        Валидатор снапшотов для класса модели.

        Raises:
            LookupError: Если для модели нет схемы
        """
        name = schema_name_for(model_type)
        if name not in self._validators:
            raise LookupError(f"No snapshot schema for {model_type.__name__} ({name}.json)")
        return self._validators[name]


# =============================================================================
# SNAPSHOT VALIDATOR
# =============================================================================


class SnapshotValidator:
    """
    Проверка снапшотов доменных моделей против их контрактов.
    """

    def __init__(self, registry: SchemaRegistry | None = None):
        self.registry = registry or _DEFAULT_REGISTRY

    def validate(self, model: BaseModel) -> Dict[str, Any]:
        """
        Снапшот модели, проверенный по контракту.

        Returns:
            model.model_dump(mode="json")

        Raises:
            ValidationError: Если снапшот не соответствует схеме
        """
        snapshot = model.model_dump(mode="json")
        self.validate_data(type(model), snapshot)
        return snapshot

    def validate_data(self, model_type: type[BaseModel], data: Dict[str, Any]) -> None:
        """Проверка внешних данных как снапшота model_type"""
        self.registry.validator_for(model_type).validate(data)

    def is_valid(self, model_type: type[BaseModel], data: Dict[str, Any]) -> bool:
        return self.registry.validator_for(model_type).is_valid(data)

    def iter_errors(self, model_type: type[BaseModel], data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.registry.validator_for(model_type).iter_errors(data)

    def load(self, model_type: type[ModelT], data: Dict[str, Any]) -> ModelT:
        """
        Восстановление модели из снапшота после проверки контракта.

        Модели со своим from_snapshot (DateTime) восстанавливаются через него,
        остальные через model_validate.

        Raises:
            ValidationError: Если снапшот не соответствует схеме
        """
        self.validate_data(model_type, data)
        rehydrate = getattr(model_type, "from_snapshot", model_type.model_validate)
        return rehydrate(data)


_DEFAULT_REGISTRY = SchemaRegistry()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_snapshot(model: BaseModel) -> Dict[str, Any]:
    """Снапшот модели, проверенный по контракту"""
    return SnapshotValidator().validate(model)


def load_snapshot(model_type: type[ModelT], data: Dict[str, Any]) -> ModelT:
    """Проверка снапшота и восстановление модели"""
    return SnapshotValidator().load(model_type, data)
