"""
Snapshot Contracts

Проверка JSON снапшотов доменных моделей против JSON Schema.
"""

from .validators import (
    SchemaRegistry,
    SnapshotValidator,
    load_snapshot,
    schema_name_for,
    validate_snapshot,
)

__all__ = [
    # Classes
    "SchemaRegistry",
    "SnapshotValidator",
    # Functions
    "schema_name_for",
    "validate_snapshot",
    "load_snapshot",
]
