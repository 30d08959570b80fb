"""
JSON Schema Contract Validators

Валидация структурированных записей диапазонов согласно формальным
JSON Schema контрактам (Draft 2020-12). Использует библиотеку jsonschema;
перекрёстные $ref между схемами разрешаются через registry (referencing).

Схемы (scripture_ranges/core/contracts/schema/):
- scripture_range.json — запись ScriptureRange
- range_collection.json — запись RangeCollection
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012


SCHEMA_NAMES = ("scripture_range", "range_collection")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'scripture_range')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """Registry всех схем каталога для разрешения $ref по $id."""
        resources = []
        for name in SCHEMA_NAMES:
            schema = self.load_schema(name)
            resources.append(
                (schema["$id"], Resource.from_contents(schema, default_specification=DRAFT202012))
            )
        return Registry().with_resources(resources)


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (по умолчанию глобальный)
        """
        loader = loader or _SCHEMA_LOADER
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, registry=loader.registry())

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ScriptureRangeValidator(ContractValidator):
    """Валидатор записи ScriptureRange."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("scripture_range", loader)


class RangeCollectionValidator(ContractValidator):
    """Валидатор записи RangeCollection."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("range_collection", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_scripture_range(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме scripture_range
    """
    ScriptureRangeValidator().validate(data)


def validate_range_collection(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме range_collection
    """
    RangeCollectionValidator().validate(data)
