"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы поставляются внутри пакета (src/core/contracts/schema/):
- words_output.json (результат преобразования массива чисел в слова)
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterable, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.words import NumberCulture, Transformer

WORDS_OUTPUT_SCHEMA_VERSION: Final[str] = "1"

# Каталог схем рядом с модулем (package data)
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы читаются из schema_dir (default: SCHEMA_DIR), проходят
    meta-validation при первой загрузке и кэшируются по имени.
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'words_output')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self.schema_dir / f"{schema_name}.json"
        try:
            schema = json.loads(schema_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise FileNotFoundError(f"Schema not found: {schema_path}") from None

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Подклассы задают schema_name и, при необходимости, extra_errors для
    ограничений, которые JSON Schema не выражает.
    """

    schema_name: str = ""

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def extra_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return iter(())

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все ошибки: сначала по схеме, затем дополнительные."""
        yield from self.validator.iter_errors(data)
        yield from self.extra_errors(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первая найденная ошибка
        """
        for error in self.iter_errors(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None


class WordsOutputValidator(ContractValidator):
    """
    Валидатор для words_output контракта.

    Дополнительно проверяет, что count совпадает с длиной words.
    """

    schema_name = "words_output"

    def extra_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        count = data.get("count") if isinstance(data, dict) else None
        words = data.get("words") if isinstance(data, dict) else None
        if isinstance(count, int) and isinstance(words, list) and count != len(words):
            yield ValidationError(
                f"count {count} does not match number of words {len(words)}"
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_words_output(data: Dict[str, Any]) -> None:
    """
    Валидация words_output данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    WordsOutputValidator().validate(data)


def build_words_payload(
    source: Iterable[float] | None,
    culture: NumberCulture | str | None = None,
) -> Dict[str, Any]:
    """
    Преобразование массива чисел в валидированный words_output payload.

    Raises:
        NullInputError, EmptyInputError, InvalidElementError: Невалидный source
        ValidationError: Если результат нарушает контракт
    """
    transformer = Transformer(culture)
    words = transformer.transform(source)
    payload = {
        "schema_version": WORDS_OUTPUT_SCHEMA_VERSION,
        "culture": transformer.culture.name,
        "count": len(words),
        "words": words,
    }
    validate_words_output(payload)
    return payload
