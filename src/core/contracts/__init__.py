"""
Contract Validation Module

Модуль для валидации JSON контрактов результатов преобразования.
"""

from .validators import (
    SCHEMA_DIR,
    WORDS_OUTPUT_SCHEMA_VERSION,
    ContractValidator,
    SchemaLoader,
    WordsOutputValidator,
    build_words_payload,
    validate_words_output,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "WORDS_OUTPUT_SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WordsOutputValidator",
    # Functions
    "build_words_payload",
    "validate_words_output",
]
