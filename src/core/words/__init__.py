"""
Number-to-words transformation.

Посимвольное преобразование чисел в английские слова с явной культурой
форматирования и фиксированными фразами для sentinel-значений.
"""

# Special values
from src.core.words.special_values import (
    DOUBLE_EPSILON,
    DOUBLE_EPSILON_PHRASE,
    NEGATIVE_INFINITY_PHRASE,
    NOT_A_NUMBER_PHRASE,
    POSITIVE_INFINITY_PHRASE,
    SpecialValueMatch,
    check_number,
    is_double_epsilon,
    is_nan,
    is_negative_infinity,
    is_positive_infinity,
)

# Culture
from src.core.words.culture import (
    CULTURES,
    DE_DE,
    EN_US,
    FR_FR,
    INVARIANT_CULTURE,
    RU_RU,
    NumberCulture,
    UnknownCultureError,
    get_culture,
    render_number,
    resolve_culture,
)

# Transliteration
from src.core.words.transliteration import (
    BASE_WORD_TABLE,
    DIGIT_WORDS,
    TransliterationError,
    build_word_table,
    trans,
)

# Transformer
from src.core.words.transformer import (
    EmptyInputError,
    InvalidArgumentError,
    InvalidElementError,
    NullInputError,
    Transformer,
    transform_to_words,
)

__all__ = [
    # Special values — Constants
    "DOUBLE_EPSILON",
    "DOUBLE_EPSILON_PHRASE",
    "NEGATIVE_INFINITY_PHRASE",
    "NOT_A_NUMBER_PHRASE",
    "POSITIVE_INFINITY_PHRASE",
    # Special values — Functions
    "SpecialValueMatch",
    "check_number",
    "is_double_epsilon",
    "is_nan",
    "is_negative_infinity",
    "is_positive_infinity",
    # Culture
    "CULTURES",
    "DE_DE",
    "EN_US",
    "FR_FR",
    "INVARIANT_CULTURE",
    "RU_RU",
    "NumberCulture",
    "UnknownCultureError",
    "get_culture",
    "render_number",
    "resolve_culture",
    # Transliteration
    "BASE_WORD_TABLE",
    "DIGIT_WORDS",
    "TransliterationError",
    "build_word_table",
    "trans",
    # Transformer — Exceptions
    "EmptyInputError",
    "InvalidArgumentError",
    "InvalidElementError",
    "NullInputError",
    # Transformer
    "Transformer",
    "transform_to_words",
]
