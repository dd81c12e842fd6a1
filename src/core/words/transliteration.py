"""
Transliteration — посимвольное преобразование числа в слова

Алгоритм trans(number):
1. render_number(number, culture) → строка ("-2.5", "1E+15", ...)
2. Каждый символ → слово по таблице:
       '-' → minus     '+' → plus      'E' → E (буква, не прописью)
       '0'..'9' → zero..nine           '.' / ',' → point
   Символы вне таблицы пропускаются без ошибки.
3. Слова соединяются одиночным пробелом в исходном порядке.
4. Первая буква результата переводится в верхний регистр.

Если ни один символ не дал слова (например, NaN в культуре с символом "NaN"),
поднимается TransliterationError: пустой результат не возвращается.
"""

from types import MappingProxyType
from typing import Final, Mapping

from src.core.words.culture import NumberCulture, render_number, resolve_culture

DIGIT_WORDS: Final[tuple[str, ...]] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

MINUS_WORD: Final[str] = "minus"
PLUS_WORD: Final[str] = "plus"
POINT_WORD: Final[str] = "point"
EXPONENT_WORD: Final[str] = "E"

# Базовая таблица, общая для всех культур
BASE_WORD_TABLE: Final[Mapping[str, str]] = MappingProxyType(
    {
        "-": MINUS_WORD,
        "+": PLUS_WORD,
        "E": EXPONENT_WORD,
        ".": POINT_WORD,
        ",": POINT_WORD,
        **{str(digit): word for digit, word in enumerate(DIGIT_WORDS)},
    }
)


class TransliterationError(ValueError):
    """Отрендеренная строка не содержит ни одного транслитерируемого символа."""

    pass


def build_word_table(culture: NumberCulture | str | None = None) -> Mapping[str, str]:
    """
    Таблица символ → слово для культуры.

    Символы культуры (разделитель, знаки, экспонента) дополняют базовую таблицу.

    Returns:
        Read-only mapping
    """
    culture = resolve_culture(culture)
    table = dict(BASE_WORD_TABLE)
    table[culture.decimal_separator] = POINT_WORD
    table[culture.negative_sign] = MINUS_WORD
    table[culture.positive_sign] = PLUS_WORD
    table[culture.exponent_symbol] = EXPONENT_WORD
    return MappingProxyType(table)


def capitalize_first(text: str) -> str:
    """Верхний регистр только для первого символа (остальные без изменений)."""
    return text[:1].upper() + text[1:]


def trans(number: float, culture: NumberCulture | str | None = None) -> str:
    """
    Преобразование числа в слова, символ за символом.

    Args:
        number: Значение для преобразования
        culture: Культура форматирования (default: INVARIANT_CULTURE)

    Returns:
        Слова через пробел, первая буква заглавная

    Raises:
        TransliterationError: Если ни один символ не преобразован в слово

    Examples:
        >>> trans(2.345)
        'Two point three four five'
        >>> trans(-0.0)
        'Minus zero'
        >>> trans(1e15)
        'One E plus one five'
    """
    rendered = render_number(number, culture)
    table = build_word_table(culture)

    words = [table[char] for char in rendered if char in table]
    if not words:
        raise TransliterationError(
            f"Rendered value {rendered!r} contains no transliterable characters"
        )

    return capitalize_first(" ".join(words))
