"""
Transformer — преобразование массива чисел в слова

Точка входа: Transformer.transform(source) / transform_to_words(source).

Поток:
    валидация входа → для каждого элемента:
        check_number (sentinel → фиксированная фраза)
        иначе trans (посимвольная транслитерация)
    → список строк той же длины и в том же порядке

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. source is None → NullInputError; пустой source → EmptyInputError
2. Вся валидация выполняется до обработки элементов (нет частичного результата)
3. len(result) == len(source), порядок сохраняется
4. Каждая строка непустая и начинается с заглавной буквы
5. Нет состояния между вызовами (кроме неизменяемой культуры)
"""

import logging
import numbers
from typing import Iterable

from src.core.words.culture import NumberCulture, resolve_culture
from src.core.words.special_values import check_number
from src.core.words.transliteration import trans

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """Базовая ошибка невалидного аргумента transform."""

    pass


class NullInputError(InvalidArgumentError):
    """source отсутствует (None)."""

    pass


class EmptyInputError(InvalidArgumentError):
    """source не содержит элементов."""

    pass


class InvalidElementError(InvalidArgumentError):
    """Элемент source не является вещественным числом."""

    pass


# =============================================================================
# TRANSFORMER
# =============================================================================


class Transformer:
    """
    Преобразует каждый элемент массива в его "словесный формат".

    Культура фиксируется при создании; экземпляр можно разделять между
    потоками.

    Example:
        >>> Transformer().transform([2.345, -0.0, 0.0, 0.1])
        ['Two point three four five', 'Minus zero', 'Zero', 'Zero point one']
    """

    def __init__(self, culture: NumberCulture | str | None = None):
        self.culture = resolve_culture(culture)

    def transform(self, source: Iterable[float] | None) -> list[str]:
        """
        Преобразование массива чисел в слова.

        Args:
            source: Последовательность чисел

        Returns:
            Список строк той же длины и в том же порядке

        Raises:
            NullInputError: Если source is None
            EmptyInputError: Если source пуст
            InvalidElementError: Если элемент не является числом
        """
        values = self._validate_source(source)

        result = [self.transform_number(value) for value in values]

        logger.debug(
            "Transformed %d value(s) to words (culture=%r)", len(result), self.culture.name
        )
        return result

    def transform_number(self, number: float) -> str:
        """Один элемент: фраза sentinel-значения или транслитерация."""
        matched, phrase = check_number(number)
        if matched:
            return phrase
        return trans(number, self.culture)

    @staticmethod
    def _validate_source(source: Iterable[float] | None) -> list[float]:
        if source is None:
            raise NullInputError("source must not be None")

        values = list(source)
        if not values:
            raise EmptyInputError("source must not be empty")

        converted = []
        for index, value in enumerate(values):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidElementError(
                    f"source[{index}] must be a real number, got {type(value).__name__}"
                )
            try:
                converted.append(float(value))
            except OverflowError:
                raise InvalidElementError(
                    f"source[{index}] is out of double range: {value!r}"
                ) from None

        return converted


def transform_to_words(
    source: Iterable[float] | None,
    culture: NumberCulture | str | None = None,
) -> list[str]:
    """
    Преобразование массива чисел в слова (без явного создания Transformer).

    Raises:
        NullInputError, EmptyInputError, InvalidElementError
    """
    return Transformer(culture).transform(source)
