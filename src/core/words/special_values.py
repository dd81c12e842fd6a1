"""
Special Values — классификатор sentinel-значений float

Для четырёх sentinel-значений вместо посимвольной транслитерации
используется фиксированная фраза:

| Sentinel         | Фраза               |
|------------------|---------------------|
| NaN              | "Not a Number"      |
| DOUBLE_EPSILON   | "Double Epsilon"    |
| -inf             | "Negative Infinity" |
| +inf             | "Positive Infinity" |

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN определяется только через math.isnan (NaN != NaN)
2. DOUBLE_EPSILON — наименьшее положительное субнормальное число (5e-324),
   а НЕ машинный epsilon (sys.float_info.epsilon) и не толерантность сравнения
3. Предикаты проверяются в фиксированном порядке, первый совпавший побеждает
4. Обычные конечные числа никогда не совпадают (только точное равенство)
"""

import math
from typing import Callable, Final, NamedTuple

# =============================================================================
# SENTINEL-КОНСТАНТЫ
# =============================================================================

# Наименьшее положительное представимое значение double (субнормальное)
DOUBLE_EPSILON: Final[float] = math.ulp(0.0)

NOT_A_NUMBER_PHRASE: Final[str] = "Not a Number"
DOUBLE_EPSILON_PHRASE: Final[str] = "Double Epsilon"
NEGATIVE_INFINITY_PHRASE: Final[str] = "Negative Infinity"
POSITIVE_INFINITY_PHRASE: Final[str] = "Positive Infinity"


class SpecialValueMatch(NamedTuple):
    """Результат check_number."""

    matched: bool
    phrase: str | None


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_nan(number: float) -> bool:
    return math.isnan(number)


def is_double_epsilon(number: float) -> bool:
    """
    Точное равенство DOUBLE_EPSILON.

    -DOUBLE_EPSILON sentinel-значением не считается.
    """
    return number == DOUBLE_EPSILON


def is_negative_infinity(number: float) -> bool:
    return math.isinf(number) and number < 0


def is_positive_infinity(number: float) -> bool:
    return math.isinf(number) and number > 0


# Порядок проверок фиксирован
SPECIAL_VALUE_CHECKS: Final[tuple[tuple[Callable[[float], bool], str], ...]] = (
    (is_nan, NOT_A_NUMBER_PHRASE),
    (is_double_epsilon, DOUBLE_EPSILON_PHRASE),
    (is_negative_infinity, NEGATIVE_INFINITY_PHRASE),
    (is_positive_infinity, POSITIVE_INFINITY_PHRASE),
)


# =============================================================================
# КЛАССИФИКАТОР
# =============================================================================


def check_number(number: float) -> SpecialValueMatch:
    """
    Проверка, является ли число sentinel-значением.

    Args:
        number: Проверяемое значение

    Returns:
        SpecialValueMatch(True, phrase) если число совпало с sentinel,
        иначе SpecialValueMatch(False, None)

    Examples:
        >>> check_number(float("nan"))
        SpecialValueMatch(matched=True, phrase='Not a Number')
        >>> check_number(5e-324)
        SpecialValueMatch(matched=True, phrase='Double Epsilon')
        >>> check_number(0.0)
        SpecialValueMatch(matched=False, phrase=None)
    """
    for predicate, phrase in SPECIAL_VALUE_CHECKS:
        if predicate(number):
            return SpecialValueMatch(True, phrase)
    return SpecialValueMatch(False, None)
