"""
Number Culture — явная конфигурация числового форматирования

Модуль задаёт культуру (locale) форматирования чисел как явный параметр:
- Символ десятичного разделителя ('.' или ',')
- Символы знаков (negative / positive), в том числе в экспоненте
- Символ экспоненты (E)
- Символы NaN и бесконечностей

Культура никогда не читается из глобального состояния процесса (locale),
поэтому render_number — чистая функция.

ФОРМАТ render_number:
    Цифры — кратчайшее round-trip представление (те же, что выбирает repr).
    e = десятичная экспонента в научной записи (d.ddd × 10^e)

    -5 < e < 15  → фиксированная запись:  2.345, 0.0001, 100000000000000
    иначе        → научная запись:        1E+15, 1E-05, 1.7976931348623157E+308

    Целые значения без дробной части: 2 (не 2.0)
    Отрицательный ноль сохраняет знак: -0
"""

import math
from decimal import Decimal
from typing import Final

from pydantic import BaseModel, Field, ValidationInfo, field_validator

# Границы фиксированной записи (по научной экспоненте, не включительно)
FIXED_NOTATION_MIN_EXPONENT: Final[int] = -5
FIXED_NOTATION_MAX_EXPONENT: Final[int] = 15

# Минимальное количество цифр экспоненты (1E+05, 1E-05)
EXPONENT_MIN_DIGITS: Final[int] = 2


class UnknownCultureError(ValueError):
    """Запрошена незарегистрированная культура."""

    pass


# =============================================================================
# МОДЕЛЬ КУЛЬТУРЫ
# =============================================================================


class NumberCulture(BaseModel):
    """
    Конфигурация числового форматирования.

    Immutable модель (frozen=True). Разделитель и знаки — ровно один символ,
    попарно различные и не цифры (иначе транслитерация неоднозначна).
    """

    name: str = Field(..., description="Имя культуры ('' для invariant)")
    decimal_separator: str = Field(
        ".", min_length=1, max_length=1, description="Десятичный разделитель"
    )
    negative_sign: str = Field("-", min_length=1, max_length=1, description="Знак минус")
    positive_sign: str = Field("+", min_length=1, max_length=1, description="Знак плюс")
    exponent_symbol: str = Field("E", min_length=1, max_length=1, description="Символ экспоненты")
    nan_symbol: str = Field("NaN", min_length=1)
    positive_infinity_symbol: str = Field("Infinity", min_length=1)
    negative_infinity_symbol: str = Field("-Infinity", min_length=1)

    model_config = {"frozen": True}

    @field_validator("decimal_separator", "negative_sign", "positive_sign", "exponent_symbol")
    @classmethod
    def validate_not_digit(cls, v: str) -> str:
        if v.isdigit():
            raise ValueError(f"format symbol must not be a digit, got {v!r}")
        return v

    @field_validator("negative_sign")
    @classmethod
    def validate_negative_sign_distinct(cls, v: str, info: ValidationInfo) -> str:
        if info.data.get("decimal_separator") == v:
            raise ValueError(f"negative_sign {v!r} must differ from decimal_separator")
        return v

    @field_validator("positive_sign")
    @classmethod
    def validate_positive_sign_distinct(cls, v: str, info: ValidationInfo) -> str:
        """Проверка, что разделитель и знаки попарно различны"""
        if v in (info.data.get("decimal_separator"), info.data.get("negative_sign")):
            raise ValueError(f"positive_sign {v!r} collides with another format symbol")
        return v

    @field_validator("exponent_symbol")
    @classmethod
    def validate_exponent_symbol_distinct(cls, v: str, info: ValidationInfo) -> str:
        taken = (
            info.data.get("decimal_separator"),
            info.data.get("negative_sign"),
            info.data.get("positive_sign"),
        )
        if v in taken:
            raise ValueError(f"exponent_symbol {v!r} collides with another format symbol")
        return v


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ КУЛЬТУРЫ
# =============================================================================

INVARIANT_CULTURE: Final[NumberCulture] = NumberCulture(name="")

EN_US: Final[NumberCulture] = NumberCulture(
    name="en-US",
    positive_infinity_symbol="∞",
    negative_infinity_symbol="-∞",
)

DE_DE: Final[NumberCulture] = NumberCulture(
    name="de-DE",
    decimal_separator=",",
    positive_infinity_symbol="∞",
    negative_infinity_symbol="-∞",
)

FR_FR: Final[NumberCulture] = NumberCulture(
    name="fr-FR",
    decimal_separator=",",
    positive_infinity_symbol="∞",
    negative_infinity_symbol="-∞",
)

RU_RU: Final[NumberCulture] = NumberCulture(
    name="ru-RU",
    decimal_separator=",",
    nan_symbol="не число",
    positive_infinity_symbol="∞",
    negative_infinity_symbol="-∞",
)

CULTURES: Final[dict[str, NumberCulture]] = {
    culture.name: culture for culture in (INVARIANT_CULTURE, EN_US, DE_DE, FR_FR, RU_RU)
}


def get_culture(name: str) -> NumberCulture:
    """
    Получение зарегистрированной культуры по имени.

    Raises:
        UnknownCultureError: Если культура не зарегистрирована
    """
    try:
        return CULTURES[name]
    except KeyError:
        known = ", ".join(repr(key) for key in sorted(CULTURES))
        raise UnknownCultureError(f"Unknown culture {name!r}; known cultures: {known}") from None


def resolve_culture(culture: NumberCulture | str | None) -> NumberCulture:
    """None → INVARIANT_CULTURE, str → get_culture, NumberCulture → как есть."""
    if culture is None:
        return INVARIANT_CULTURE
    if isinstance(culture, NumberCulture):
        return culture
    return get_culture(culture)


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def _shortest_digits(magnitude: float) -> tuple[str, int]:
    """
    Кратчайшие значащие цифры и научная экспонента неотрицательного числа.

    Returns:
        (digits, e): magnitude == 0.digits... × 10^(e+1); для нуля ("0", 0)
    """
    _, digit_tuple, exponent = Decimal(repr(magnitude)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    if not stripped:
        return "0", 0

    exponent += len(digits) - len(stripped)
    return stripped, exponent + len(stripped) - 1


def render_number(number: float, culture: NumberCulture | str | None = None) -> str:
    """
    Строковое представление числа по правилам культуры.

    Args:
        number: Значение для рендеринга
        culture: Культура форматирования (default: INVARIANT_CULTURE)

    Returns:
        Отформатированная строка

    Examples:
        >>> render_number(2.345)
        '2.345'
        >>> render_number(2.5, DE_DE)
        '2,5'
        >>> render_number(-0.0)
        '-0'
        >>> render_number(1e15)
        '1E+15'
        >>> render_number(1e-05)
        '1E-05'
    """
    culture = resolve_culture(culture)
    number = float(number)

    if math.isnan(number):
        return culture.nan_symbol
    if math.isinf(number):
        return culture.positive_infinity_symbol if number > 0 else culture.negative_infinity_symbol

    sign = culture.negative_sign if math.copysign(1.0, number) < 0 else ""
    digits, exponent = _shortest_digits(abs(number))

    fixed = FIXED_NOTATION_MIN_EXPONENT < exponent < FIXED_NOTATION_MAX_EXPONENT

    if not fixed:
        integer_part, fraction_part = digits[0], digits[1:]
    elif exponent >= 0:
        integer_part = digits[: exponent + 1].ljust(exponent + 1, "0")
        fraction_part = digits[exponent + 1 :]
    else:
        integer_part = "0"
        fraction_part = "0" * (-exponent - 1) + digits

    body = integer_part
    if fraction_part:
        body += culture.decimal_separator + fraction_part

    if not fixed:
        exponent_sign = culture.positive_sign if exponent >= 0 else culture.negative_sign
        body += (
            culture.exponent_symbol
            + exponent_sign
            + str(abs(exponent)).rjust(EXPONENT_MIN_DIGITS, "0")
        )

    return sign + body
