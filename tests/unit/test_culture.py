"""
Тесты для модуля Number Culture

Проверяет:
1. Валидацию конфигурации NumberCulture (Pydantic)
2. Реестр культур и resolve_culture
3. render_number: фиксированная/научная запись, знаки, разделители
4. Рендеринг NaN/Inf символами культуры
"""

import math
import sys
from fractions import Fraction

import pytest
from pydantic import ValidationError

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


# =============================================================================
# ТЕСТЫ МОДЕЛИ
# =============================================================================


class TestNumberCultureModel:
    """Тесты Pydantic модели NumberCulture"""

    def test_defaults(self) -> None:
        culture = NumberCulture(name="custom")
        assert culture.decimal_separator == "."
        assert culture.negative_sign == "-"
        assert culture.positive_sign == "+"
        assert culture.exponent_symbol == "E"
        assert culture.nan_symbol == "NaN"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            INVARIANT_CULTURE.decimal_separator = ","

    def test_separator_must_be_single_char(self) -> None:
        with pytest.raises(ValidationError):
            NumberCulture(name="bad", decimal_separator="")
        with pytest.raises(ValidationError):
            NumberCulture(name="bad", decimal_separator="..")

    def test_digit_symbol_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be a digit"):
            NumberCulture(name="bad", decimal_separator="7")

    def test_negative_sign_collides_with_separator(self) -> None:
        with pytest.raises(ValidationError, match="must differ from decimal_separator"):
            NumberCulture(name="bad", decimal_separator=",", negative_sign=",")

    def test_positive_sign_collides(self) -> None:
        with pytest.raises(ValidationError, match="collides"):
            NumberCulture(name="bad", positive_sign="-")
        with pytest.raises(ValidationError, match="collides"):
            NumberCulture(name="bad", positive_sign=".")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"exponent_symbol": "."},
            {"exponent_symbol": "-"},
            {"exponent_symbol": "+"},
            {"decimal_separator": ",", "exponent_symbol": ","},
        ],
    )
    def test_exponent_symbol_collides(self, overrides) -> None:
        """Символ экспоненты не может перекрывать разделитель или знаки"""
        with pytest.raises(ValidationError, match="exponent_symbol .* collides"):
            NumberCulture(name="bad", **overrides)

    def test_custom_exponent_symbol(self) -> None:
        culture = NumberCulture(name="custom", exponent_symbol="e")
        assert render_number(2.5, culture) == "2.5"
        assert render_number(1e20, culture) == "1e+20"


# =============================================================================
# ТЕСТЫ РЕЕСТРА
# =============================================================================


class TestCultureRegistry:
    """Тесты get_culture / resolve_culture"""

    def test_registered_cultures(self) -> None:
        assert set(CULTURES) == {"", "en-US", "de-DE", "fr-FR", "ru-RU"}
        assert get_culture("") is INVARIANT_CULTURE
        assert get_culture("en-US") is EN_US
        assert get_culture("de-DE") is DE_DE
        assert get_culture("fr-FR") is FR_FR
        assert get_culture("ru-RU") is RU_RU

    def test_unknown_culture_raises(self) -> None:
        with pytest.raises(UnknownCultureError, match="Unknown culture 'xx-XX'"):
            get_culture("xx-XX")

    def test_unknown_culture_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            get_culture("xx-XX")

    def test_resolve_culture(self) -> None:
        custom = NumberCulture(name="custom", decimal_separator="·")
        assert resolve_culture(None) is INVARIANT_CULTURE
        assert resolve_culture("de-DE") is DE_DE
        assert resolve_culture(custom) is custom


# =============================================================================
# ТЕСТЫ render_number
# =============================================================================


class TestRenderFixedNotation:
    """Фиксированная запись: -5 < e < 15"""

    @pytest.mark.parametrize(
        "number, expected",
        [
            (2.345, "2.345"),
            (0.1, "0.1"),
            (0.0, "0"),
            (-0.0, "-0"),
            (2.0, "2"),
            (100.0, "100"),
            (-2.5, "-2.5"),
            (0.0001, "0.0001"),
            (0.00012, "0.00012"),
            (123456789012345.0, "123456789012345"),
            (1e14, "100000000000000"),
            (1234.5678, "1234.5678"),
        ],
    )
    def test_fixed(self, number: float, expected: str) -> None:
        assert render_number(number) == expected

    def test_shortest_round_trip_digits(self) -> None:
        """Цифры — кратчайшее round-trip представление"""
        assert render_number(0.1 + 0.2) == "0.30000000000000004"
        assert render_number(1 / 3) == "0.3333333333333333"


class TestRenderScientificNotation:
    """Научная запись: e >= 15 или e <= -5"""

    @pytest.mark.parametrize(
        "number, expected",
        [
            (1e15, "1E+15"),
            (1234567890123456.0, "1.234567890123456E+15"),
            (1e-05, "1E-05"),
            (1.5e-07, "1.5E-07"),
            (-2.5e20, "-2.5E+20"),
            (5e-324, "5E-324"),
            (sys.float_info.max, "1.7976931348623157E+308"),
            (1e100, "1E+100"),
        ],
    )
    def test_scientific(self, number: float, expected: str) -> None:
        assert render_number(number) == expected

    def test_exponent_uses_culture_signs(self) -> None:
        culture = NumberCulture(name="custom", negative_sign="−", positive_sign="＋")
        assert render_number(1e-05, culture) == "1E−05"
        assert render_number(-1e20, culture) == "−1E＋20"


class TestRenderCultures:
    """Разделители и символы разных культур"""

    def test_comma_separator(self) -> None:
        assert render_number(2.5, DE_DE) == "2,5"
        assert render_number(-0.125, FR_FR) == "-0,125"
        assert render_number(1.5e-07, RU_RU) == "1,5E-07"

    def test_culture_by_name(self) -> None:
        assert render_number(2.5, "de-DE") == "2,5"

    def test_invariant_symbols(self) -> None:
        assert render_number(math.nan) == "NaN"
        assert render_number(math.inf) == "Infinity"
        assert render_number(-math.inf) == "-Infinity"

    def test_culture_symbols(self) -> None:
        assert render_number(math.inf, EN_US) == "∞"
        assert render_number(-math.inf, EN_US) == "-∞"
        assert render_number(math.nan, RU_RU) == "не число"

    def test_accepts_real_numbers(self) -> None:
        assert render_number(3) == "3"
        assert render_number(Fraction(1, 4)) == "0.25"
