"""
Тесты для Parser — строка цифр → точное целое

Проверяемые инварианты:
1. Каждая цифра проверяется по алфавиту и по основанию
2. Ошибка указывает основание, символ и позицию
3. Точность не теряется для значений за пределами 64 бит
4. Ноль не имеет знака
"""

import pytest

from src.core.radix import (
    DIGITS,
    DigitOutOfRange,
    ErrorKind,
    InvalidRadix,
    NormalizedInput,
    ParsedValue,
    parse_integer,
    parse_magnitude,
    parse_value,
)


class TestParseMagnitude:
    """Тесты parse_magnitude: накопление magnitude * radix + digit."""

    @pytest.mark.parametrize(
        "digits,radix,expected",
        [
            ("0", 2, 0),
            ("1", 2, 1),
            ("11110000", 2, 240),
            ("777", 8, 511),
            ("255", 10, 255),
            ("FF", 16, 255),
            ("Z", 36, 35),
            ("10", 36, 36),
            ("ZZ", 36, 1295),
            ("000123", 10, 123),
        ],
    )
    def test_known_values(self, digits, radix, expected):
        assert parse_magnitude(digits, radix) == expected

    def test_matches_builtin_int(self):
        """Совпадение с int(s, radix) для всех оснований."""
        for radix in range(2, 37):
            digits = DIGITS[:radix] * 3
            assert parse_magnitude(digits, radix) == int(digits, radix)

    def test_large_magnitude_exact(self):
        """32 hex F = 2**128 - 1, далеко за пределами 64 бит."""
        assert parse_magnitude("F" * 32, 16) == 340282366920938463463374607431768211455
        assert parse_magnitude("F" * 32, 16) == 2**128 - 1

    def test_no_length_ceiling(self):
        digits = "1" * 2000
        assert parse_magnitude(digits, 2) == 2**2000 - 1


class TestDigitOutOfRange:
    """Символы вне алфавита или ≥ radix."""

    def test_digit_borrowed_from_higher_radix(self):
        with pytest.raises(DigitOutOfRange) as exc_info:
            parse_magnitude("178", 8)
        error = exc_info.value
        assert error.kind == ErrorKind.DIGIT_OUT_OF_RANGE
        assert error.radix == 8
        assert error.char == "8"
        assert error.position == 2

    def test_message_names_radix(self):
        with pytest.raises(DigitOutOfRange, match="base-10"):
            parse_magnitude("0XFF", 10)

    @pytest.mark.parametrize("digits", ["2", "102", "1A"])
    def test_binary_accepts_only_zero_and_one(self, digits):
        with pytest.raises(DigitOutOfRange):
            parse_magnitude(digits, 2)

    def test_radix_36_accepts_full_alphabet(self):
        assert parse_magnitude(DIGITS, 36) == int(DIGITS, 36)

    @pytest.mark.parametrize("digits", ["+1", "1.5", "1,000", "a", "Ä", "٣"])
    def test_foreign_characters_rejected(self, digits):
        """Нижний регистр, знаки, точки и не-ASCII цифры не являются цифрами."""
        with pytest.raises(DigitOutOfRange):
            parse_magnitude(digits, 36)

    def test_first_offending_character_reported(self):
        with pytest.raises(DigitOutOfRange) as exc_info:
            parse_magnitude("12G4H", 16)
        assert exc_info.value.char == "G"
        assert exc_info.value.position == 2

    def test_invalid_radix(self):
        with pytest.raises(InvalidRadix):
            parse_magnitude("1", 37)


class TestParseValue:
    """Применение знака."""

    def test_negative(self):
        parsed = parse_value(NormalizedInput("-ff", -1, "FF"), 16)
        assert parsed == ParsedValue(sign=-1, magnitude=255)
        assert parsed.value == -255

    def test_negative_zero_is_positive(self):
        parsed = parse_value(NormalizedInput("-0", -1, "0"), 10)
        assert parsed.sign == 1
        assert parsed.value == 0

    @pytest.mark.parametrize(
        "raw,radix,expected",
        [
            ("0xFF", 16, 255),
            ("-0x1f", 16, -31),
            ("1111_0000", 2, 240),
            ("11110000", 2, 240),
            ("-ZZ", 36, -1295),
        ],
    )
    def test_parse_integer(self, raw, radix, expected):
        assert parse_integer(raw, radix) == expected

    def test_inconsistent_prefix_fails(self):
        with pytest.raises(DigitOutOfRange) as exc_info:
            parse_integer("0xFF", 10)
        assert exc_info.value.char == "X"
