"""
Parser — строка цифр → точное целое произвольной точности

Накопление слева направо: magnitude = magnitude * radix + digit.
Используется встроенный int (arbitrary precision); ограничений на длину
строки или величину результата нет.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый символ проверяется по алфавиту и по radix
2. Ошибка называет основание, символ и его позицию
3. Ноль всегда имеет знак +1
"""

from typing import NamedTuple

from src.core.radix.alphabet import digit_value
from src.core.radix.errors import DigitOutOfRange
from src.core.radix.normalizer import NormalizedInput, normalize_input, validate_radix


class ParsedValue(NamedTuple):
    """Точное значение со знаком: sign ∈ {+1, -1}, magnitude ≥ 0."""

    sign: int
    magnitude: int

    @property
    def value(self) -> int:
        return self.sign * self.magnitude


def parse_magnitude(digits: str, radix: int) -> int:
    """
    Разбор строки цифр (верхний регистр, без знака и префикса).

    Args:
        digits: Нормализованная строка цифр
        radix: Основание 2..36

    Returns:
        Неотрицательное точное значение

    Raises:
        InvalidRadix: Если radix вне диапазона
        DigitOutOfRange: Если символ не является цифрой основания radix

    Examples:
        >>> parse_magnitude("FF", 16)
        255
        >>> parse_magnitude("1111", 2)
        15
    """
    validate_radix(radix)

    magnitude = 0
    for position, char in enumerate(digits):
        value = digit_value(char)
        if value is None or value >= radix:
            raise DigitOutOfRange(radix, char, position)
        magnitude = magnitude * radix + value
    return magnitude


def parse_value(normalized: NormalizedInput, radix: int) -> ParsedValue:
    """Разбор нормализованного ввода с применением знака."""
    magnitude = parse_magnitude(normalized.digits, radix)
    sign = normalized.sign if magnitude else 1
    return ParsedValue(sign=sign, magnitude=magnitude)


def parse_integer(raw_input: str, radix: int) -> int:
    """
    Полный цикл normalize → parse для одной строки.

    Examples:
        >>> parse_integer("-0x1f", 16)
        -31
        >>> parse_integer("1111_0000", 2)
        240
    """
    normalized = normalize_input(raw_input, radix, radix)
    return parse_value(normalized, radix).value
