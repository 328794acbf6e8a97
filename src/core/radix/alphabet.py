"""
Alphabet — канонический алфавит цифр и границы допустимых систем счисления

Единственная таблица соответствия "символ ↔ значение цифры" для всех
модулей конверсии. Буквы A–Z представляют значения 10–35.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение цифры == индекс символа в DIGITS
2. Допустимые основания: MIN_RADIX ≤ radix ≤ MAX_RADIX
3. Таблица неизменяема (read-only после импорта модуля)
"""

from types import MappingProxyType
from typing import Final, Mapping, Optional


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DIGITS: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = len(DIGITS)

# Обратная таблица: символ → значение цифры
DIGIT_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {char: value for value, char in enumerate(DIGITS)}
)


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def is_valid_radix(radix: object) -> bool:
    """
    Проверка, что radix является целым числом в диапазоне [MIN_RADIX, MAX_RADIX].

    bool отвергается, несмотря на то что является подклассом int.

    Examples:
        >>> is_valid_radix(16)
        True
        >>> is_valid_radix(37)
        False
        >>> is_valid_radix(True)
        False
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        return False
    return MIN_RADIX <= radix <= MAX_RADIX


def digit_value(char: str) -> Optional[int]:
    """
    Значение одного символа-цифры или None, если символа нет в алфавите.

    Символ должен быть уже приведён к верхнему регистру.
    """
    return DIGIT_VALUES.get(char)


def digit_char(value: int) -> str:
    """Символ алфавита для значения цифры 0..35."""
    if not 0 <= value < MAX_RADIX:
        raise ValueError(f"digit value must be in [0, {MAX_RADIX - 1}], got {value}")
    return DIGITS[value]
