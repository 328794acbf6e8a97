"""
Formatter — точное целое → каноническая строка цифр

Каноническая форма: без ведущих нулей (кроме "0"), без префикса
(0x/0b/0o допустимы только во вводе), "-" для отрицательных значений.
"""

from src.core.radix.alphabet import digit_char
from src.core.radix.normalizer import NEGATIVE_SIGN, validate_radix


def format_value(value: int, radix: int) -> str:
    """
    Запись value в системе счисления radix.

    Args:
        value: Целое произвольной величины
        radix: Основание 2..36

    Returns:
        Каноническая строка цифр

    Raises:
        TypeError: Если value не int
        InvalidRadix: Если radix вне диапазона

    Examples:
        >>> format_value(255, 16)
        'FF'
        >>> format_value(-5, 2)
        '-101'
        >>> format_value(0, 36)
        '0'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {type(value).__name__}")
    validate_radix(radix)

    if value == 0:
        return "0"

    remaining = abs(value)
    chars = []
    while remaining > 0:
        remaining, digit = divmod(remaining, radix)
        chars.append(digit_char(digit))
    chars.reverse()

    rendered = "".join(chars)
    return f"{NEGATIVE_SIGN}{rendered}" if value < 0 else rendered
