"""
Normalizer — очистка и валидация сырого текстового ввода

Порядок шагов фиксирован (первое нарушение прерывает обработку):
1. trim → EmptyInput если пусто
2. Проверка source_radix / target_radix → InvalidRadix
3. Приведение к верхнему регистру (только ASCII a-z)
4. Удаление разделителей: "_" и пробельные символы
5. Ведущий "-" → отрицательный знак ("+" не поддерживается)
6. Снятие префикса 0B / 0O / 0X только при согласованном source_radix
7. Пусто → EmptyDigits

Несогласованный префикс НЕ снимается: "0XFF" при radix=10 доходит до
парсера и отвергается как DigitOutOfRange.
"""

import string
from typing import Final, Mapping, NamedTuple

from src.core.radix.alphabet import is_valid_radix
from src.core.radix.errors import EmptyDigits, EmptyInput, InvalidRadix


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NEGATIVE_SIGN: Final[str] = "-"

# Разделители для читаемости (пробельные символы удаляются дополнительно)
SEPARATOR_CHARS: Final[frozenset] = frozenset("_")

# Префикс снимается только если совпадает с объявленным основанием
RADIX_PREFIXES: Final[Mapping[int, str]] = {
    2: "0B",
    8: "0O",
    16: "0X",
}

# str.upper() превращает "ß" в "SS"; складываем только ASCII
_ASCII_UPPER: Final[dict] = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


# =============================================================================
# TYPES
# =============================================================================


class NormalizedInput(NamedTuple):
    """Результат нормализации: знак и строка цифр без префикса."""

    original_input: str  # вход после trim
    sign: int  # +1 или -1
    digits: str

    @property
    def is_negative(self) -> bool:
        return self.sign < 0

    @property
    def signed_digits(self) -> str:
        """Цифры с восстановленным знаком (для отображения)."""
        return f"{NEGATIVE_SIGN}{self.digits}" if self.is_negative else self.digits


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def validate_radix(radix: object, field: str = "radix") -> int:
    """
    Проверка основания.

    Args:
        radix: Проверяемое значение
        field: Имя параметра для сообщения об ошибке

    Returns:
        radix без изменений

    Raises:
        InvalidRadix: Если radix не int или вне [2, 36]
    """
    if not is_valid_radix(radix):
        raise InvalidRadix(field, radix)
    return radix


def strip_separators(text: str) -> str:
    """Удаление "_" и любых пробельных символов."""
    return "".join(
        char for char in text if char not in SEPARATOR_CHARS and not char.isspace()
    )


def strip_radix_prefix(digits: str, radix: int) -> str:
    """
    Снятие конвенционального префикса, согласованного с radix.

    Examples:
        >>> strip_radix_prefix("0XFF", 16)
        'FF'
        >>> strip_radix_prefix("0XFF", 10)
        '0XFF'
    """
    prefix = RADIX_PREFIXES.get(radix)
    if prefix and digits.startswith(prefix):
        return digits[len(prefix):]
    return digits


def normalize_input(raw_input: str, source_radix: int, target_radix: int) -> NormalizedInput:
    """
    Нормализация сырого ввода.

    Args:
        raw_input: Произвольная строка от пользователя
        source_radix: Основание, в котором записан ввод
        target_radix: Запрошенное основание вывода (только проверяется)

    Returns:
        NormalizedInput(original_input, sign, digits)

    Raises:
        EmptyInput: Вход пуст после trim
        InvalidRadix: source_radix или target_radix некорректны
        EmptyDigits: Не осталось цифр после снятия знака и префикса
    """
    trimmed = raw_input.strip()
    if not trimmed:
        raise EmptyInput()

    # Проверка оснований предшествует проверке цифр
    validate_radix(source_radix, "source_radix")
    validate_radix(target_radix, "target_radix")

    compact = strip_separators(trimmed.translate(_ASCII_UPPER))

    sign = 1
    if compact.startswith(NEGATIVE_SIGN):
        sign = -1
        compact = compact[len(NEGATIVE_SIGN):]

    digits = strip_radix_prefix(compact, source_radix)
    if not digits:
        raise EmptyDigits()

    return NormalizedInput(original_input=trimmed, sign=sign, digits=digits)
