"""
Radix Errors — таксономия ошибок конверсии

Все ошибки являются локальными ошибками валидации входа:
- детерминированы (одинаковый вход → одинаковая ошибка)
- никогда не являются transient, повтор бессмысленен
- сообщают о ПЕРВОМ нарушенном предусловии

Иерархия:
    RadixConversionError (ValueError)
    ├── EmptyInput        : пустой вход после trim
    ├── InvalidRadix      : основание вне [2, 36] или не целое
    ├── EmptyDigits       : после снятия знака/префикса ничего не осталось
    └── DigitOutOfRange   : символ не является цифрой исходного основания
"""

from enum import Enum
from typing import Any, Dict

from src.core.radix.alphabet import MAX_RADIX, MIN_RADIX


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки конверсии (стабильный код для внешних слоёв)."""

    EMPTY_INPUT = "empty_input"
    INVALID_RADIX = "invalid_radix"
    EMPTY_DIGITS = "empty_digits"
    DIGIT_OUT_OF_RANGE = "digit_out_of_range"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RadixConversionError(ValueError):
    """
    Базовая ошибка конверсии.

    Подклассы задают kind; message: человекочитаемое описание, которое
    внешний слой (CLI, HTTP, UI) может показать пользователю как есть.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в контракт conversion_error."""
        return {"kind": self.kind.value, "message": self.message}


class EmptyInput(RadixConversionError):
    """Вход пуст или состоит только из пробельных символов."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self):
        super().__init__("Input is empty: enter a value to convert")


class InvalidRadix(RadixConversionError):
    """Основание не является целым числом в диапазоне [2, 36]."""

    kind = ErrorKind.INVALID_RADIX

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        label = field.replace("_", " ")
        super().__init__(
            f"{label} must be an integer between {MIN_RADIX} and {MAX_RADIX}, got {value!r}"
        )


class EmptyDigits(RadixConversionError):
    """После снятия знака и префикса не осталось ни одной цифры."""

    kind = ErrorKind.EMPTY_DIGITS

    def __init__(self):
        super().__init__("No digits left to convert after removing sign and prefix")


class DigitOutOfRange(RadixConversionError):
    """
    Символ не является допустимой цифрой исходного основания.

    Включает цифры старших оснований ("8" при radix=8) и буквы
    несогласованного префикса ("X" в "0XFF" при radix=10).
    """

    kind = ErrorKind.DIGIT_OUT_OF_RANGE

    def __init__(self, radix: int, char: str, position: int):
        self.radix = radix
        self.char = char
        self.position = position
        super().__init__(
            f"Input contains {char!r} at position {position}, "
            f"which is not a valid base-{radix} digit"
        )
