"""
Contract Validation Module

Модуль для валидации JSON контрактов конверсии (запрос, результат, ошибка).
"""

from .validators import (
    ContractValidator,
    ConversionErrorValidator,
    ConversionRequestValidator,
    ConversionResultValidator,
    SchemaLoader,
    validate_conversion_error,
    validate_conversion_request,
    validate_conversion_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRequestValidator",
    "ConversionResultValidator",
    "ConversionErrorValidator",
    # Functions
    "validate_conversion_request",
    "validate_conversion_result",
    "validate_conversion_error",
]
