"""
Conversion — модели запроса и результата конверсии

Immutable Pydantic модели, создаются заново на каждый вызов и не
разделяются между вызовами.
Полная совместимость с JSON Schema (contracts/schema/conversion_*.json).
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from src.core.radix.alphabet import MAX_RADIX, MIN_RADIX


# Каноническая строка цифр со знаком (без префикса)
RENDERED_PATTERN = r"^-?[0-9A-Z]+$"


# =============================================================================
# REQUEST
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос на конверсию.

    strict=True: основания принимаются только как int (без "16" или 16.0).
    """

    raw_input: str = Field(..., description="Сырой ввод пользователя")
    source_radix: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX, description="Основание ввода")
    target_radix: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX, description="Основание вывода")

    model_config = {"frozen": True, "strict": True}


# =============================================================================
# RESULT
# =============================================================================


class RadixProjection(BaseModel):
    """Значение, записанное в одном основании проекции."""

    radix: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX)
    label: str = Field(..., min_length=1, description="Название основания (binary, base 36)")
    value: str = Field(..., pattern=RENDERED_PATTERN)

    model_config = {"frozen": True}


class ConversionResult(BaseModel):
    """
    Результат конверсии.

    Содержит:
    - Вход после trim и нормализованные цифры (со знаком)
    - Основания запроса
    - primary_output: значение в target_radix
    - projections: значения в [2, 8, 10, 16, target_radix] без повторов
    """

    original_input: str = Field(..., min_length=1)
    normalized_digits: str = Field(..., pattern=RENDERED_PATTERN)
    source_radix: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX)
    target_radix: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX)
    primary_output: str = Field(..., pattern=RENDERED_PATTERN)
    projections: Tuple[RadixProjection, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @field_validator("projections")
    @classmethod
    def validate_unique_radices(
        cls, v: Tuple[RadixProjection, ...]
    ) -> Tuple[RadixProjection, ...]:
        """Проверка, что каждое основание встречается в проекции один раз"""
        radices = [projection.radix for projection in v]
        if len(radices) != len(set(radices)):
            raise ValueError(f"projections contain duplicate radices: {radices}")
        return v

    def projection_for(self, radix: int) -> Optional[RadixProjection]:
        """Проекция для основания radix или None, если его нет в наборе."""
        for projection in self.projections:
            if projection.radix == radix:
                return projection
        return None

    def as_mapping(self) -> Dict[int, str]:
        """{radix: value} в порядке проекции."""
        return {projection.radix: projection.value for projection in self.projections}

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в контракт conversion_result."""
        return self.model_dump(mode="json")
