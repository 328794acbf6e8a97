"""
Multi-radix Projector — одно значение → набор оснований

Одно разобранное значение отображается во все основания списка
[2, 8, 10, 16, target_radix] без повторного разбора ввода.
Порядок сохраняется, повторы основания отбрасываются (первое вхождение
остаётся на своём месте).
"""

from dataclasses import dataclass
from typing import Final, Mapping, NamedTuple, Optional, Tuple

from src.core.radix.formatter import format_value
from src.core.radix.normalizer import validate_radix


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEFAULT_PROJECTION_RADICES: Final[Tuple[int, ...]] = (2, 8, 10, 16)

RADIX_LABELS: Final[Mapping[int, str]] = {
    2: "binary",
    8: "octal",
    10: "decimal",
    16: "hexadecimal",
}


# =============================================================================
# CONFIG & TYPES
# =============================================================================


@dataclass(frozen=True)
class ProjectionConfig:
    """Конфигурация набора оснований, в которые проецируется значение.

    target_radix запроса всегда добавляется в конец списка.
    """

    base_radices: Tuple[int, ...] = DEFAULT_PROJECTION_RADICES

    def __post_init__(self):
        radices = tuple(self.base_radices)
        if not radices:
            raise ValueError("base_radices cannot be empty")
        for radix in radices:
            validate_radix(radix, "base_radices")
        object.__setattr__(self, "base_radices", radices)


class RadixRendering(NamedTuple):
    """Значение, записанное в одном основании."""

    radix: int
    label: str
    value: str


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def radix_label(radix: int) -> str:
    """
    Человекочитаемое название основания.

    Examples:
        >>> radix_label(16)
        'hexadecimal'
        >>> radix_label(36)
        'base 36'
    """
    return RADIX_LABELS.get(radix, f"base {radix}")


def projection_radices(
    target_radix: int, config: Optional[ProjectionConfig] = None
) -> Tuple[int, ...]:
    """
    Упорядоченный список оснований без повторов.

    Examples:
        >>> projection_radices(36)
        (2, 8, 10, 16, 36)
        >>> projection_radices(16)
        (2, 8, 10, 16)
    """
    validate_radix(target_radix, "target_radix")
    config = config or ProjectionConfig()

    seen = set()
    ordered = []
    for radix in (*config.base_radices, target_radix):
        if radix in seen:
            continue
        seen.add(radix)
        ordered.append(radix)
    return tuple(ordered)


def project_value(
    value: int, target_radix: int, config: Optional[ProjectionConfig] = None
) -> Tuple[RadixRendering, ...]:
    """
    Запись одного значения во всех основаниях проекции.

    Args:
        value: Точное целое со знаком
        target_radix: Запрошенное основание вывода
        config: Набор базовых оснований (default: 2, 8, 10, 16)

    Returns:
        Кортеж RadixRendering в порядке projection_radices
    """
    return tuple(
        RadixRendering(radix=radix, label=radix_label(radix), value=format_value(value, radix))
        for radix in projection_radices(target_radix, config)
    )
