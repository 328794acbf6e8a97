"""Conversion Engine — единая точка входа конверсии.

Поток: Normalizer → Parser → (sign, magnitude) → Formatter × N → ConversionResult.

Чистая синхронная функция без разделяемого изменяемого состояния:
безопасна для параллельного вызова без блокировок. Частоту вызова
(на каждое нажатие клавиши, с debounce и т.п.) определяет вызывающий.

Ошибки:
- convert() поднимает подкласс RadixConversionError при первом нарушении
- try_convert() возвращает пару (result, error) без исключений
"""

import logging
from typing import Optional, Tuple

from src.core.domain.conversion import ConversionRequest, ConversionResult, RadixProjection
from src.core.radix.errors import RadixConversionError
from src.core.radix.normalizer import normalize_input
from src.core.radix.parser import parse_value
from src.core.radix.projector import ProjectionConfig, project_value


logger = logging.getLogger(__name__)


def convert(
    raw_input: str,
    source_radix: int,
    target_radix: int,
    config: Optional[ProjectionConfig] = None,
) -> ConversionResult:
    """Конверсия строки из source_radix в target_radix.

    Args:
        raw_input: Сырой ввод ("-0xFF", "1111_0000", ...)
        source_radix: Основание ввода 2..36
        target_radix: Основание вывода 2..36
        config: Базовый набор оснований проекции (default: 2, 8, 10, 16)

    Returns:
        ConversionResult с primary_output и projections

    Raises:
        EmptyInput, InvalidRadix, EmptyDigits, DigitOutOfRange
    """
    try:
        normalized = normalize_input(raw_input, source_radix, target_radix)
        parsed = parse_value(normalized, source_radix)
    except RadixConversionError as exc:
        logger.info("Conversion rejected: kind=%s message=%s", exc.kind.value, exc.message)
        raise

    renderings = project_value(parsed.value, target_radix, config)
    primary_output = next(r.value for r in renderings if r.radix == target_radix)

    logger.debug(
        "Converted %d digits from base %d to base %d (%d projections)",
        len(normalized.digits),
        source_radix,
        target_radix,
        len(renderings),
    )

    return ConversionResult(
        original_input=normalized.original_input,
        normalized_digits=normalized.signed_digits,
        source_radix=source_radix,
        target_radix=target_radix,
        primary_output=primary_output,
        projections=tuple(
            RadixProjection(radix=r.radix, label=r.label, value=r.value) for r in renderings
        ),
    )


def convert_request(
    request: ConversionRequest, config: Optional[ProjectionConfig] = None
) -> ConversionResult:
    """Конверсия по готовой модели запроса."""
    return convert(request.raw_input, request.source_radix, request.target_radix, config)


def try_convert(
    raw_input: str,
    source_radix: int,
    target_radix: int,
    config: Optional[ProjectionConfig] = None,
) -> Tuple[Optional[ConversionResult], Optional[RadixConversionError]]:
    """Конверсия в стиле (result, error) для слоёв представления.

    Ровно один элемент пары не None; частичный результат не возвращается.
    """
    try:
        return convert(raw_input, source_radix, target_radix, config), None
    except RadixConversionError as exc:
        return None, exc
