"""Converter — публичный интерфейс конверсии систем счисления.

Внешние слои (CLI, HTTP, UI) вызывают convert() со строкой и двумя
основаниями и отображают типизированные ошибки по-своему.
"""

from .engine import convert, convert_request, try_convert

__all__ = [
    "convert",
    "convert_request",
    "try_convert",
]
