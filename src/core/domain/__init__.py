"""
Domain models and value objects.

Contains the conversion request/result entities exchanged with callers.
"""

from src.core.domain.conversion import (
    RENDERED_PATTERN,
    ConversionRequest,
    ConversionResult,
    RadixProjection,
)

__all__ = [
    "RENDERED_PATTERN",
    "ConversionRequest",
    "ConversionResult",
    "RadixProjection",
]
