"""
Core radix modules

Примитивы конверсии целых чисел между системами счисления 2..36
с точной арифметикой произвольной точности.
"""

# Alphabet
from src.core.radix.alphabet import (
    DIGIT_VALUES,
    DIGITS,
    MAX_RADIX,
    MIN_RADIX,
    digit_char,
    digit_value,
    is_valid_radix,
)

# Errors
from src.core.radix.errors import (
    DigitOutOfRange,
    EmptyDigits,
    EmptyInput,
    ErrorKind,
    InvalidRadix,
    RadixConversionError,
)

# Normalizer
from src.core.radix.normalizer import (
    NEGATIVE_SIGN,
    RADIX_PREFIXES,
    SEPARATOR_CHARS,
    NormalizedInput,
    normalize_input,
    strip_radix_prefix,
    strip_separators,
    validate_radix,
)

# Parser
from src.core.radix.parser import (
    ParsedValue,
    parse_integer,
    parse_magnitude,
    parse_value,
)

# Formatter
from src.core.radix.formatter import format_value

# Projector
from src.core.radix.projector import (
    DEFAULT_PROJECTION_RADICES,
    RADIX_LABELS,
    ProjectionConfig,
    RadixRendering,
    project_value,
    projection_radices,
    radix_label,
)

__all__ = [
    # Alphabet
    "DIGITS",
    "DIGIT_VALUES",
    "MIN_RADIX",
    "MAX_RADIX",
    "digit_char",
    "digit_value",
    "is_valid_radix",
    # Errors
    "ErrorKind",
    "RadixConversionError",
    "EmptyInput",
    "InvalidRadix",
    "EmptyDigits",
    "DigitOutOfRange",
    # Normalizer
    "NEGATIVE_SIGN",
    "RADIX_PREFIXES",
    "SEPARATOR_CHARS",
    "NormalizedInput",
    "normalize_input",
    "strip_radix_prefix",
    "strip_separators",
    "validate_radix",
    # Parser
    "ParsedValue",
    "parse_integer",
    "parse_magnitude",
    "parse_value",
    # Formatter
    "format_value",
    # Projector
    "DEFAULT_PROJECTION_RADICES",
    "RADIX_LABELS",
    "ProjectionConfig",
    "RadixRendering",
    "project_value",
    "projection_radices",
    "radix_label",
]
