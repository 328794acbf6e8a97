"""
Test suite for the radix conversion engine

Contains:
- tests/unit/          : Unit tests for normalizer, parser, formatter,
                         projector, engine, models and JSON contracts
"""
