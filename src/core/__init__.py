"""
Core domain models, radix primitives, and contracts.

This module contains the foundational building blocks of base conversion
that are independent of any presentation layer (CLI, HTTP, UI).
"""
