"""
Тесты для Multi-radix Projector

Проверяемые инварианты:
1. Порядок [2, 8, 10, 16, target] без повторов
2. Одно значение во всех основаниях (radix-invariance)
3. ProjectionConfig валидирует базовый набор
"""

import pytest

from src.core.radix import (
    DEFAULT_PROJECTION_RADICES,
    InvalidRadix,
    ProjectionConfig,
    RadixRendering,
    parse_integer,
    project_value,
    projection_radices,
    radix_label,
)


class TestProjectionRadices:
    """Порядок и дедупликация оснований."""

    @pytest.mark.parametrize(
        "target,expected",
        [
            (36, (2, 8, 10, 16, 36)),
            (3, (2, 8, 10, 16, 3)),
            (2, (2, 8, 10, 16)),
            (8, (2, 8, 10, 16)),
            (10, (2, 8, 10, 16)),
            (16, (2, 8, 10, 16)),
        ],
    )
    def test_default_order(self, target, expected):
        assert projection_radices(target) == expected

    def test_custom_config(self):
        config = ProjectionConfig(base_radices=(10, 36))
        assert projection_radices(16, config) == (10, 36, 16)
        assert projection_radices(36, config) == (10, 36)

    def test_duplicates_in_config_collapsed(self):
        config = ProjectionConfig(base_radices=(16, 2, 16))
        assert projection_radices(5, config) == (16, 2, 5)

    def test_invalid_target(self):
        with pytest.raises(InvalidRadix):
            projection_radices(37)


class TestProjectionConfig:
    """Валидация конфигурации."""

    def test_default(self):
        assert ProjectionConfig().base_radices == DEFAULT_PROJECTION_RADICES == (2, 8, 10, 16)

    def test_list_coerced_to_tuple(self):
        config = ProjectionConfig(base_radices=[2, 10])
        assert config.base_radices == (2, 10)

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            ProjectionConfig(base_radices=())

    def test_out_of_range_rejected(self):
        with pytest.raises(InvalidRadix):
            ProjectionConfig(base_radices=(2, 40))

    def test_frozen(self):
        config = ProjectionConfig()
        with pytest.raises(AttributeError):
            config.base_radices = (2,)


class TestProjectValue:
    """Запись одного значения во всех основаниях."""

    def test_hex_ff(self):
        assert project_value(255, 36) == (
            RadixRendering(2, "binary", "11111111"),
            RadixRendering(8, "octal", "377"),
            RadixRendering(10, "decimal", "255"),
            RadixRendering(16, "hexadecimal", "FF"),
            RadixRendering(36, "base 36", "73"),
        )

    def test_negative_value(self):
        values = {r.radix: r.value for r in project_value(-10, 10)}
        assert values == {2: "-1010", 8: "-12", 10: "-10", 16: "-A"}

    @pytest.mark.parametrize("value", [0, 1, -1, 2**64 + 3, -(10**30)])
    def test_radix_invariance(self, value):
        """Обратный разбор каждой проекции даёт одно и то же значение."""
        for rendering in project_value(value, 29):
            assert parse_integer(rendering.value, rendering.radix) == value

    def test_labels(self):
        assert radix_label(2) == "binary"
        assert radix_label(10) == "decimal"
        assert radix_label(7) == "base 7"
