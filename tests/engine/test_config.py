"""
Unit tests for engine configuration (SectionConfig, ColumnPolicy).
"""

import math

import pytest

from waterfall_layout.core.models import EdgeInsets
from waterfall_layout.engine import ColumnPolicy, SectionConfig


class TestSectionConfig:
    """Tests for SectionConfig validation and column math."""

    def test_defaults_when_created_then_two_columns_no_spacing(self):
        config = SectionConfig()
        assert config.column_count == 2
        assert config.line_spacing == 0
        assert config.interitem_spacing == 0
        assert config.section_inset == EdgeInsets()

    def test_init_when_zero_columns_then_raises_error(self):
        with pytest.raises(ValueError, match="column_count must be >= 1"):
            SectionConfig(column_count=0)

    def test_init_when_negative_spacing_then_raises_error(self):
        with pytest.raises(ValueError, match="line_spacing"):
            SectionConfig(line_spacing=-1)
        with pytest.raises(ValueError, match="interitem_spacing"):
            SectionConfig(interitem_spacing=-0.5)

    def test_init_when_non_finite_inset_then_raises_error(self):
        with pytest.raises(ValueError, match="section_inset.left"):
            SectionConfig(section_inset=EdgeInsets(left=math.inf))

    def test_column_width_when_spacing_and_insets_then_subtracts_both(self):
        config = SectionConfig(
            column_count=3,
            section_inset=EdgeInsets(left=10, right=20),
            interitem_spacing=5,
        )
        # (340 - 30 - 10) / 3
        assert config.column_width(340) == pytest.approx(100.0)

    def test_column_width_when_too_narrow_then_may_be_negative(self):
        config = SectionConfig(column_count=4, interitem_spacing=50)
        assert config.column_width(100) < 0

    def test_column_x_offsets_when_computed_then_step_by_width_plus_spacing(self):
        config = SectionConfig(
            column_count=3,
            section_inset=EdgeInsets(left=10),
            interitem_spacing=5,
        )
        assert config.column_x_offsets(100) == [10, 115, 220]

    @pytest.mark.parametrize("columns", [1, 2, 3, 5, 7])
    def test_column_width_when_summed_then_covers_content_width(self, columns):
        """columns*width + gaps + insets reproduces the content width."""
        inset = EdgeInsets(left=7.5, right=3.25)
        config = SectionConfig(column_count=columns, section_inset=inset, interitem_spacing=4.5)
        content_width = 333.3

        width = config.column_width(content_width)
        total = width * columns + 4.5 * (columns - 1) + inset.left + inset.right
        assert total == pytest.approx(content_width)


class TestColumnPolicy:
    """Tests for ColumnPolicy validation."""

    def test_init_when_non_positive_min_width_then_raises_error(self):
        with pytest.raises(ValueError, match="min_column_width"):
            ColumnPolicy(min_column_width=0)

    def test_init_when_zero_max_columns_then_raises_error(self):
        with pytest.raises(ValueError, match="max_columns"):
            ColumnPolicy(max_columns=0)

    def test_init_when_negative_spacing_then_raises_error(self):
        with pytest.raises(ValueError, match="spacing"):
            ColumnPolicy(spacing=-2)
