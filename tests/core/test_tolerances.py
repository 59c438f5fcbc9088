"""
Tests for tolerance tiers.
"""

import pytest

from pyalgebra.core.exceptions import ValidationError
from pyalgebra.core.tolerances import (
    EXACT,
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)


class TestToleranceTier:

    def test_frozen(self):
        with pytest.raises(AttributeError):
            FP64.rtol = 1.0

    def test_exact_requires_equality(self):
        assert EXACT.is_close(3, 3)
        assert not EXACT.is_close(3, 4)
        assert not EXACT.is_close(0.1 + 0.2, 0.3)

    def test_fp64_absorbs_rounding(self):
        assert FP64.is_close(0.1 + 0.2, 0.3)
        assert not FP64.is_close(1.0, 1.0 + 1e-9)

    def test_fp32_is_looser_than_fp64(self):
        assert FP32.rtol > FP64.rtol
        assert FP32.is_close(1.0, 1.0 + 1e-6)

    def test_tiers_are_ordered_by_looseness(self):
        assert EXACT.atol < FP64.atol < FP32.atol


class TestSelectTolerance:

    @pytest.mark.parametrize("name,tier", [
        ("exact", EXACT),
        ("fp64", FP64),
        ("fp32", FP32),
    ])
    def test_lookup_by_name(self, name, tier):
        assert select_tolerance(name) is tier

    def test_instance_passthrough(self):
        custom = ToleranceTier(rtol=0.1, atol=0.1, name="loose", description="test")
        assert select_tolerance(custom) is custom

    def test_unknown_name_raises(self):
        with pytest.raises(ValidationError, match="Unknown tolerance tier: 'fp16'"):
            select_tolerance("fp16")
