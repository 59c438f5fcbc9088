"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the scalar types PyAlgebra is used with:
- EXACT: integers and fractions, no rounding allowed
- FP64: Python float / numpy float64
- FP32: numpy float32 element types

Used by Vector.allclose and the test suite.
"""

from dataclasses import dataclass

from pyalgebra.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def is_close(self, a, b) -> bool:
        """Return True if |a - b| <= atol + rtol * |b|."""
        return abs(a - b) <= self.atol + self.rtol * abs(b)


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, for integer and rational scalars',
)

FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision, a few ulps of accumulated rounding',
)

# float32 epsilon is ~1.19e-7; x100 leaves room for accumulation
FP32 = ToleranceTier(
    rtol=1.2e-5,
    atol=1.2e-5,
    name='fp32',
    description='Single precision, float32 epsilon x100',
)

_TIERS = {tier.name: tier for tier in (EXACT, FP64, FP32)}


def select_tolerance(name: str | ToleranceTier) -> ToleranceTier:
    """
    Look up a tolerance tier by name.

    Tier instances are passed through unchanged.

    Raises:
        ValidationError: If the name is not a known tier
    """
    if isinstance(name, ToleranceTier):
        return name
    try:
        return _TIERS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown tolerance tier: {name!r}, expected one of {sorted(_TIERS)}"
        ) from None
