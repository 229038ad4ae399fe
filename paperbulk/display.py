"""
Display formatting — turns a resolved MeasurementSet into the rounded
numbers shown on the results panel.

The engine keeps full precision. Rounding lives here and only here.
"""

import math

from .schemas import DisplayResult, MeasurementSet
from .units import apparent_density


class ResultFormatter:
    """Builds the DisplayResult for the results panel."""

    # Decimal places per field
    DECIMALS = {
        "basis_weight": 2,
        "thickness_micron": 1,
        "thickness_mm": 3,
        "thickness_tiao": 2,
        "bulk": 3,
        "pound_weight": 2,
        "density": 3,
        "reference_area_sq_in": 2,
    }

    def build(self, measurements: MeasurementSet, reference_area_sq_in: float) -> DisplayResult:
        """
        Round every present field; absent stays None.
        Density (ρ = 1 / bulk) is worked out from the full-precision bulk.
        """
        values = measurements.as_dict()
        values["density"] = apparent_density(measurements.bulk)
        values["reference_area_sq_in"] = reference_area_sq_in

        return DisplayResult(**{
            name: self.round_half_up(value, self.DECIMALS[name])
            for name, value in values.items()
        })

    @staticmethod
    def round_half_up(value, decimals: int = 3):
        """
        Round .5 away from zero for positives (0.125 → 0.13), matching what
        users get from a calculator. Python's round() is banker's rounding.
        Returns None for None / non-finite. Values too large to scale come
        back as-is; they have no fractional part left to round.
        """
        if value is None or not math.isfinite(value):
            return None
        factor = 10 ** decimals
        scaled = value * factor + 0.5
        if not math.isfinite(scaled):
            return value
        return math.floor(scaled) / factor
