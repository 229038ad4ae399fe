"""
Inference engine — fills in every paper measurement that can be derived
from the ones the user typed.

Pure math, no state. Input: a partial MeasurementSet + the basis-size area (in²).
Output: a new MeasurementSet with every derivable field filled.

Identities:
    t(μm) = bulk(cm³/g) × gsm(g/m²)
    1 mm = 1000 μm, 1 條 = 10 μm
    gsm = lb × 453.59237 / 500 / (area_in² × 0.00064516)

Each pass runs three steps in a fixed order:
    1. thickness cross-fill   μm → mm/條, else mm → μm/條, else 條 → μm/mm
    2. lb ⇄ gsm               lb → gsm first, then gsm → lb (skipped if area <= 0)
    3. t = bulk × gsm          t+gsm → bulk, t+bulk → gsm, gsm+bulk → t

Only absent fields are ever written. When the user supplies values that
disagree, the first source in that order wins and the rest are left as typed.
"""

import logging
import math
from typing import Optional, List, Union

from . import units
from .config import settings
from .schemas import FieldConflict, MeasurementSet

logger = logging.getLogger(__name__)

CONFLICT_REL_TOL = 1e-6


def _derive(fn, *args) -> Optional[float]:
    """Run a conversion; zero division or a non-finite result means 'still unknown'."""
    try:
        value = fn(*args)
    except (ZeroDivisionError, OverflowError):
        return None
    if not math.isfinite(value):
        logger.debug("Discarded non-finite %s%s", fn.__name__, args)
        return None
    return value


def _divide(a: float, b: float) -> float:
    return a / b


def _multiply(a: float, b: float) -> float:
    return a * b


def is_valid_area(area_sq_in) -> bool:
    """A basis area is usable for lb ⇄ gsm only if it is a finite positive number."""
    if area_sq_in is None or isinstance(area_sq_in, bool):
        return False
    try:
        area = float(area_sq_in)
    except (TypeError, ValueError):
        return False
    return math.isfinite(area) and area > 0


class InferenceEngine:
    """
    Best-effort completion of a Measurement Set.
    Never raises for missing, malformed or contradictory input.
    """

    def __init__(self, passes: int = None):
        self.passes = passes if passes is not None else settings.RESOLVE_PASSES

    def resolve(self, measurements: Union[MeasurementSet, dict],
                reference_area_sq_in: float) -> MeasurementSet:
        """
        Returns a new MeasurementSet with all derivable fields filled.
        Supplied fields are echoed unchanged. Zero or one known field comes back as-is.
        """
        if not isinstance(measurements, MeasurementSet):
            measurements = MeasurementSet.from_raw(measurements)
        m = measurements.as_dict()

        area_ok = is_valid_area(reference_area_sq_in)
        if not area_ok:
            logger.debug("Basis area %r unusable — skipping lb/gsm conversion", reference_area_sq_in)

        for pass_no in range(self.passes):
            filled = self._cross_fill_thickness(m)
            if area_ok:
                filled += self._convert_pound_weight(m, float(reference_area_sq_in))
            filled += self._apply_bulk_identity(m)
            if not filled:
                break
            logger.debug("Pass %d filled %d field(s)", pass_no + 1, filled)

        return MeasurementSet(**m)

    def find_conflicts(self, measurements: Union[MeasurementSet, dict],
                       reference_area_sq_in: float) -> List[FieldConflict]:
        """
        Diagnostic only — doesn't change what resolve() returns.

        For each supplied field, resolves the *other* supplied fields and
        reports it if they imply a different value.
        """
        if not isinstance(measurements, MeasurementSet):
            measurements = MeasurementSet.from_raw(measurements)
        supplied = measurements.as_dict()

        conflicts = []
        for name in measurements.known_fields():
            others = dict(supplied)
            others[name] = None
            implied = getattr(self.resolve(MeasurementSet(**others), reference_area_sq_in), name)
            if implied is None:
                continue
            if not math.isclose(supplied[name], implied, rel_tol=CONFLICT_REL_TOL, abs_tol=1e-9):
                conflicts.append(FieldConflict(name=name, supplied=supplied[name], implied=implied))
        return conflicts

    # --- Steps ---

    @staticmethod
    def _fill(m: dict, name: str, value: Optional[float]) -> int:
        """Write value only into an absent field. Returns 1 if something was filled."""
        if m[name] is not None or value is None:
            return 0
        m[name] = value
        return 1

    def _cross_fill_thickness(self, m: dict) -> int:
        """Step 1 — whichever of μm / mm / 條 is known first drives the other two."""
        filled = 0
        if m["thickness_micron"] is None:
            if m["thickness_mm"] is not None:
                filled += self._fill(m, "thickness_micron", _derive(units.mm_to_micron, m["thickness_mm"]))
            elif m["thickness_tiao"] is not None:
                filled += self._fill(m, "thickness_micron", _derive(units.tiao_to_micron, m["thickness_tiao"]))

        micron = m["thickness_micron"]
        if micron is None:
            return filled
        filled += self._fill(m, "thickness_mm", _derive(units.micron_to_mm, micron))
        filled += self._fill(m, "thickness_tiao", _derive(units.micron_to_tiao, micron))
        return filled

    def _convert_pound_weight(self, m: dict, area_sq_in: float) -> int:
        """Step 2 — lb ⇄ gsm through the basis area. lb → gsm is tried first."""
        filled = 0
        if m["pound_weight"] is not None and m["basis_weight"] is None:
            filled += self._fill(m, "basis_weight", _derive(units.lb_to_gsm, m["pound_weight"], area_sq_in))
        if m["basis_weight"] is not None and m["pound_weight"] is None:
            filled += self._fill(m, "pound_weight", _derive(units.gsm_to_lb, m["basis_weight"], area_sq_in))
        return filled

    def _apply_bulk_identity(self, m: dict) -> int:
        """Step 3 — t(μm) = bulk × gsm; any two give the third."""
        filled = 0
        if m["thickness_micron"] is not None and m["basis_weight"] is not None and m["bulk"] is None:
            filled += self._fill(m, "bulk", _derive(_divide, m["thickness_micron"], m["basis_weight"]))

        if m["thickness_micron"] is not None and m["bulk"] is not None and m["basis_weight"] is None:
            filled += self._fill(m, "basis_weight", _derive(_divide, m["thickness_micron"], m["bulk"]))

        if m["basis_weight"] is not None and m["bulk"] is not None and m["thickness_micron"] is None:
            thickness = _derive(_multiply, m["basis_weight"], m["bulk"])
            if thickness is not None:
                filled += self._fill(m, "thickness_micron", thickness)
                filled += self._cross_fill_thickness(m)
        return filled


# Shared stateless instance
_engine = InferenceEngine()


def resolve(measurements: Union[MeasurementSet, dict], reference_area_sq_in: float) -> MeasurementSet:
    """Module-level shortcut for InferenceEngine().resolve()."""
    return _engine.resolve(measurements, reference_area_sq_in)


def find_conflicts(measurements: Union[MeasurementSet, dict], reference_area_sq_in: float) -> List[FieldConflict]:
    return _engine.find_conflicts(measurements, reference_area_sq_in)
