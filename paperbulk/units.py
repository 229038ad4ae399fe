# Paper unit constants — source: NIST exact definitions + trade conventions (Taiwan / US basis sizes)

import math

# Area
IN2_TO_M2 = 0.00064516          # 1 in² = 0.00064516 m² (exact)

# Mass
LB_TO_G = 453.59237             # 1 lb = 453.59237 g (exact)
SHEETS_PER_REAM = 500           # Ream convention used for pound-weight

# Thickness
MICRON_PER_MM = 1000.0
MICRON_PER_TIAO = 10.0          # 1 條 = 0.01 mm = 10 μm


def sheet_area_m2(area_sq_in: float) -> float:
    """Area of one reference sheet in m²."""
    return area_sq_in * IN2_TO_M2


def lb_to_gsm(pound_weight: float, area_sq_in: float) -> float:
    """
    Convert ream weight (lb per 500 sheets of the reference size) to g/m².
    Raises ZeroDivisionError for a zero area — callers gate on a valid area.
    """
    grams_per_ream = pound_weight * LB_TO_G
    return grams_per_ream / SHEETS_PER_REAM / sheet_area_m2(area_sq_in)


def gsm_to_lb(basis_weight: float, area_sq_in: float) -> float:
    """Convert g/m² to ream weight in lb for the reference sheet size."""
    grams_per_ream = basis_weight * sheet_area_m2(area_sq_in) * SHEETS_PER_REAM
    return grams_per_ream / LB_TO_G


def micron_to_mm(micron: float) -> float:
    return micron / MICRON_PER_MM


def micron_to_tiao(micron: float) -> float:
    return micron / MICRON_PER_TIAO


def mm_to_micron(mm: float) -> float:
    return mm * MICRON_PER_MM


def tiao_to_micron(tiao: float) -> float:
    return tiao * MICRON_PER_TIAO


def apparent_density(bulk):
    """
    Apparent density ρ = 1 / bulk (g/cm³). Display only.
    Returns None when bulk is missing, zero, or the result isn't finite.
    """
    if bulk is None or bulk == 0:
        return None
    density = 1.0 / bulk
    return density if math.isfinite(density) else None
