"""
Basis-size presets — maps paper grade keys to the reference sheet (inches)
used for pound-weight ⇄ gsm.

Taiwan trade convention: 模造 / 道林 / 銅板 / 雪銅 are all quoted on 25×38 in.
US Text/Book is 25×38 in, US Cover is 20×26 in.
"custom" has no fixed size — the caller supplies width and height.
"""

import logging
from typing import Optional

from .config import settings
from .schemas import PresetInfo, ReferenceSize

logger = logging.getLogger(__name__)

CUSTOM = "custom"

PRESETS: dict[str, dict] = {
    "woodfree-A": {"label": "Woodfree 模造紙 (25×38 in)", "width_in": 25.0, "height_in": 38.0},
    "woodfree-B": {"label": "Woodfree 道林紙 (25×38 in)", "width_in": 25.0, "height_in": 38.0},
    "coated-gloss": {"label": "Art / coated gloss 銅板紙 (25×38 in)", "width_in": 25.0, "height_in": 38.0},
    "coated-matte": {"label": "Art / coated matte 雪銅 (25×38 in)", "width_in": 25.0, "height_in": 38.0},
    "text-book": {"label": "US Text/Book (25×38 in)", "width_in": 25.0, "height_in": 38.0},
    "cover": {"label": "US Cover (20×26 in)", "width_in": 20.0, "height_in": 26.0},
    CUSTOM: {"label": "Custom basis size", "width_in": None, "height_in": None},
}

# "Fill sample" button: 80 lb woodfree with bulk 1.35
SAMPLE_REQUEST = {
    "preset": "woodfree-A",
    "width_in": 25.0,
    "height_in": 38.0,
    "pound_weight": 80.0,
    "bulk": 1.35,
}


def get_preset(key: str) -> PresetInfo:
    """Returns the preset for a key, or raises ValueError."""
    if key not in PRESETS:
        raise ValueError(
            f"Unknown basis-size preset: {key}. "
            f"Available: {list(PRESETS.keys())}"
        )
    return PresetInfo(key=key, **PRESETS[key])


def has_preset(key: str) -> bool:
    """Check if a preset key exists."""
    return key in PRESETS


def list_presets() -> list[PresetInfo]:
    """All presets in display order."""
    return [PresetInfo(key=key, **data) for key, data in PRESETS.items()]


def resolve_reference_size(preset: Optional[str] = None,
                           width_in: Optional[float] = None,
                           height_in: Optional[float] = None) -> ReferenceSize:
    """
    Work out the basis size for a calculation.

    Explicit width/height win over the preset's pair, one dimension at a time
    (the preset dropdown only pre-fills the two inputs; users can still edit them).
    "custom" with nothing supplied falls back to the configured default size.

    Raises ValueError for an unknown preset key.
    """
    key = preset or settings.DEFAULT_PRESET
    info = get_preset(key)

    base_w = info.width_in if info.width_in is not None else settings.DEFAULT_BASIS_WIDTH_IN
    base_h = info.height_in if info.height_in is not None else settings.DEFAULT_BASIS_HEIGHT_IN

    size = ReferenceSize(
        preset=key,
        width_in=width_in if width_in is not None else base_w,
        height_in=height_in if height_in is not None else base_h,
    )
    if not size.is_valid:
        logger.debug("Basis size %s x %s is degenerate — lb/gsm conversion disabled",
                     size.width_in, size.height_in)
    return size
