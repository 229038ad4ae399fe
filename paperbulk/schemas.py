import math
from typing import Optional, List

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Measurement Set field names, in the order the results panel shows them
MEASUREMENT_FIELDS = (
    "basis_weight",
    "thickness_micron",
    "thickness_mm",
    "thickness_tiao",
    "bulk",
    "pound_weight",
)


def parse_number(value) -> Optional[float]:
    """
    Parse a raw field value into a finite float, or None.

    Accepts numbers and numeric strings ("1,250.5" works — commas are dropped).
    Blank, unparseable, boolean, NaN and infinite values are all treated as absent.
    Never raises.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        number = float(value)
    except (ValueError, TypeError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _field(snake: str, camel: str):
    return Field(default=None, validation_alias=AliasChoices(snake, camel))


class MeasurementSet(BaseModel):
    """
    One sheet of paper described six ways. Every field is optional;
    None means "unknown", which is not the same thing as zero.
    """
    basis_weight: Optional[float] = _field("basis_weight", "basisWeight")          # g/m²
    thickness_micron: Optional[float] = _field("thickness_micron", "thicknessMicron")  # μm
    thickness_mm: Optional[float] = _field("thickness_mm", "thicknessMm")          # mm
    thickness_tiao: Optional[float] = _field("thickness_tiao", "thicknessTiao")    # 條 (10 μm)
    bulk: Optional[float] = None                                                   # cm³/g
    pound_weight: Optional[float] = _field("pound_weight", "poundWeight")          # lb / ream

    @field_validator(*MEASUREMENT_FIELDS, mode="before")
    @classmethod
    def _lenient_number(cls, value):
        return parse_number(value)

    @classmethod
    def from_raw(cls, raw: dict) -> "MeasurementSet":
        """Build from a mapping of raw user input (snake_case or camelCase keys)."""
        return cls.model_validate(dict(raw or {}))

    def as_dict(self) -> dict:
        """The six fields as a plain dict, absent ones included as None."""
        return {name: getattr(self, name) for name in MEASUREMENT_FIELDS}

    def known_fields(self) -> List[str]:
        return [name for name in MEASUREMENT_FIELDS if getattr(self, name) is not None]

    def is_empty(self) -> bool:
        return not self.known_fields()


class ReferenceSize(BaseModel):
    """Basis size of one sheet (inches). Only used for lb ⇄ gsm."""
    preset: str
    width_in: float
    height_in: float

    @property
    def area_sq_in(self) -> float:
        return self.width_in * self.height_in

    @property
    def is_valid(self) -> bool:
        """Both sides positive and a finite area. -25 × -38 is not a sheet."""
        area = self.area_sq_in
        return self.width_in > 0 and self.height_in > 0 and math.isfinite(area) and area > 0


class PresetInfo(BaseModel):
    key: str
    label: str
    width_in: Optional[float] = None
    height_in: Optional[float] = None


class ResolveRequest(MeasurementSet):
    """Body of POST /api/resolve — the six measurements plus the basis size."""
    preset: Optional[str] = None
    width_in: Optional[float] = Field(default=None, validation_alias=AliasChoices("width_in", "widthIn"))
    height_in: Optional[float] = Field(default=None, validation_alias=AliasChoices("height_in", "heightIn"))

    @field_validator("width_in", "height_in", mode="before")
    @classmethod
    def _lenient_dimension(cls, value):
        return parse_number(value)

    def measurements(self) -> MeasurementSet:
        return MeasurementSet(**self.as_dict())


class DisplayResult(BaseModel):
    """Rounded values for the results panel. None renders as a dash."""
    basis_weight: Optional[float] = None
    thickness_micron: Optional[float] = None
    thickness_mm: Optional[float] = None
    thickness_tiao: Optional[float] = None
    bulk: Optional[float] = None
    pound_weight: Optional[float] = None
    density: Optional[float] = None
    reference_area_sq_in: Optional[float] = None


class FieldConflict(BaseModel):
    name: str
    supplied: float
    implied: float


class ResolveResponse(BaseModel):
    measurements: MeasurementSet
    reference: ReferenceSize
    reference_area_sq_in: float
    display: DisplayResult
    conflicts: List[FieldConflict] = []
