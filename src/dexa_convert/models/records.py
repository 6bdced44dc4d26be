"""
Typed records produced from DEXA export rows.

Each scan modality has its own record shape. All shapes share the four
identifier columns that lead every export row, and all are immutable once
built by the line parser.
"""

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from dexa_convert.common.errors import UnknownModalityError
from dexa_convert.domain.modality import Modality


class Measurement(BaseModel):
    """A symmetric body-region measurement with left/right comparison."""

    model_config = ConfigDict(frozen=True)

    total: float
    left: float
    right: float
    delta: float = Field(..., description="Left/right asymmetry indicator as exported")


class _ScanRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    modality: ClassVar[Modality] = Modality.UNKNOWN

    id1: str = Field(..., description="Primary subject identifier (last name column)")
    id2: str = Field(..., description="Secondary identifier (first name column)")
    id3: str = Field(..., description="Tertiary identifier (patient ID column)")
    date: str = Field(..., description="Measurement date, kept as exported")


class BodyCompositionRecord(_ScanRecord):
    """Fat mass and fat percentage blocks by body region."""

    modality: ClassVar[Modality] = Modality.BODY_COMPOSITION

    mass: tuple[Measurement, ...] = ()
    percent: tuple[Measurement, ...] = ()

    @model_serializer(mode="wrap")
    def _omit_empty_blocks(self, handler):
        data = handler(self)
        for key in ("mass", "percent"):
            if not data.get(key):
                data.pop(key, None)
        return data


class TotalBodyRecord(_ScanRecord):
    """Bone density and composition values in export column order."""

    modality: ClassVar[Modality] = Modality.TOTAL_BODY

    values: tuple[float, ...] = ()


class CoreScanRecord(_ScanRecord):
    """Visceral adipose tissue (VAT) mass and volume."""

    modality: ClassVar[Modality] = Modality.CORE_SCAN

    mass: float = Field(..., alias="vat_mass_lbs", description="VAT mass in pounds")
    volume: float = Field(..., alias="vat_volume_in3", description="VAT volume in cubic inches")


ScanRecord = Union[BodyCompositionRecord, TotalBodyRecord, CoreScanRecord]

RECORD_TYPES: dict[Modality, type] = {
    Modality.BODY_COMPOSITION: BodyCompositionRecord,
    Modality.TOTAL_BODY: TotalBodyRecord,
    Modality.CORE_SCAN: CoreScanRecord,
}


def record_type_for(modality: Modality) -> type:
    try:
        return RECORD_TYPES[modality]
    except KeyError:
        raise UnknownModalityError(f"no record layout for modality {modality.value!r}") from None
