"""
Row-level parsing for DEXA exports.

Every export row starts with the same four identifier columns (last name,
first name, patient ID, measurement date). The columns after them carry the
modality-specific numeric payload, which is pulled out token by token and
shaped into the record type for the file's modality.
"""

from dexa_convert.common.errors import RowParseError, UnknownModalityError
from dexa_convert.domain.modality import Modality
from dexa_convert.models.records import (
    BodyCompositionRecord,
    CoreScanRecord,
    ScanRecord,
    TotalBodyRecord,
)
from dexa_convert.parsing.measurements import group_measurements
from dexa_convert.parsing.numbers import extract_numbers

FIELD_SEPARATOR = "\t"
IDENTIFIER_FIELDS = 4
CORE_SCAN_MIN_VALUES = 2


def parse_line(modality: Modality, line: str, line_number: int | None = None) -> ScanRecord | None:
    """
    Parse one trimmed data row into a record.

    Args:
        modality: Modality detected from the file header
        line: Decoded row text, surrounding whitespace already removed
        line_number: 1-based position of the row in the file, for error messages

    Returns:
        The parsed record, or None when the row is skipped: fewer than four
        fields, or a body composition row without any numbers

    Raises:
        RowParseError: If a core scan row has fewer than two numbers
        UnknownModalityError: If the modality has no record shape
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < IDENTIFIER_FIELDS:
        return None

    id1, id2, id3, date = (f.strip() for f in fields[:IDENTIFIER_FIELDS])
    nums = extract_numbers(fields[IDENTIFIER_FIELDS:])

    match modality:
        case Modality.BODY_COMPOSITION:
            if not nums:
                return None
            # floor split; an odd trailing value never reaches the percent half
            half = len(nums) // 2
            return BodyCompositionRecord(
                id1=id1,
                id2=id2,
                id3=id3,
                date=date,
                mass=group_measurements(nums[:half]),
                percent=group_measurements(nums[half : 2 * half]),
            )

        case Modality.TOTAL_BODY:
            return TotalBodyRecord(id1=id1, id2=id2, id3=id3, date=date, values=tuple(nums))

        case Modality.CORE_SCAN:
            if len(nums) < CORE_SCAN_MIN_VALUES:
                raise RowParseError(
                    f"core scan row has {len(nums)} numeric field(s), expected VAT mass and volume",
                    line_number,
                )
            return CoreScanRecord(id1=id1, id2=id2, id3=id3, date=date, mass=nums[0], volume=nums[1])

        case _:
            raise UnknownModalityError(f"no record layout for modality {modality.value!r}")
