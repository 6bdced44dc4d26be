"""
Rectangular CSV output for parsed DEXA exports.

Body composition rows carry a varying number of measurement blocks, so the
table is built in two passes: the first finds the widest mass and percent
runs across the whole file, the second lays every record out against those
widths and pads the gaps with empty cells. Every row ends up with the same
number of cells, even a row without any measurements.
"""

from typing import Sequence, TextIO

import numpy as np
import pandas as pd

from dexa_convert.common.errors import UnknownModalityError
from dexa_convert.domain.labels import (
    CORE_SCAN_COLUMNS,
    IDENTIFIER_COLUMNS,
    MEASUREMENT_SUFFIXES,
    mass_label,
    measurement_columns,
    percent_label,
    total_body_label,
)
from dexa_convert.domain.modality import Modality
from dexa_convert.models.records import Measurement
from dexa_convert.parsing.driver import ParseResult

PAD = np.nan


def _identifiers(record) -> list:
    return [record.id1, record.id2, record.id3, record.date]


def _block_cells(blocks: Sequence[Measurement], width: int) -> list:
    cells = []
    for m in blocks:
        cells.extend([m.total, m.left, m.right, m.delta])
    cells.extend([PAD] * (len(MEASUREMENT_SUFFIXES) * (width - len(blocks))))
    return cells


def _body_composition_frame(records) -> pd.DataFrame:
    max_mass = max((len(r.mass) for r in records), default=0)
    max_percent = max((len(r.percent) for r in records), default=0)

    columns = list(IDENTIFIER_COLUMNS)
    for i in range(max_mass):
        columns.extend(measurement_columns(mass_label(i)))
    for i in range(max_percent):
        columns.extend(measurement_columns(percent_label(i)))

    rows = [
        _identifiers(r) + _block_cells(r.mass, max_mass) + _block_cells(r.percent, max_percent)
        for r in records
    ]
    return pd.DataFrame(rows, columns=columns)


def _total_body_frame(records) -> pd.DataFrame:
    width = max((len(r.values) for r in records), default=0)
    columns = list(IDENTIFIER_COLUMNS) + [total_body_label(i) for i in range(width)]
    rows = [_identifiers(r) + list(r.values) + [PAD] * (width - len(r.values)) for r in records]
    return pd.DataFrame(rows, columns=columns)


def _core_scan_frame(records) -> pd.DataFrame:
    columns = list(IDENTIFIER_COLUMNS) + list(CORE_SCAN_COLUMNS)
    rows = [_identifiers(r) + [r.mass, r.volume] for r in records]
    return pd.DataFrame(rows, columns=columns)


def records_to_frame(result: ParseResult) -> pd.DataFrame:
    """
    Flatten parsed records into a rectangular DataFrame.

    Args:
        result: Output of the file driver

    Returns:
        One row per record; identifier columns first, then the numeric
        columns for the modality. Padding cells are NaN.
    """
    match result.modality:
        case Modality.BODY_COMPOSITION:
            return _body_composition_frame(result.records)
        case Modality.TOTAL_BODY:
            return _total_body_frame(result.records)
        case Modality.CORE_SCAN:
            return _core_scan_frame(result.records)
        case _:
            raise UnknownModalityError(f"no table layout for modality {result.modality.value!r}")


def write_csv(result: ParseResult, sink: TextIO, float_format: str = "%f") -> None:
    frame = records_to_frame(result)
    frame.to_csv(sink, index=False, float_format=float_format, na_rep="", lineterminator="\n")
