"""
File-level driver: decode, detect the modality, parse every row.

A file is converted all-or-nothing. The first non-blank line is the header
and fixes the modality for every row after it. Rows the line parser skips
are counted but otherwise ignored; any fatal row error discards everything
accumulated so far.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterable

from dexa_convert.common.errors import EmptyFileError, RowParseError, UnknownModalityError
from dexa_convert.dataio.decoder import decode_export
from dexa_convert.domain.modality import Modality, detect_modality
from dexa_convert.models.records import ScanRecord, record_type_for
from dexa_convert.parsing.lines import parse_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Detected modality plus the records parsed under it, in file order."""

    modality: Modality
    records: tuple[ScanRecord, ...]
    skipped: int = 0

    @property
    def record_type(self) -> type:
        return record_type_for(self.modality)


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """
    Parse decoded export lines.

    Args:
        lines: Decoded lines in file order, line terminators removed

    Returns:
        ParseResult holding the modality and its records

    Raises:
        EmptyFileError: If no line has content
        UnknownModalityError: If the header matches no known layout
        RowParseError: If a row is fatally malformed; carries its line number
    """
    modality = None
    records = []
    skipped = 0

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        if modality is None:
            modality = detect_modality(line)
            if modality is Modality.UNKNOWN:
                raise UnknownModalityError(f"unrecognized file type, header on line {line_number}: {line[:80]!r}")
            logger.debug(f"Detected {modality.value} header on line {line_number}")
            continue

        try:
            record = parse_line(modality, line, line_number)
        except RowParseError:
            logger.debug(f"Aborting parse at line {line_number}, {len(records)} row(s) discarded")
            raise

        if record is None:
            skipped += 1
            logger.debug(f"Skipping line {line_number}")
            continue
        records.append(record)

    if modality is None:
        raise EmptyFileError("empty file")

    logger.info(f"Parsed {len(records)} {modality.value} record(s), skipped {skipped} line(s)")
    return ParseResult(modality=modality, records=tuple(records), skipped=skipped)


def sniff_modality(lines: Iterable[str]) -> Modality:
    """Detect the modality from the first non-blank line without parsing rows."""
    for raw in lines:
        line = raw.strip()
        if line:
            return detect_modality(line)
    raise EmptyFileError("empty file")


def parse_text(text: str) -> ParseResult:
    return parse_lines(text.split("\n"))


def parse_bytes(data: bytes) -> ParseResult:
    return parse_text(decode_export(data))


def parse_file(stream: BinaryIO) -> ParseResult:
    """Parse a binary export stream read to the end."""
    return parse_bytes(stream.read())
