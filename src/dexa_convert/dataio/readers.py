from pathlib import Path

from dexa_convert.dataio.decoder import decode_stream
from dexa_convert.domain.modality import Modality
from dexa_convert.output.json_writer import load_records
from dexa_convert.parsing.driver import ParseResult, parse_file, sniff_modality


def read_export(file_path: str | Path) -> ParseResult:
    with open(file_path, "rb") as f:
        return parse_file(f)


def read_json_records(file_path: str | Path, modality: Modality) -> ParseResult:
    with open(file_path, encoding="utf-8") as f:
        return load_records(f.read(), modality)


def read_export_modality(file_path: str | Path) -> Modality:
    with open(file_path, "rb") as f:
        return sniff_modality(decode_stream(f).split("\n"))
