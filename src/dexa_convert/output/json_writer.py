from typing import TextIO

from pydantic import TypeAdapter

from dexa_convert.domain.modality import Modality
from dexa_convert.models.records import record_type_for
from dexa_convert.parsing.driver import ParseResult


def _records_adapter(modality: Modality) -> TypeAdapter:
    return TypeAdapter(list[record_type_for(modality)])


def dumps_records(result: ParseResult, indent: int | None = 2) -> str:
    """Render the records as a JSON array, one object per record."""
    adapter = _records_adapter(result.modality)
    return adapter.dump_json(list(result.records), indent=indent, by_alias=True).decode("utf-8")


def write_json(result: ParseResult, sink: TextIO, indent: int | None = 2) -> None:
    sink.write(dumps_records(result, indent=indent))
    sink.write("\n")


def load_records(text: str | bytes, modality: Modality) -> ParseResult:
    """Rebuild a ParseResult from JSON written by write_json."""
    records = _records_adapter(modality).validate_json(text)
    return ParseResult(modality=modality, records=tuple(records))
