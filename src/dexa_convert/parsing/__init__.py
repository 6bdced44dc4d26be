from .driver import ParseResult, parse_bytes, parse_file, parse_lines, parse_text
from .lines import parse_line
from .measurements import group_measurements
from .numbers import extract_numbers

__all__ = [
    "ParseResult",
    "parse_bytes",
    "parse_file",
    "parse_lines",
    "parse_text",
    "parse_line",
    "group_measurements",
    "extract_numbers",
]
