"""dexa-convert: DEXA scanner export conversion to JSON and CSV."""

from .dataio.readers import read_export
from .domain.modality import Modality, detect_modality
from .parsing.driver import ParseResult, parse_bytes

__version__ = "0.1.0"

__all__ = ["read_export", "Modality", "detect_modality", "ParseResult", "parse_bytes"]
