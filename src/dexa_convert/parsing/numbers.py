import math
import re
from typing import Iterable

# Optional sign, digits with comma group separators, optional decimal part.
# Matches "123", "-45.67", "1,234.56", "+0.123".
NUMERIC_TOKEN = re.compile(r"[-+]?\d[\d,]*\.?\d*", re.ASCII)


def extract_field_numbers(text: str) -> list[float]:
    values = []
    for token in NUMERIC_TOKEN.findall(text):
        token = token.replace(",", "")
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            continue
        # digit runs past the float range overflow to inf
        if math.isinf(value):
            continue
        values.append(value)
    return values


def extract_numbers(fields: Iterable[str]) -> list[float]:
    """Collect numeric tokens from each field in turn, keeping field order."""
    values = []
    for field in fields:
        values.extend(extract_field_numbers(field))
    return values
