from enum import Enum


class Modality(Enum):
    UNKNOWN = "unknown"
    BODY_COMPOSITION = "body_composition"
    TOTAL_BODY = "total_body"
    CORE_SCAN = "core_scan"


# Checked in order; the first signature found in the lower-cased header wins.
HEADER_SIGNATURES = (
    ("arms fat mass", Modality.BODY_COMPOSITION),
    ("head bmd", Modality.TOTAL_BODY),
    ("vat mass", Modality.CORE_SCAN),
)


def detect_modality(header: str) -> Modality:
    """Classify an export by the column names in its header row."""
    h = header.lower()
    for signature, modality in HEADER_SIGNATURES:
        if signature in h:
            return modality
    return Modality.UNKNOWN
