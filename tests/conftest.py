import codecs

import pytest

IDENTIFIER_HEADER = ["Last Name", "First Name", "Patient ID", "Measure Date"]

BODY_COMPOSITION_HEADER = "\t".join(
    IDENTIFIER_HEADER
    + [f"Arms Fat Mass {s}" for s in ("Total", "Left", "Right", "Delta")]
    + [f"Arms Region %Fat {s}" for s in ("Total", "Left", "Right", "Delta")]
)
TOTAL_BODY_HEADER = "\t".join(IDENTIFIER_HEADER + ["Head BMD", "Arms BMD", "Legs BMD"])
CORE_SCAN_HEADER = "\t".join(IDENTIFIER_HEADER + ["VAT Mass (lbs)", "VAT Volume (in3)"])


def encode_export(lines, newline="\r\n"):
    return codecs.BOM_UTF16_LE + newline.join(lines).encode("utf-16-le")


def row(*cells):
    return "\t".join(str(c) for c in cells)


@pytest.fixture
def make_export():
    return encode_export


@pytest.fixture
def export_file(tmp_path):
    def _write(lines, name="scan.txt"):
        path = tmp_path / name
        path.write_bytes(encode_export(lines))
        return path

    return _write


@pytest.fixture
def body_composition_lines():
    return [
        BODY_COMPOSITION_HEADER,
        row("Doe", "Jane", "1001", "01/02/2024", "1,234.5", "600.0", "634.5", "-34.5", "25.1", "24.9", "25.3", "-0.4"),
        "",
        row("Roe", "Rick", "1002", "03/04/2024", "10", "11", "12", "13", "14", "15", "16", "17",
            "20", "21", "22", "23", "24", "25", "26", "27"),
    ]


@pytest.fixture
def core_scan_lines():
    return [
        CORE_SCAN_HEADER,
        row("Doe", "Jane", "1001", "01/02/2024", "1.25 lbs", "40.5"),
        row("Roe", "Rick", "1002", "03/04/2024", "2.5", "81", "99"),
    ]


@pytest.fixture
def total_body_lines():
    return [
        TOTAL_BODY_HEADER,
        row("Doe", "Jane", "1001", "01/02/2024", "2.1", "0.9", "1.2"),
        row("Roe", "Rick", "1002", "03/04/2024", "2.0", "0.8", "1.1", "1.0", "1.3"),
    ]
