"""
UTF-16 decoding for DEXA scanner exports.

The scanner writes its exports as UTF-16 with a leading byte-order mark,
little-endian in practice. The mark is mandatory; a big-endian mark switches
the byte order rather than being rejected. Decoding is all-or-nothing: a
malformed export never yields partial text.
"""

import codecs
from typing import BinaryIO

from dexa_convert.common.errors import DecodeError

BYTE_ORDER_MARKS = (
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def decode_export(data: bytes) -> str:
    """
    Decode raw export bytes into text.

    An empty input decodes to an empty string; rejecting it is left to the
    caller.

    Args:
        data: Complete file contents, byte-order mark included

    Returns:
        The decoded text without the byte-order mark

    Raises:
        DecodeError: If the mark is missing, the length is odd, or the
            bytes contain an invalid code unit sequence
    """
    if not data:
        return ""

    for bom, encoding in BYTE_ORDER_MARKS:
        if data.startswith(bom):
            break
    else:
        raise DecodeError("missing UTF-16 byte-order mark")

    payload = data[len(bom):]
    if len(payload) % 2:
        raise DecodeError(f"odd byte length {len(data)} for UTF-16 content")

    try:
        return payload.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(f"invalid UTF-16 sequence at byte {exc.start + len(bom)}") from exc


def decode_stream(stream: BinaryIO) -> str:
    return decode_export(stream.read())
