"""
Decoder for the tagged binary database format.

A database is a flat run of records with no outer framing. Every record is a
5-byte header (u8 type tag, i32 LE identifier) followed by a payload whose
layout depends on the tag:

    0  bool     1 byte, nonzero is true
    1  int8     1 byte
    2  uint8    1 byte
    3  int32    4 bytes LE
    4  uint32   4 bytes LE
    5  float32  4 bytes LE IEEE-754
    6  string   bytes up to a NUL terminator
    7  list     u16 LE count, then count x u32 LE
    8  modify   insert section (u16 count, count x (u32 id, NUL string)),
                then remove section (u16 count, count x u32)

The whole buffer must be consumed by complete records.
"""
from __future__ import annotations

import base64
import binascii
import logging
from typing import Iterator, Optional

from bindb.config import DecoderSettings, get_settings
from bindb.core.binary import BytesLike, Cursor
from bindb.core.errors import DecodeError, InvalidValue, TrailingBytes, UnknownTypeTag
from bindb.logging import hex_preview
from bindb.parsing.database.model import (
    DecodedDatabase,
    DecodedValue,
    ModificationRecord,
    RecordHeader,
    Value,
    ValueKind,
)

logger = logging.getLogger(__name__)

HEADER_SIZE = 5


def read_header(cursor: Cursor) -> RecordHeader:
    """
    Read the 5-byte record header at the cursor.

    Raises:
        TruncatedInput: Fewer than 5 bytes remain.
        UnknownTypeTag: The tag byte is not one of the known kinds.
    """
    start = cursor.offset
    cursor.require(HEADER_SIZE, "record header")
    tag = cursor.u8("record tag")
    record_id = cursor.i32("record id")
    try:
        kind = ValueKind(tag)
    except ValueError:
        raise UnknownTypeTag(tag, start) from None
    return RecordHeader(kind=kind, record_id=record_id)


def _decode_text(raw: bytes, cursor: Cursor, settings: DecoderSettings) -> str:
    try:
        return raw.decode(settings.text_encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise InvalidValue(f"Cannot decode text as {settings.text_encoding}: {exc}", cursor.offset) from exc


def _read_bool(cursor: Cursor, settings: DecoderSettings) -> bool:
    offset = cursor.offset
    byte = cursor.u8("bool")
    if settings.strict_booleans and byte not in (0, 1):
        raise InvalidValue(f"Boolean byte must be 0 or 1, got {byte}", offset)
    return byte != 0


def read_string(cursor: Cursor, settings: DecoderSettings) -> str:
    return _decode_text(cursor.cstring(), cursor, settings)


def read_uint_list(cursor: Cursor) -> list[int]:
    """Counted array: u16 LE count followed by that many u32 LE values."""
    count = cursor.u16("list count")
    cursor.require(4 * count, "list body")
    return [cursor.u32("list item") for _ in range(count)]


def read_modification(cursor: Cursor, settings: DecoderSettings) -> ModificationRecord:
    # Insert pairs are (id, text) on the wire and stored as text -> id.
    insert: dict[str, str] = {}
    count = cursor.u16("insert count")
    for _ in range(count):
        key = cursor.u32("insert key")
        text = _decode_text(cursor.cstring("insert text"), cursor, settings)
        insert[text] = str(key)

    remove = [str(item) for item in read_uint_list(cursor)]
    return ModificationRecord(insert=insert, remove=remove)


def read_value(kind: ValueKind, cursor: Cursor, settings: DecoderSettings) -> Value:
    """Decode one payload of the given kind, advancing the cursor past it."""
    match kind:
        case ValueKind.BOOL:
            return _read_bool(cursor, settings)
        case ValueKind.INT8:
            return cursor.i8("int8")
        case ValueKind.UINT8:
            return cursor.u8("uint8")
        case ValueKind.INT32:
            return cursor.i32("int32")
        case ValueKind.UINT32:
            return cursor.u32("uint32")
        case ValueKind.FLOAT32:
            return cursor.f32("float32")
        case ValueKind.STRING:
            return read_string(cursor, settings)
        case ValueKind.LIST:
            return read_uint_list(cursor)
        case ValueKind.MODIFICATION:
            return read_modification(cursor, settings)
        case _:
            raise UnknownTypeTag(int(kind), cursor.offset)


def iter_records(
    data: BytesLike,
    settings: Optional[DecoderSettings] = None,
) -> Iterator[tuple[str, DecodedValue]]:
    """
    Yield ``(record_id, value)`` pairs in buffer order, duplicates included.

    Raises:
        DecodeError: On the first malformed record. Pairs yielded before the
            failure have already been handed out; use
            ``parse_binary_database`` for all-or-nothing decoding.
    """
    if settings is None:
        settings = get_settings()
    cursor = Cursor(data)
    while not cursor.at_end():
        remaining = cursor.remaining()
        if remaining < HEADER_SIZE:
            raise TrailingBytes(remaining, cursor.offset)
        start = cursor.offset
        header = read_header(cursor)
        value = read_value(header.kind, cursor, settings)
        logger.debug(
            "record decoded",
            extra={"details": {"id": header.record_id, "kind": header.kind.name, "offset": start, "size": cursor.offset - start}},
        )
        yield header.key, DecodedValue(kind=header.kind, value=value)


def parse_binary_database(data: BytesLike, settings: Optional[DecoderSettings] = None) -> DecodedDatabase:
    """
    Decode a complete binary database buffer.

    Args:
        data: The raw buffer. It must hold whole records and nothing else.
        settings: Decoder options; defaults to ``get_settings()``.

    Returns:
        A ``DecodedDatabase`` keyed by the decimal string of each record id.

    Raises:
        DecodeError: Any malformed record aborts the decode. No partial
            result is returned.
    """
    raw = bytes(data)
    entries: dict[str, DecodedValue] = {}
    try:
        for key, value in iter_records(raw, settings):
            if key in entries:
                logger.info("duplicate record id overwritten", extra={"details": {"id": key}})
            entries[key] = value
    except DecodeError as exc:
        logger.warning(
            "binary database decode failed: %s",
            exc,
            extra={"details": {"error": type(exc).__name__, "offset": exc.offset, "head": hex_preview(raw)}},
        )
        raise
    return DecodedDatabase(entries=entries, size=len(raw))


def parse_binary_database_b64(b64_str: str, settings: Optional[DecoderSettings] = None) -> DecodedDatabase:
    """Decode a base64-wrapped binary database."""
    cleaned = "".join(b64_str.split())
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Failed to decode database base64: {exc}") from exc
    return parse_binary_database(raw, settings)
