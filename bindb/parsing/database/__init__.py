"""
Decoder for the tagged binary database format.

Each record carries a type tag, a signed 32-bit identifier and a typed
payload. Decoding yields a ``DecodedDatabase`` keyed by the identifier's
decimal string.
"""
from bindb.parsing.database.decode import (
    HEADER_SIZE,
    iter_records,
    parse_binary_database,
    parse_binary_database_b64,
    read_header,
    read_value,
)
from bindb.parsing.database.model import (
    DecodedDatabase,
    DecodedValue,
    ModificationRecord,
    RecordHeader,
    ValueKind,
)

__all__ = [
    "HEADER_SIZE",
    "DecodedDatabase",
    "DecodedValue",
    "ModificationRecord",
    "RecordHeader",
    "ValueKind",
    "iter_records",
    "parse_binary_database",
    "parse_binary_database_b64",
    "read_header",
    "read_value",
]
