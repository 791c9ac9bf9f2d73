from bindb.config import DecoderSettings, get_settings
from bindb.core.errors import DecodeError, InvalidValue, TrailingBytes, TruncatedInput, UnknownTypeTag
from bindb.parsing.database import (
    DecodedDatabase,
    DecodedValue,
    ModificationRecord,
    ValueKind,
    iter_records,
    parse_binary_database,
    parse_binary_database_b64,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "DecodedDatabase",
    "DecodedValue",
    "DecodeError",
    "DecoderSettings",
    "InvalidValue",
    "ModificationRecord",
    "TrailingBytes",
    "TruncatedInput",
    "UnknownTypeTag",
    "ValueKind",
    "get_settings",
    "iter_records",
    "parse_binary_database",
    "parse_binary_database_b64",
]

try:
    __version__ = version("bindb")
except PackageNotFoundError:
    __version__ = "0.0.0"
