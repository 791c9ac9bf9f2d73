from bindb.core.binary import Cursor
from bindb.core.errors import DecodeError, InvalidValue, TrailingBytes, TruncatedInput, UnknownTypeTag

__all__ = ["Cursor", "DecodeError", "InvalidValue", "TrailingBytes", "TruncatedInput", "UnknownTypeTag"]
