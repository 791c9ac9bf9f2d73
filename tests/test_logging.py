"""Tests for the ring buffer log handler and decoder log events."""
import logging
import struct

import pytest

from bindb.config import DecoderSettings
from bindb.core.errors import UnknownTypeTag
from bindb.logging import RingBufferHandler, create_logger, find_ring_buffer, hex_preview
from bindb.parsing.database import parse_binary_database


@pytest.fixture
def ring():
    logger = create_logger("bindb", ring_size=50, level=logging.DEBUG)
    handler = find_ring_buffer(logger)
    handler.clear()
    yield handler
    handler.clear()
    logger.setLevel(logging.WARNING)


def test_ring_buffer_keeps_latest_entries():
    handler = RingBufferHandler(max_entries=2)
    logger = logging.getLogger("bindb.test.ring")
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.INFO)
    try:
        for i in range(3):
            logger.info("event %d", i, extra={"details": {"i": i}})
    finally:
        logger.removeHandler(handler)
    events = handler.get_events()
    assert [e["event"] for e in events] == ["event 1", "event 2"]
    assert events[-1]["details"] == {"i": 2}
    assert events[-1]["level"] == "INFO"


def test_create_logger_installs_one_handler():
    logger = create_logger("bindb.test.once", ring_size=5)
    create_logger("bindb.test.once", ring_size=5)
    assert sum(isinstance(h, RingBufferHandler) for h in logger.handlers) == 1
    assert logger.propagate is False


def test_decode_logs_each_record(ring):
    data = struct.pack("<Bi", 2, 1) + b"\x01" + struct.pack("<Bi", 2, 2) + b"\x02"
    parse_binary_database(data, DecoderSettings())
    decoded = [e for e in ring.get_events() if e["event"] == "record decoded"]
    assert [e["details"]["id"] for e in decoded] == [1, 2]
    assert decoded[0]["details"]["kind"] == "UINT8"
    assert decoded[1]["details"]["offset"] == 6


def test_decode_failure_logged_as_warning(ring):
    with pytest.raises(UnknownTypeTag):
        parse_binary_database(struct.pack("<Bi", 42, 1), DecoderSettings())
    warnings = [e for e in ring.get_events() if e["level"] == "WARNING"]
    assert len(warnings) == 1
    assert warnings[0]["details"]["error"] == "UnknownTypeTag"


def test_hex_preview():
    assert hex_preview(b"\x01\x02") == "0102"
    assert hex_preview(bytes(20), limit=2) == "0000..."
