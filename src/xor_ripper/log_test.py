import json
import logging

import pytest
import structlog

from xor_ripper.algorithm.key_recovery import break_repeating_key_xor, recover_key
from xor_ripper.algorithm.single_byte import detect_single_byte_xor
from xor_ripper.log import PACKAGE_LOGGER, configure_logging
from xor_ripper.xor import xor_repeating, xor_single_byte


@pytest.fixture(autouse=True)
def reset_logging():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


class TestUnconfiguredLogging:
    """Test suite for library output before logging is configured"""

    def test_break_is_silent(self, capsys):
        """Test the end to end break writes nothing by default"""
        plaintext = b"Cooking up some ciphertext with a short repeating key for the silent run"
        break_repeating_key_xor(xor_repeating(plaintext, b"ICE"))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_detection_is_silent(self, capsys):
        """Test single-byte detection writes nothing by default"""
        detect_single_byte_xor([xor_single_byte(b"Now that the party is jumping", 0x35)])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestConfigureLogging:
    """Test suite for structlog configuration"""

    def test_json_output(self, capsys):
        """Test events render as JSON with level and key/values"""
        configure_logging("INFO", json=True)
        structlog.get_logger().info("hello", answer=42)
        event = json.loads(capsys.readouterr().out)
        assert event["event"] == "hello"
        assert event["answer"] == 42
        assert event["level"] == "info"

    def test_level_filtering(self, capsys):
        """Test events below the configured level are dropped"""
        configure_logging("WARNING")
        structlog.get_logger().info("quiet")
        assert capsys.readouterr().out == ""

    def test_library_events(self, capsys):
        """Test the key recoverer reports the recovered key once configured"""
        configure_logging("INFO", json=True)
        recover_key(b"\x00", 1)
        event = json.loads(capsys.readouterr().out)
        assert event["event"] == "key recovered"
        assert event["key_hex"] == "7a"

    def test_library_debug_events(self, capsys):
        """Test per-candidate debug events appear at DEBUG"""
        configure_logging("DEBUG")
        recover_key(b"\x00", 1)
        out = capsys.readouterr().out
        assert "key byte recovered" in out
        assert "key recovered" in out

    def test_unknown_level(self):
        """Test unknown level names are rejected"""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")
