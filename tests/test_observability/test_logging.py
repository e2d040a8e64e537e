"""Tests for logging infrastructure."""

import json
import logging
from io import StringIO

import pytest

from enumtypes import Enum, EnumeratedRange, Flags, EnumObjects
from enumtypes.observability import (
    set_domain_label,
    get_domain_label,
    configure_logging,
    get_logger,
    LogContext,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset domain label and package logger around each test."""
    set_domain_label(None)
    yield
    set_domain_label(None)
    package_logger = logging.getLogger("enumtypes")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


class TestDomainLabel:
    """Tests for domain label management."""

    def test_set_and_get(self):
        """Can set and get domain label."""
        set_domain_label("Enum(A, B)")
        assert get_domain_label() == "Enum(A, B)"

    def test_none_when_not_set(self):
        """Returns None when not set."""
        assert get_domain_label() is None

    def test_empty_is_none(self):
        """Empty labels are stored as None."""
        set_domain_label("")
        assert get_domain_label() is None


class TestLogContext:
    """Tests for log context manager."""

    def test_context_sets_label(self):
        """Context manager sets domain label."""
        with LogContext("Flags(A)"):
            assert get_domain_label() == "Flags(A)"

    def test_context_restores_previous(self):
        """Context manager restores previous label."""
        set_domain_label("outer")
        with LogContext("inner"):
            assert get_domain_label() == "inner"
        assert get_domain_label() == "outer"


class TestConfigureLogging:
    """Tests for logging configuration."""

    def test_configures_package_logger(self):
        """Configures enumtypes logger."""
        configure_logging(level=logging.DEBUG)

        logger = get_logger("test")
        assert logger.name == "enumtypes.test"
        assert len(logging.getLogger("enumtypes").handlers) == 1

    def test_json_format(self):
        """JSON format produces valid JSON."""
        stream = StringIO()
        configure_logging(json_format=True, stream=stream)

        logger = get_logger("json_test")
        with LogContext("Enum(X)"):
            logger.info("Test message")

        log_entry = json.loads(stream.getvalue().strip())
        assert log_entry["message"] == "Test message"
        assert log_entry["domain"] == "Enum(X)"
        assert log_entry["logger"] == "enumtypes.json_test"

    def test_readable_format(self):
        """Readable format includes domain label."""
        stream = StringIO()
        configure_logging(json_format=False, stream=stream)

        get_logger("readable_test").info("Test message")

        output = stream.getvalue()
        assert "[-]" in output
        assert "Test message" in output


class TestConstructionLogging:
    """Constructors log at DEBUG under their domain label."""

    def test_silent_at_info(self):
        """Nothing is emitted above DEBUG."""
        stream = StringIO()
        configure_logging(level=logging.INFO, stream=stream)
        Enum("A", "B")
        assert stream.getvalue() == ""

    def test_debug_records(self):
        """Each constructor logs one record labelled with its domain."""
        stream = StringIO()
        configure_logging(level=logging.DEBUG, json_format=True, stream=stream)

        Enum("RED", "GREEN")
        Flags("A", "B")
        EnumeratedRange(1, 3, "Tiny")
        EnumObjects({"DOG": {}})

        domains = [json.loads(line)["domain"] for line in stream.getvalue().splitlines()]
        assert domains == [
            "Enum(RED, GREEN)",
            "Flags(A, B)",
            "EnumeratedRange(1, 3, 'Tiny')",
            "EnumObjects(DOG)",
        ]

    def test_methods_registration_logged(self):
        """Registering shared methods is logged."""
        color = Enum("RED")
        stream = StringIO()
        configure_logging(level=logging.DEBUG, stream=stream)
        color.methods(a=lambda self: 1)
        assert "Registered 1 shared methods" in stream.getvalue()
