"""Unit tests for the diagnostics log."""

import logging

import pytest

from tagparser.diagnostics import DiagLevel, DiagMessage, Diagnostics, diag_level_name, worse_level


class TestDiagLevel:
    def test_names(self):
        assert diag_level_name(DiagLevel.NONE) == ''
        assert diag_level_name(DiagLevel.WARNING) == 'warning'
        assert diag_level_name(DiagLevel.FATAL) == 'fatal'

    def test_worse_level_is_monotonic(self):
        assert worse_level(DiagLevel.WARNING, DiagLevel.DEBUG) == DiagLevel.WARNING
        assert worse_level(DiagLevel.DEBUG, DiagLevel.CRITICAL) == DiagLevel.CRITICAL


class TestDiagMessage:
    def test_equality_ignores_creation_time(self):
        first = DiagMessage(DiagLevel.WARNING, "message", "context")
        second = DiagMessage(DiagLevel.WARNING, "message", "context")
        assert first == second
        assert first.level_name == 'warning'

    def test_format_list(self):
        assert DiagMessage.format_list([]) == ''
        assert DiagMessage.format_list(['a']) == '"a"'
        assert DiagMessage.format_list(['a', 'b', 'c']) == '"a", "b" and "c"'


class TestDiagnostics:
    """Test suite for Diagnostics."""

    def test_empty(self):
        diag = Diagnostics()
        assert diag.level() == DiagLevel.NONE
        assert diag.worst_level() is None
        assert not diag.has(DiagLevel.DEBUG)

    def test_worst_level(self):
        diag = Diagnostics()
        diag.add(DiagLevel.INFORMATION, "first", "test")
        diag.add(DiagLevel.CRITICAL, "second", "test")
        diag.add(DiagLevel.WARNING, "third", "test")
        assert diag.worst_level() == DiagLevel.CRITICAL
        assert diag.has(DiagLevel.WARNING)
        assert not diag.has(DiagLevel.FATAL)
        assert [msg.message for msg in diag] == ['first', 'second', 'third']

    def test_messages_are_logged(self, caplog):
        """Every added message is forwarded to the logger at the matching level."""
        diag = Diagnostics()
        with caplog.at_level(logging.DEBUG, logger='tagparser.diagnostics'):
            diag.add(DiagLevel.CRITICAL, "broken frame", "parsing ADTS frame")
        assert caplog.records[-1].levelno == logging.ERROR
        assert "broken frame" in caplog.records[-1].getMessage()

    def test_messages_added_in_bulk_are_logged(self, caplog):
        diag = Diagnostics()
        messages = [DiagMessage(DiagLevel.WARNING, "first", "test"), DiagMessage(DiagLevel.DEBUG, "second", "test")]
        with caplog.at_level(logging.DEBUG, logger='tagparser.diagnostics'):
            diag += messages
        assert [msg.message for msg in diag] == ['first', 'second']
        assert [record.levelno for record in caplog.records] == [logging.WARNING, logging.DEBUG]

    def test_append_only(self):
        diag = Diagnostics([DiagMessage(DiagLevel.INFORMATION, "kept", "test")])
        assert len(diag) == 1
        assert diag[0].message == "kept"
        assert not hasattr(diag, 'insert')
        assert not hasattr(diag, 'pop')
        with pytest.raises(TypeError):
            diag[0] = DiagMessage(DiagLevel.FATAL, "replaced", "test")
        with pytest.raises(TypeError):
            del diag[0]
