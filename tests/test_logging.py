"""Tests for XmlTradeLog and log entry formatting."""

import logging
from unittest.mock import MagicMock

import pytest
import structlog

from trade_processor.logging import INFO, WARN, XmlTradeLog, format_log_entry, setup_logging


class TestFormatLogEntry:
    """XML-like entry rendering."""

    def test_plain_entry(self) -> None:
        assert (
            format_log_entry("INFO", "4 trades processed")
            == "<log><type>INFO</type><message>4 trades processed</message></log>"
        )

    def test_markup_escaped(self) -> None:
        entry = format_log_entry("WARN", "Trade currencies on line 1 malformed: '<b>&'")
        assert entry == (
            "<log><type>WARN</type>"
            "<message>Trade currencies on line 1 malformed: '&lt;b&gt;&amp;'</message></log>"
        )


class TestXmlTradeLog:
    """Console and file sinks."""

    @pytest.fixture
    def console(self) -> MagicMock:
        return MagicMock()

    def test_appends_formatted_entries(self, tmp_path, console: MagicMock) -> None:
        log_file = tmp_path / "logs" / "log.xml"
        log = XmlTradeLog(str(log_file), console=console)

        log.log(INFO, "Connecting to Database")
        log.log(INFO, "{0} trades processed", 4)

        assert log_file.read_text(encoding="utf-8").splitlines() == [
            "<log><type>INFO</type><message>Connecting to Database</message></log>",
            "<log><type>INFO</type><message>4 trades processed</message></log>",
        ]

    def test_existing_file_is_appended(self, tmp_path, console: MagicMock) -> None:
        log_file = tmp_path / "log.xml"
        log_file.write_text("<log><type>INFO</type><message>old</message></log>\n")

        XmlTradeLog(str(log_file), console=console).log(INFO, "new")

        assert len(log_file.read_text().splitlines()) == 2

    def test_console_level_follows_tag(self, tmp_path, console: MagicMock) -> None:
        log = XmlTradeLog(str(tmp_path / "log.xml"), console=console)

        log.log(INFO, "{0} trades processed", 2)
        log.log(WARN, "Line {0} malformed. Only {1} field(s) found.", 3, 1)
        log.log("ERROR", "boom")
        log.log("DEBUG", "other")

        console.info.assert_any_call("2 trades processed", tag=INFO)
        console.warning.assert_called_once_with("Line 3 malformed. Only 1 field(s) found.", tag=WARN)
        console.error.assert_called_once_with("boom", tag="ERROR")
        console.info.assert_any_call("other", tag="DEBUG")

    def test_default_console_logger(self, tmp_path) -> None:
        log = XmlTradeLog(str(tmp_path / "log.xml"))
        log.log(INFO, "hello")
        assert log.file_path == str(tmp_path / "log.xml")


class TestSetupLogging:
    """structlog / stdlib bridge configuration."""

    def test_root_logger_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_FORMAT", "json")
        setup_logging("debug")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("verbose")
        assert logging.getLogger().level == logging.INFO
