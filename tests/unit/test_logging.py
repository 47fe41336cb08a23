"""Testes para logging estruturado e correlation_id."""

from __future__ import annotations

import json
import logging

import pytest

from ong_lifecycle.observability.context import correlation_scope, get_correlation_id
from ong_lifecycle.observability.logging import (
    PACKAGE_LOGGER,
    LifecycleContextFilter,
    configure_logging,
    get_logger,
)


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestCorrelationScope:
    def test_scope_sets_and_resets(self) -> None:
        assert get_correlation_id() == ""
        with correlation_scope("req-1") as cid:
            assert cid == "req-1"
            assert get_correlation_id() == "req-1"
        assert get_correlation_id() == ""

    def test_scope_generates_id(self) -> None:
        with correlation_scope() as cid:
            assert cid
            assert get_correlation_id() == cid


class TestLifecycleContextFilter:
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "evt", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_injects_service_and_context_id(self) -> None:
        record = self._record()
        with correlation_scope("abc"):
            LifecycleContextFilter("svc").filter(record)
        assert record.correlation_id == "abc"
        assert record.service == "svc"

    def test_explicit_correlation_id_preserved(self) -> None:
        record = self._record(correlation_id="explicit")
        with correlation_scope("ctx"):
            LifecycleContextFilter("svc").filter(record)
        assert record.correlation_id == "explicit"


class TestConfigureLogging:
    def test_json_output(self, restore_root_logger, capsys) -> None:
        configure_logging("INFO", "ong_lifecycle")
        with correlation_scope("req-9"):
            logger = logging.getLogger("ong_lifecycle.test")
            logger.info("state_transition", extra={"to_state": "x"})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["message"] == "state_transition"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "ong_lifecycle.test"
        assert payload["correlation_id"] == "req-9"
        assert payload["service"] == "ong_lifecycle"
        assert payload["to_state"] == "x"

    def test_text_output(self, restore_root_logger, capsys) -> None:
        configure_logging("INFO", "ong_lifecycle", log_format="text")
        logging.getLogger("ong_lifecycle.test").info("hello")
        assert "hello" in capsys.readouterr().err


class TestGetLogger:
    def test_package_logger_gets_single_null_handler(self) -> None:
        get_logger("ong_lifecycle.domain.fsm.machine")
        get_logger("ong_lifecycle.domain.payment.machine")
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        nulls = [h for h in package_logger.handlers if isinstance(h, logging.NullHandler)]
        assert len(nulls) == 1

    def test_returns_named_logger(self) -> None:
        logger = get_logger("ong_lifecycle.domain.user")
        assert logger is logging.getLogger("ong_lifecycle.domain.user")
