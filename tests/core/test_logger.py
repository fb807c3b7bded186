"""Tests for context-aware logging."""

import logging
from unittest.mock import MagicMock

import pytest

from wacloudapi.core.logging import (
    ContextLogger,
    clear_request_context,
    get_context_info,
    get_logger,
    mask_token,
    set_request_context,
    setup_logging,
)
from wacloudapi.core.logging.logger import CompactFormatter


@pytest.fixture
def inner():
    return MagicMock(spec=logging.Logger)


class TestContextLogger:
    def test_no_context_no_prefix(self, inner):
        ContextLogger(inner).info("hello")

        inner.info.assert_called_once_with("hello")

    def test_bound_context_prefix(self, inner):
        ContextLogger(inner, tenant_id="PHONE1", user_id="USER1").warning("hello")

        inner.warning.assert_called_once_with("[T:PHONE1][U:USER1] hello")

    def test_request_context_overrides_bound_context(self, inner):
        logger = ContextLogger(inner, tenant_id="PHONE1")
        set_request_context(tenant_id="PHONE2", user_id="USER2")

        logger.error("boom")

        inner.error.assert_called_once_with("[T:PHONE2][U:USER2] boom")

    def test_bind_returns_new_logger(self, inner):
        base = ContextLogger(inner)
        bound = base.bind(user_id="USER9")

        bound.debug("x")
        base.debug("y")

        assert inner.debug.call_args_list[0].args == ("[U:USER9] x",)
        assert inner.debug.call_args_list[1].args == ("y",)

    def test_get_logger_wraps_named_logger(self):
        logger = get_logger("wacloudapi.tests")

        assert isinstance(logger, ContextLogger)
        assert logger.logger.name == "wacloudapi.tests"


class TestRequestContext:
    def test_set_and_clear(self):
        set_request_context(tenant_id="PHONE1", user_id="USER1")
        assert get_context_info() == {"tenant_id": "PHONE1", "user_id": "USER1"}

        clear_request_context()
        assert get_context_info() == {"tenant_id": None, "user_id": None}


class TestMaskToken:
    @pytest.mark.parametrize(
        "token,expected",
        [
            (None, "<unset>"),
            ("", "<unset>"),
            ("short", "***"),
            ("12345678", "***"),
            ("EAABsbCS1iHgBAxyz9876", "EAAB...9876"),
        ],
    )
    def test_mask(self, token, expected):
        assert mask_token(token) == expected


class TestSetupLogging:
    def test_dev_mode_writes_daily_file(self, tmp_path):
        setup_logging(level="debug", mode="DEV", log_dir=str(tmp_path))

        handlers = logging.getLogger().handlers
        assert logging.getLogger().level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in handlers)
        assert list(tmp_path.glob("wacloudapi_*.log"))

        for handler in handlers:
            handler.close()
        setup_logging(level="INFO", mode="PROD")

    def test_prod_mode_console_only(self):
        setup_logging(level="bogus", mode="PROD")

        handlers = logging.getLogger().handlers
        assert logging.getLogger().level == logging.INFO
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)


def test_compact_formatter_shortens_package_names():
    record = logging.LogRecord(
        "wacloudapi.resources.messages", logging.INFO, __file__, 1, "hi", None, None
    )

    CompactFormatter("%(name)s %(message)s").format(record)

    assert record.name == "resources.messages"
