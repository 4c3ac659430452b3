"""日志配置测试"""

from __future__ import annotations

import json
import logging
import sys

from gitvendor.core.exceptions import VcsError
from gitvendor.utils.logger import JSONFormatter, reset_logging, setup_logging


class TestSetupLogging:
    def test_single_handler_and_namespace_level(self) -> None:
        try:
            setup_logging("DEBUG")
            setup_logging("DEBUG")
            root = logging.getLogger()
            assert len(root.handlers) == 1
            assert root.level == logging.WARNING
            assert logging.getLogger("gitvendor").level == logging.DEBUG
            assert logging.getLogger("gitvendor.core.vcs").isEnabledFor(logging.DEBUG)
            assert not logging.getLogger("urllib3").isEnabledFor(logging.INFO)
        finally:
            reset_logging()

    def test_reset_restores_namespace(self) -> None:
        setup_logging("ERROR")
        reset_logging()
        assert logging.getLogger("gitvendor").level == logging.NOTSET

    def test_json_output(self) -> None:
        try:
            setup_logging("INFO", json_output=True)
            assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)
        finally:
            reset_logging()


class TestJSONFormatter:
    def test_fields(self) -> None:
        record = logging.LogRecord(
            "gitvendor.core.vcs", logging.INFO, __file__, 10,
            "Adding %s", ("https://github.com/a/b",), None,
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["message"] == "Adding https://github.com/a/b"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "gitvendor.core.vcs"
        assert "exception" not in entry

    def test_error_code_from_exception(self) -> None:
        try:
            raise VcsError("git remote -v 失败 (rc=128)")
        except VcsError:
            exc_info = sys.exc_info()
        record = logging.LogRecord(
            "gitvendor.cli", logging.ERROR, __file__, 1, "aborted", (), exc_info,
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["code"] == "VCS_ERROR"
        assert "VcsError" in entry["exception"]
