"""Unit tests for observability.logger — structlog + stdlib wiring."""

from __future__ import annotations

import io
import json
import logging

import pytest

from minigit.observability.logger import new_run_id, setup_logging


class _CapturedStderr:
    """StringIO-like view of what the test body wrote to ``sys.stderr``.

    pytest's capture re-installs its own stream on ``sys.stderr`` when the
    test body starts, so the handler created by ``setup_logging`` writes
    there; read it back through ``capsys``.
    """

    def __init__(self, capsys: pytest.CaptureFixture[str]) -> None:
        self._capsys = capsys
        self._buffer = io.StringIO()

    def getvalue(self) -> str:
        self._buffer.write(self._capsys.readouterr().err)
        return self._buffer.getvalue()


@pytest.fixture
def stderr(capsys: pytest.CaptureFixture[str]) -> _CapturedStderr:
    return _CapturedStderr(capsys)


class TestSetupLogging:
    def test_stdlib_records_render_as_json(self, stderr: io.StringIO) -> None:
        setup_logging(level="DEBUG", format="json")
        run_id = new_run_id()

        logging.getLogger("minigit.core.file_io").debug("Created %s", "/r/.git/HEAD")

        record = json.loads(stderr.getvalue())
        assert record["event"] == "Created /r/.git/HEAD"
        assert record["logger"] == "minigit.core.file_io"
        assert record["level"] == "debug"
        assert record["run_id"] == run_id

    def test_level_filters(self, stderr: io.StringIO) -> None:
        setup_logging(level="WARNING", format="json")
        logging.getLogger("minigit.core.initializer").info("quiet")
        assert stderr.getvalue() == ""

    def test_repeated_setup_keeps_one_handler(self, stderr: io.StringIO) -> None:
        setup_logging(level="INFO", format="console")
        setup_logging(level="INFO", format="json")
        package_logger = logging.getLogger("minigit")
        assert len(package_logger.handlers) == 1

        logging.getLogger("minigit.main").info("once")
        lines = stderr.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["event"] == "once"
