# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import json
import logging
import sys

import pytest
import structlog


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestJsonFormatter:
    def _format(self, record):
        from bigtable_rows.log import json_formatter

        return json.loads(json_formatter().format(record))

    def test_format(self):
        record = logging.LogRecord(
            name="bigtable_rows.server",
            level=logging.ERROR,
            pathname="/app/bigtable_rows/server.py",
            lineno=42,
            msg="failed to read rows: %s",
            args=("boom",),
            exc_info=None,
        )
        payload = self._format(record)
        assert payload["level"] == "error"
        assert payload["target"] == "bigtable_rows.server"
        assert payload["filename"] == "server.py"
        assert payload["line_number"] == 42
        assert payload["message"] == "failed to read rows: boom"
        assert payload["timestamp"].endswith("Z")
        assert "exception" not in payload
        assert "event" not in payload
        assert "logger" not in payload
        assert "_record" not in payload

    def test_format_exception(self):
        try:
            raise RuntimeError("bad")
        except RuntimeError:
            exc_info = sys.exc_info()
        record = logging.LogRecord("x", logging.ERROR, "x.py", 1, "oops", (), exc_info)
        payload = self._format(record)
        assert payload["message"] == "oops"
        assert "RuntimeError: bad" in payload["exception"]

    def test_handler_output(self, root_logger, capsys):
        from bigtable_rows.log import configure_logging

        configure_logging("info")
        logging.getLogger("bigtable_rows.client").info("hello %s", "world")
        lines = capsys.readouterr().err.strip().splitlines()
        payload = json.loads(lines[-1])
        assert payload["message"] == "hello world"
        assert payload["target"] == "bigtable_rows.client"
        assert payload["filename"] == "test_log.py"


class TestConfigureLogging:
    @pytest.mark.parametrize(
        "level,expected",
        [
            (None, logging.INFO),
            ("", logging.INFO),
            ("info", logging.INFO),
            ("DEBUG", logging.DEBUG),
            (" warning ", logging.WARNING),
            ("error", logging.ERROR),
            ("not-a-level", logging.INFO),
        ],
    )
    def test_parse_level(self, level, expected):
        from bigtable_rows.log import parse_level

        assert parse_level(level) == expected

    def test_configure_logging(self, root_logger):
        from bigtable_rows.log import configure_logging

        handler = configure_logging("debug")
        assert root_logger.handlers == [handler]
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        assert root_logger.level == logging.DEBUG
