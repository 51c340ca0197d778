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
#
from __future__ import annotations

import logging

import structlog
from structlog.processors import CallsiteParameter


def _rename_fields(_logger, _method_name, event_dict):
    """Use the field names of the service's log schema"""
    event_dict["target"] = event_dict.pop("logger", None)
    event_dict["line_number"] = event_dict.pop("lineno", None)
    return event_dict


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """
    Formatter rendering each stdlib log record as a single line of JSON

    Records carry ``timestamp``, ``level``, ``target`` (the logger name),
    ``filename``, ``line_number`` and ``message``.
    """
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.CallsiteParameterAdder(
                [CallsiteParameter.FILENAME, CallsiteParameter.LINENO]
            ),
            _rename_fields,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ],
    )


def parse_level(level: str | None) -> int:
    """Map a level name such as "debug" to a logging level. Unknown names give INFO."""
    if not level:
        return logging.INFO
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | None = None) -> logging.Handler:
    """
    Send all log records to stderr as JSON

    Replaces any handlers previously installed on the root logger.

    Args:
      - level: level name, usually the LOG_LEVEL environment variable
    Returns:
      - the installed handler
    """
    handler = logging.StreamHandler()
    handler.setFormatter(json_formatter())
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(parse_level(level))
    return handler
