"""Fixed-column diagnostic lines for SCORM calls.

Every SCORM call can be traced as one aligned line::

    SetValue            : cmi.core.lesson_status                          completed

The function name fills a 20-character column and the CMI element runs up
to column 70, so a scrolling console reads like a table.  Lines are handed
to the ``scorm_runtime.api`` logger; the host application decides where
that logger's records end up.
"""

import logging

from .constants import LogLevel
from .scope import ApiScope

API_LOGGER_NAME = "scorm_runtime.api"

FUNCTION_COLUMN_WIDTH = 20
ELEMENT_COLUMN_WIDTH = 70

# DEBUG and NONE have no sink: lines at those levels are built but never emitted.
_LEVEL_SINKS = {
    LogLevel.ERROR: "error",
    LogLevel.WARNING: "warning",
    LogLevel.INFO: "info",
}


def format_message(function_name: str, cmi_element: str | None = None, message: str | None = None) -> str:
    line = str(function_name).ljust(FUNCTION_COLUMN_WIDTH) + ": "
    if cmi_element:
        line = (line + str(cmi_element)).ljust(ELEMENT_COLUMN_WIDTH)
    if message:
        line += str(message)
    return line


class ApiLogger:
    def __init__(self, scope: ApiScope, logger: logging.Logger | None = None):
        self._scope = scope
        self._logger = logger or logging.getLogger(API_LOGGER_NAME)

    def api_log(self, function_name: str, cmi_element: str | None, log_message: str | None, message_level: int) -> None:
        line = format_message(function_name, cmi_element, log_message)

        if message_level < self._scope.api_log_level:
            return
        sink = _LEVEL_SINKS.get(message_level)
        if sink is None:
            return
        getattr(self._logger, sink)(line)
