"""SCORM runtime constants: boolean sentinels, session states, log levels.

Pure data module -- no logic. Safe to import from any scorm_runtime
module without risk of circular dependencies.
"""

from enum import IntEnum

# ── Boolean sentinels (SCORM passes booleans as strings) ──────────────

SCORM_TRUE = "true"
SCORM_FALSE = "false"

# ── Session states ────────────────────────────────────────────────────

STATE_NOT_INITIALIZED = 0
STATE_INITIALIZED = 1
STATE_TERMINATED = 2

# ── Log levels (ordered; higher is more severe) ───────────────────────

LOG_LEVEL_DEBUG = 1
LOG_LEVEL_INFO = 2
LOG_LEVEL_WARNING = 3
LOG_LEVEL_ERROR = 4
LOG_LEVEL_NONE = 5

# ── Error register ────────────────────────────────────────────────────

NO_ERROR_CODE = 0
NO_ERROR_MESSAGE = "No error"


class SessionState(IntEnum):
    NOT_INITIALIZED = STATE_NOT_INITIALIZED
    INITIALIZED = STATE_INITIALIZED
    TERMINATED = STATE_TERMINATED


class LogLevel(IntEnum):
    DEBUG = LOG_LEVEL_DEBUG
    INFO = LOG_LEVEL_INFO
    WARNING = LOG_LEVEL_WARNING
    ERROR = LOG_LEVEL_ERROR
    NONE = LOG_LEVEL_NONE
