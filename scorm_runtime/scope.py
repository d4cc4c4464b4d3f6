from dataclasses import dataclass, field

from .constants import NO_ERROR_CODE, LogLevel, SessionState
from .listeners import Listener


@dataclass
class ApiScope:
    """Mutable state shared by every component of one API instance."""

    current_state: SessionState = SessionState.NOT_INITIALIZED
    last_error_code: int | str = NO_ERROR_CODE
    api_log_level: int = LogLevel.ERROR
    listener_array: list[Listener] = field(default_factory=list)
