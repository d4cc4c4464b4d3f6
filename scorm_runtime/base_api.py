"""Base class for concrete SCORM runtime APIs (SCORM 1.2, SCORM 2004).

``BaseAPI`` owns one ``ApiScope`` and wires the four shared components to
it: session state predicates, the last-error register, the listener
registry and the fixed-column API logger.  Subclasses implement the
version-specific calls (Initialize, GetValue, SetValue, ...) on top of it,
following the same pattern for each call:

1. guard on ``is_initialized()`` / ``is_terminated()``;
2. do the work;
3. ``throw_scorm_error(code)`` on failure or ``clear_scorm_error(SCORM_TRUE)``
   on success;
4. ``api_log(...)`` the outcome;
5. ``process_listeners(function_name, cmi_element, result)``.

Subclasses with a real error table override ``get_lms_error_message_details``
or pass an ``error_resolver``.
"""

import logging
from typing import Any

from .api_logger import ApiLogger
from .config import ApiSettings
from .constants import NO_ERROR_MESSAGE, SessionState
from .error_register import ErrorMessageResolver, ErrorRegister
from .listeners import Listener, ListenerCallback, ListenerRegistry
from .scope import ApiScope
from .session_state import SessionStateMachine

logger = logging.getLogger(__name__)


class BaseAPI:
    def __init__(
        self,
        *,
        settings: ApiSettings | None = None,
        error_resolver: ErrorMessageResolver | None = None,
        api_logger: logging.Logger | None = None,
    ):
        if settings is None:
            settings = ApiSettings.from_env()

        self.scope = ApiScope(api_log_level=settings.api_log_level)
        self.state_machine = SessionStateMachine(self.scope)
        self.log = ApiLogger(self.scope, api_logger)
        self.errors = ErrorRegister(
            self.scope,
            self.api_log,
            resolver=error_resolver if error_resolver is not None else self,
        )
        self.listeners = ListenerRegistry(self.scope)
        logger.debug("%s created (api_log_level=%s)", type(self).__name__, settings.api_log_level.name)

    # ------------------------------------------------------------------
    # Shared state
    # ------------------------------------------------------------------

    @property
    def current_state(self) -> SessionState:
        return self.scope.current_state

    @current_state.setter
    def current_state(self, state: SessionState) -> None:
        self.scope.current_state = SessionState(state)

    @property
    def last_error_code(self) -> int | str:
        return self.scope.last_error_code

    @property
    def api_log_level(self) -> int:
        return self.scope.api_log_level

    @api_log_level.setter
    def api_log_level(self, level: int) -> None:
        self.scope.api_log_level = level

    @property
    def listener_array(self) -> list[Listener]:
        return self.scope.listener_array

    # ------------------------------------------------------------------
    # Session state
    # ------------------------------------------------------------------

    def is_initialized(self) -> bool:
        return self.state_machine.is_initialized()

    def is_not_initialized(self) -> bool:
        return self.state_machine.is_not_initialized()

    def is_terminated(self) -> bool:
        return self.state_machine.is_terminated()

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def throw_scorm_error(self, error_code: Any, message: str | None = None) -> None:
        self.errors.throw_scorm_error(error_code, message)

    def clear_scorm_error(self, success: Any = None) -> None:
        self.errors.clear_scorm_error(success)

    def get_lms_error_message_details(self, error_code: Any, detail: str | None = None) -> str:
        """Return the message for ``error_code``. Override with a real table."""
        return NO_ERROR_MESSAGE

    def resolve_error_message(self, error_code: Any, detail: str | None = None) -> str:
        return self.get_lms_error_message_details(error_code, detail)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def api_log(self, function_name: str, cmi_element: str | None, log_message: str | None, message_level: int) -> None:
        self.log.api_log(function_name, cmi_element, log_message, message_level)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def on(self, listener_string: str, callback: ListenerCallback | None) -> None:
        self.listeners.on(listener_string, callback)

    def process_listeners(self, function_name: str, cmi_element: str | None = None, value: Any = None) -> None:
        self.listeners.process_listeners(function_name, cmi_element, value)
