"""Last-error register for a SCORM API instance.

SCORM errors are state, not exceptions: ``throw_scorm_error`` logs the
condition and records the code so the content can read it back through
GetLastError.  Nothing here raises.
"""

from typing import Any, Callable, Protocol

from .constants import LOG_LEVEL_ERROR, NO_ERROR_CODE, NO_ERROR_MESSAGE, SCORM_FALSE
from .scope import ApiScope


class ErrorMessageResolver(Protocol):
    def resolve_error_message(self, error_code: Any, detail: str | None = None) -> str:
        ...


class NoErrorResolver:
    """Fallback resolver; concrete SCORM versions supply a real code table."""

    def resolve_error_message(self, error_code: Any, detail: str | None = None) -> str:
        return NO_ERROR_MESSAGE


ApiLogFunc = Callable[[str, str | None, str | None, int], None]


class ErrorRegister:
    """Records the last SCORM error.

    ``api_log`` is normally the owning API's bound ``api_log``; error lines
    go wherever that method sends them.
    """

    def __init__(self, scope: ApiScope, api_log: ApiLogFunc, resolver: ErrorMessageResolver | None = None):
        self._scope = scope
        self._api_log = api_log
        self.resolver = resolver if resolver is not None else NoErrorResolver()

    @property
    def last_error_code(self) -> int | str:
        return self._scope.last_error_code

    def throw_scorm_error(self, error_code: Any, message: str | None = None) -> None:
        if not message:
            message = self.resolver.resolve_error_message(error_code)

        self._api_log("throwSCORMError", None, f"{error_code}: {message}", LOG_LEVEL_ERROR)

        self._scope.last_error_code = str(error_code)

    def clear_scorm_error(self, success: Any = None) -> None:
        """Reset the last error unless ``success`` is exactly SCORM_FALSE.

        Anything else, including None and the boolean False, clears.
        """
        if success != SCORM_FALSE:
            self._scope.last_error_code = NO_ERROR_CODE
