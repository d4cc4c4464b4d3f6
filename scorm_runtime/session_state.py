from .constants import SessionState
from .scope import ApiScope


class SessionStateMachine:
    """Read-only view of the session lifecycle.

    Concrete APIs move ``scope.current_state`` forward in their own
    Initialize/Terminate calls; this class only answers questions about it.
    """

    def __init__(self, scope: ApiScope):
        self._scope = scope

    @property
    def state(self) -> SessionState:
        return self._scope.current_state

    def is_initialized(self) -> bool:
        return self._scope.current_state == SessionState.INITIALIZED

    def is_not_initialized(self) -> bool:
        return self._scope.current_state == SessionState.NOT_INITIALIZED

    def is_terminated(self) -> bool:
        return self._scope.current_state == SessionState.TERMINATED
