"""Listener registry: named, optionally element-scoped callbacks.

Content (or the host page) attaches observers with ``on("SetValue.cmi.core.score.raw", cb)``;
concrete APIs call ``process_listeners`` after each SCORM call so the
observers see the function, the CMI element it touched, and the result.
"""

import logging
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

ListenerCallback = Callable[[str | None, Any], Any]


class Listener(BaseModel):
    """A single registration. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    function_name: str
    cmi_element: str | None = None
    callback: ListenerCallback

    def matches(self, function_name: str, cmi_element: str | None) -> bool:
        """No element filter matches every element; otherwise exact equality."""
        if self.function_name != function_name:
            return False
        return not self.cmi_element or self.cmi_element == cmi_element


def parse_listener_string(listener_string: str) -> tuple[str, str | None] | None:
    """Split ``"<FunctionName>[.<CMIElement>]"`` on the first dot.

    Dots after the first belong to the element path verbatim.
    """
    parts = listener_string.split(".")
    if len(parts) == 0:
        return None
    function_name = parts[0]
    cmi_element = None
    if len(parts) > 1:
        cmi_element = listener_string.replace(function_name + ".", "", 1)
    return function_name, cmi_element


class ListenerRegistry:
    def __init__(self, scope):
        # listener_array belongs to the shared ApiScope, not to the registry.
        self._scope = scope

    @property
    def listeners(self) -> list[Listener]:
        return self._scope.listener_array

    def on(self, listener_string: str, callback: ListenerCallback | None) -> None:
        """Register ``callback`` for ``"<FunctionName>[.<CMIElement>]"``.

        A falsy callback is ignored. A truthy callback that is not callable
        is rejected here with ``pydantic.ValidationError`` rather than at
        dispatch time.
        """
        if not callback:
            logger.debug("Ignoring listener %r registered without a callback", listener_string)
            return

        parsed = parse_listener_string(listener_string)
        if parsed is None:
            return
        function_name, cmi_element = parsed

        self._scope.listener_array.append(
            Listener(function_name=function_name, cmi_element=cmi_element, callback=callback)
        )
        logger.debug("Registered listener for %s (element=%s)", function_name, cmi_element)

    def process_listeners(self, function_name: str, cmi_element: str | None = None, value: Any = None) -> None:
        # Callback exceptions are not caught; they reach the SCORM call that fired them.
        for listener in self._scope.listener_array:
            if listener.matches(function_name, cmi_element):
                listener.callback(cmi_element, value)
