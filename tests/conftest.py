"""Shared fixtures for the SCORM runtime test suite."""

import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so 'scorm_runtime' resolves
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from scorm_runtime.base_api import BaseAPI  # noqa: E402
from scorm_runtime.config import ApiSettings  # noqa: E402
from scorm_runtime.constants import (  # noqa: E402
    LOG_LEVEL_ERROR,
    LOG_LEVEL_INFO,
    LOG_LEVEL_WARNING,
    SCORM_FALSE,
    SCORM_TRUE,
    LogLevel,
    SessionState,
)


# ---------------------------------------------------------------------------
# Minimal concrete API: drives the subclass contract end to end
# ---------------------------------------------------------------------------

class MiniScormAPI(BaseAPI):
    """A tiny SCORM 1.2-flavoured API backed by a dict.

    Only what the tests need: enough to drive state guards, the error
    register, api_log and listener notification the way a real version
    implementation does.
    """

    ERROR_MESSAGES = {
        "101": "General Exception",
        "201": "Invalid argument error",
        "301": "Not initialized",
        "401": "Not implemented error",
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.cmi: dict[str, str] = {}

    def get_lms_error_message_details(self, error_code, detail=None):
        return self.ERROR_MESSAGES.get(str(error_code), "No error")

    def _finish(self, function_name, cmi_element, result, success):
        if success:
            self.clear_scorm_error(SCORM_TRUE)
        self.api_log(function_name, cmi_element, f"returned: {result}", LOG_LEVEL_INFO)
        self.process_listeners(function_name, cmi_element, result)
        return result

    def LMSInitialize(self, _param=""):
        if self.is_initialized() or self.is_terminated():
            self.throw_scorm_error(101)
            return self._finish("LMSInitialize", None, SCORM_FALSE, False)
        self.current_state = SessionState.INITIALIZED
        return self._finish("LMSInitialize", None, SCORM_TRUE, True)

    def LMSGetValue(self, cmi_element):
        if not self.is_initialized():
            self.throw_scorm_error(301)
            return self._finish("LMSGetValue", cmi_element, "", False)
        if cmi_element not in self.cmi:
            self.throw_scorm_error(401, f"{cmi_element} has no value")
            return self._finish("LMSGetValue", cmi_element, "", False)
        return self._finish("LMSGetValue", cmi_element, self.cmi[cmi_element], True)

    def LMSSetValue(self, cmi_element, value):
        if not self.is_initialized():
            self.throw_scorm_error(301)
            return self._finish("LMSSetValue", cmi_element, SCORM_FALSE, False)
        if not cmi_element.startswith("cmi."):
            self.api_log("LMSSetValue", cmi_element, "rejected", LOG_LEVEL_WARNING)
            self.throw_scorm_error(201)
            return self._finish("LMSSetValue", cmi_element, SCORM_FALSE, False)
        self.cmi[cmi_element] = value
        return self._finish("LMSSetValue", cmi_element, SCORM_TRUE, True)

    def LMSFinish(self, _param=""):
        if not self.is_initialized():
            self.throw_scorm_error(301)
            return self._finish("LMSFinish", None, SCORM_FALSE, False)
        self.current_state = SessionState.TERMINATED
        return self._finish("LMSFinish", None, SCORM_TRUE, True)

    def LMSGetLastError(self):
        return str(self.last_error_code)


class Recorder:
    """Listener callback that remembers every (cmi_element, value) it receives."""

    def __init__(self, name="recorder", log=None):
        self.name = name
        self.calls = []
        self._log = log

    def __call__(self, cmi_element, value):
        self.calls.append((cmi_element, value))
        if self._log is not None:
            self._log.append(self.name)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch):
    """Tests never inherit a log level from the developer's shell."""
    monkeypatch.delenv("SCORM_API_LOG_LEVEL", raising=False)


@pytest.fixture
def settings():
    return ApiSettings(api_log_level=LogLevel.ERROR)


@pytest.fixture
def api(settings):
    return BaseAPI(settings=settings)


@pytest.fixture
def mini_api():
    return MiniScormAPI(settings=ApiSettings(api_log_level=LOG_LEVEL_ERROR))


@pytest.fixture
def recorder():
    return Recorder()
