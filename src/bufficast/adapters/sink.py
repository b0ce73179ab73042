"""IProgressSink adapters."""

from typing import Any, Callable, Dict, List

from bufficast.ports.interfaces import IProgressSink

# Agent-framework style callback: receives {"text": ...}
HandlerCallback = Callable[[Dict[str, Any]], Any]


class CallbackSink(IProgressSink):
    """Forwards each status to an agent handler callback as a content dict."""

    def __init__(self, callback: HandlerCallback):
        self._callback = callback

    def notify(self, status: str) -> None:
        self._callback({"text": status})


class RecordingSink(IProgressSink):
    """Keeps every status in order; tests assert on `statuses`."""

    def __init__(self):
        self.statuses: List[str] = []

    def notify(self, status: str) -> None:
        self.statuses.append(status)
