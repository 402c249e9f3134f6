from contextlib import contextmanager
from typing import List, Dict, Any, Optional

# Import the actual singleton to patch it in-place
import strata.common
from strata.common.messaging.bus import MessageId
from strata.common.messaging.protocols import Renderer


class SpyRenderer(Renderer):
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        # The spy logic acts on record(), but satisfy interface
        pass

    def record(self, level: str, msg_id: MessageId, params: Dict[str, Any]):
        self.messages.append({"level": level, "id": str(msg_id), "params": params})


class SpyBus:
    """
    A Test Utility that spies on the global strata.common.bus singleton.

    Instead of replacing the bus instance (which fails if modules have already
    imported the instance via 'from strata.common import bus'),
    this utility patches the instance methods directly.
    """

    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any):
        real_bus = strata.common.bus

        def intercept_render(level: str, msg_id: MessageId, **kwargs: Any) -> None:
            # Capture the intent only; nothing reaches stdout.
            self._spy_renderer.record(level, msg_id, kwargs)

        monkeypatch.setattr(real_bus, "_render", intercept_render)
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)

        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._spy_renderer.messages

    def get_params(self, msg_id: MessageId) -> List[Dict[str, Any]]:
        key = str(msg_id)
        return [m["params"] for m in self.get_messages() if m["id"] == key]

    def assert_id_called(self, msg_id: MessageId, level: Optional[str] = None):
        key = str(msg_id)
        captured = self.get_messages()

        for msg in captured:
            if msg["id"] == key and (level is None or msg["level"] == level):
                return

        ids_seen = [m["id"] for m in captured]
        raise AssertionError(
            f"Message with ID '{key}' was not sent.\nCaptured IDs: {ids_seen}"
        )
