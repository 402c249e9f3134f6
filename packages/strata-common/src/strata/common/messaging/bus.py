from typing import Any, Optional, Union

from strata.spec import NameProtocol
from .protocols import Renderer, TemplateSource

# A message id is either a dotted string or a Name. Names are keyed by their
# canonical data string, which is what str() returns for them.
MessageId = Union[str, NameProtocol]


class MessageBus:
    def __init__(self, catalog: TemplateSource):
        self._renderer: Optional[Renderer] = None
        self._catalog = catalog

    def set_renderer(self, renderer: Renderer):
        self._renderer = renderer

    def _render(self, level: str, msg_id: MessageId, **kwargs: Any) -> None:
        if not self._renderer:
            return

        message = self.render_to_string(msg_id, **kwargs)
        self._renderer.render(message, level)

    def debug(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def info(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("info", msg_id, **kwargs)

    def success(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def warning(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("warning", msg_id, **kwargs)

    def error(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)

    def render_to_string(self, msg_id: MessageId, **kwargs: Any) -> str:
        template = self._catalog.get(str(msg_id))
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError):
            return f"<formatting_error for '{str(msg_id)}'>"
