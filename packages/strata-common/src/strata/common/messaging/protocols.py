from typing import Any, Protocol, Union


class Renderer(Protocol):
    """
    Protocol for message renderers. A renderer's only job is to
    present a final, formatted string to the user.
    """

    def render(self, message: str, level: str) -> None:
        """
        Renders the message.

        Args:
            message: The fully resolved string to be displayed.
            level: One of "debug", "info", "success", "warning", "error".
        """
        ...


class TemplateSource(Protocol):
    """Anything that resolves a message id to a format template."""

    def get(self, msg_id: Union[str, Any]) -> str: ...
