"""Abstract interface (port) for turning article Markdown into HTML."""

from abc import ABC, abstractmethod


class MarkdownRenderer(ABC):
    """Port for Markdown rendering — implemented in the infrastructure layer."""

    @abstractmethod
    def render(self, content: str) -> str:
        """Render Markdown ``content`` to an HTML fragment.

        Content is trusted (single author); implementations are not required
        to escape raw HTML.
        """
        ...
