"""
Renderer interface definition.

Commands never print directly. Everything a command shows goes through a
Renderer so output can be captured and examined during testing.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping


class Renderer(ABC):
    """
    Abstract base class for CLI output renderers.

    Every method returns the renderer itself so calls can be chained:

        renderer.title("deploy").text("Deploy the site").newline()
    """

    @abstractmethod
    def title(self, text: str) -> "Renderer":
        """Render a top-level title."""
        pass

    @abstractmethod
    def subhead(self, text: str) -> "Renderer":
        """Render a section heading."""
        pass

    @abstractmethod
    def text(self, text: str) -> "Renderer":
        """Render a line of plain text."""
        pass

    @abstractmethod
    def success(self, text: str) -> "Renderer":
        """Render a success message."""
        pass

    @abstractmethod
    def warn(self, text: str) -> "Renderer":
        """Render a warning message."""
        pass

    @abstractmethod
    def error(self, text: str) -> "Renderer":
        """Render an error message."""
        pass

    @abstractmethod
    def newline(self) -> "Renderer":
        """Render an empty line."""
        pass

    @abstractmethod
    def table(self, rows: Mapping[str, str]) -> "Renderer":
        """Render a two-column table of label -> value, in mapping order."""
        pass

    @abstractmethod
    def unordered_list(self, items: Iterable[str]) -> "Renderer":
        """Render a bulleted list."""
        pass
