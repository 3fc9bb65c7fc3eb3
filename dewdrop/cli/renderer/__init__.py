"""
Renderers for command output.

- Renderer: abstract interface commands write through
- MonoRenderer: plain text lines for pipes, logs and tests
- ColorRenderer: styled terminal output via rich
"""

from .base import Renderer
from .color import ColorRenderer, should_use_color
from .mono import MonoRenderer

__all__ = ["ColorRenderer", "MonoRenderer", "Renderer", "should_use_color"]
