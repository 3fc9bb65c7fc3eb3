"""
CLI fixtures for testing.

Provides renderers that capture output and runners built around them.
"""

import pytest

from dewdrop.cli import BufferedOutput, MonoRenderer, Run
from dewdrop.config import Config
from dewdrop.log import Logger
from tests.helpers.renderer import RecordingRenderer


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    """Renderer recording calls for assertions on help and error output."""
    return RecordingRenderer()


@pytest.fixture
def buffered_output() -> BufferedOutput:
    return BufferedOutput()


@pytest.fixture
def mono_renderer(buffered_output: BufferedOutput) -> MonoRenderer:
    return MonoRenderer(buffered_output)


@pytest.fixture
def make_runner(mono_renderer: MonoRenderer, log_root: Logger):
    """Build a Run with the given command classes and the mono renderer."""

    def _make(commands=None, config: Config | None = None) -> Run:
        return Run(
            config=config or Config.empty(),
            renderer=mono_renderer,
            commands=commands,
            logger=log_root,
        )

    return _make
