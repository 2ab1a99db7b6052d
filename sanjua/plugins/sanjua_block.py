"""Definition of the sanjua block."""

from sanjua.models import RenderDescriptor
from .block import BlockPlugin
from .types import PythonDependency


class SanjuaBlock(BlockPlugin):
    """
    Provides a 'sanjua' block.
    """

    _NAME = "sanjua_block"
    _DISPLAY_NAME = "Sanjua block"
    _DESCRIPTION = "Provides a 'sanjua' block."
    _CONTEXT = "Custom sanjua block example"
    _DEPENDENCIES = [PythonDependency("sanjua")]

    def build(self) -> RenderDescriptor:
        return RenderDescriptor(
            title="Block title",
            markup="This is a block custom per test drpal 8.",
        )
