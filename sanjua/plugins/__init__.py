from .types import (
    Dependency,
    PythonDependency,
    PluginResult,
    PluginExecutionContext,
)
from .interface import PluginInterface
from .block import BlockResult, BlockPlugin
from .sanjua_block import SanjuaBlock


__all__ = [
    "Dependency",
    "PythonDependency",
    "PluginResult",
    "PluginExecutionContext",
    "PluginInterface",
    "BlockResult",
    "BlockPlugin",
    "SanjuaBlock",
]
