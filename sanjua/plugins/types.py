"""
Types shared by plugin implementations.
"""

from dataclasses import dataclass, field
from importlib.metadata import version, PackageNotFoundError

from sanjua.logger import Logger
from sanjua.models import DataModel


@dataclass
class Dependency:
    """
    Software a plugin depends on.

    Keyword arguments:
    name -- name of the dependency
    version -- version in use
    """

    name: str
    version: str


class PythonDependency(Dependency):
    """
    Python distribution a plugin depends on; the version is looked up
    from the installed distribution.

    Keyword arguments:
    name -- distribution name
    """

    UNKNOWN_VERSION = "-not installed-"

    def __init__(self, name: str) -> None:
        try:
            installed = version(name)
        except PackageNotFoundError:
            installed = self.UNKNOWN_VERSION
        super().__init__(name, installed)


@dataclass(kw_only=True)
class PluginResult(DataModel):
    """
    Generic plugin result `DataModel`.

    Keyword arguments:
    log -- messages written while producing the result
    """

    log: Logger = field(default_factory=Logger)


@dataclass(kw_only=True)
class PluginExecutionContext:
    """
    State handed to a plugin for one invocation.

    Keyword arguments:
    result -- result that is filled by the plugin
    """

    result: PluginResult = field(default_factory=PluginResult)
