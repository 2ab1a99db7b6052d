"""
Contract that plugins implement in order to be offered to a host.
"""

from typing import Optional
import abc

from sanjua.logger import Logger
from sanjua.models import JSONObject
from .types import Dependency, PluginResult, PluginExecutionContext


class classproperty(property):  # pylint: disable=invalid-name
    """
    Can be used as a decorator for defining class-properties see
    https://stackoverflow.com/questions/1697501/staticmethod-with-property
    for reference.
    """

    def __get__(self, cls, owner):
        return classmethod(self.fget).__get__(None, owner)()


class PluginInterface(metaclass=abc.ABCMeta):
    """
    Generic plugin-interface.

    The host discovers what a plugin offers from its class attributes
    (see `json`) and invokes it through `get`.

    Requirements for an implementation:
    _NAME -- plugin identifier
    _DISPLAY_NAME -- human readable name used in administration and as
                     origin of log messages
    _DESCRIPTION -- brief self description
    _get -- business logic; returns the result of the given context

    Optional definitions:
    _CONTEXT -- group the plugin belongs to
    _DEPENDENCIES -- software the plugin depends on
    _RESULT_TYPE -- `PluginResult`-subtype created by `create_context`
    """

    _RESULT_TYPE: type[PluginResult] = PluginResult
    _CONTEXT: Optional[str] = None
    _DEPENDENCIES: Optional[list[Dependency]] = None

    @property
    @abc.abstractmethod
    def _NAME(self) -> str:  # pylint: disable=invalid-name
        """Plugin identifier."""

    @property
    @abc.abstractmethod
    def _DISPLAY_NAME(self) -> str:  # pylint: disable=invalid-name
        """Plugin display name."""

    @property
    @abc.abstractmethod
    def _DESCRIPTION(self) -> str:  # pylint: disable=invalid-name
        """Plugin self-description."""

    @abc.abstractmethod
    def _get(
        self, context: PluginExecutionContext, /, **kwargs
    ) -> PluginResult:
        """Runs plugin-logic and returns `context.result`."""

    def get(
        self, context: Optional[PluginExecutionContext] = None, /, **kwargs
    ) -> PluginResult:
        """
        Runs plugin-logic and returns the result.

        Positional arguments:
        context -- execution context
                   (default None; a new one is made by `create_context`)

        Keyword arguments:
        kwargs -- forwarded to `_get`
        """
        return self._get(context or self.create_context(), **kwargs)

    def create_context(self) -> PluginExecutionContext:
        """
        Returns a new execution context whose result logs with the
        plugin's display name as origin.
        """
        return PluginExecutionContext(
            result=self._RESULT_TYPE(
                log=Logger(default_origin=self.display_name)
            )
        )

    # pylint: disable=no-self-argument
    @classproperty
    def name(cls) -> str:
        """Returns plugin identifier."""
        return cls._NAME

    @classproperty
    def display_name(cls) -> str:
        """Returns plugin display name."""
        return cls._DISPLAY_NAME

    @classproperty
    def description(cls) -> str:
        """Returns plugin self-description."""
        return cls._DESCRIPTION

    @classproperty
    def context(cls) -> Optional[str]:
        """Returns plugin group."""
        return cls._CONTEXT

    @classproperty
    def dependencies(cls) -> dict[str, str]:
        """Returns mapping of dependency name and version."""
        return {dep.name: dep.version for dep in cls._DEPENDENCIES or []}

    @classproperty
    def json(cls) -> JSONObject:
        """Returns self-description as `JSONObject`."""
        json: JSONObject = {
            "name": cls.name,
            "description": cls.description,
        }
        if cls._CONTEXT is not None:
            json["context"] = cls.context
        if cls._DEPENDENCIES is not None:
            json["dependencies"] = cls.dependencies
        return json
