"""Block flavour of the plugin-interface."""

from typing import Optional
from dataclasses import dataclass
import abc

from sanjua.logger import LoggingContext as Context
from sanjua.models import JSONObject, RenderDescriptor
from .interface import PluginInterface, classproperty
from .types import PluginResult, PluginExecutionContext


@dataclass(kw_only=True)
class BlockResult(PluginResult):
    """
    Data model for the result of `BlockPlugin`-invocations.

    Keyword arguments:
    content -- renderable content of the block
    """

    content: Optional[RenderDescriptor] = None


class BlockPlugin(PluginInterface):
    """
    Base for plugins that provide a block to the host's rendering
    system.

    The block metadata maps onto the plugin attributes as
    * id -- `_NAME`,
    * admin_label -- `_DISPLAY_NAME`, and
    * category -- `_CONTEXT`.

    Implementations define `build`. Arguments the host passes to `get`
    are ignored.
    """

    _RESULT_TYPE = BlockResult

    @abc.abstractmethod
    def build(self) -> RenderDescriptor:
        """Returns the renderable content of this block."""

    # pylint: disable=no-self-argument
    @classproperty
    def id(cls) -> str:  # pylint: disable=invalid-name
        """Returns block id."""
        return cls.name

    @classproperty
    def admin_label(cls) -> str:
        """Returns block label as shown in administration."""
        return cls.display_name

    @classproperty
    def category(cls) -> Optional[str]:
        """Returns block category."""
        return cls.context

    @classproperty
    def json(cls) -> JSONObject:
        """Returns self-description including the admin label."""
        return super(BlockPlugin, cls).json | {
            "admin_label": cls.admin_label
        }

    def _get(self, context: PluginExecutionContext, /, **kwargs):
        context.result.content = self.build()
        context.result.log.log(
            Context.INFO, f"Built block '{self.id}'."
        )
        return context.result

    def get(  # this simply narrows down the involved types
        self, context: Optional[PluginExecutionContext] = None, /, **kwargs
    ) -> BlockResult:
        return super().get(context, **kwargs)
