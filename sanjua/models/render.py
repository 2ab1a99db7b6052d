"""
RenderDescriptor data-model definition
"""

from dataclasses import dataclass

from .data_model import DataModel


@dataclass(frozen=True)
class RenderDescriptor(DataModel):
    """
    Renderable content of a block. Serializes to the renderable-array
    keys `#title` and `#markup` expected by the host.

    Keyword arguments:
    title -- block title
    markup -- block body markup; escaping is left to the host
    """

    _JSON_KEYS = {"title": "#title", "markup": "#markup"}

    title: str
    markup: str
