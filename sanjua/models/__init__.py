from .data_model import JSONObject, DataModel
from .render import RenderDescriptor


__all__ = [
    "JSONObject",
    "DataModel",
    "RenderDescriptor",
]
