"""
Base for dataclass-models with a JSON representation.
"""

from typing import Any, ClassVar, TypeAlias, TypeVar, Union
from typing import get_args, get_origin, get_type_hints
from types import UnionType
from dataclasses import fields
from collections.abc import Mapping


JSONObject: TypeAlias = dict[str, Any]

T = TypeVar("T", bound="DataModel")


class DataModel:
    """
    Base for dataclass-models that are exchanged with the host as JSON.

    Fields with a leading underscore and fields set to `None` are left
    out of the JSON. Field names that differ from their JSON key are
    listed in `_JSON_KEYS`:
     >>> @dataclass
     ... class Model(DataModel):
     ...     _JSON_KEYS = {"title": "#title"}
     ...     title: str
     >>> Model("a").json
     {'#title': 'a'}

    Field values are either JSON primitives or objects that provide a
    `json`-property (and `from_json` for deserialization).
    """

    _JSON_KEYS: ClassVar[dict[str, str]] = {}

    @property
    def json(self) -> JSONObject:
        """Returns model as `JSONObject`."""
        json = {}
        for field_ in fields(self):
            value = getattr(self, field_.name)
            if field_.name.startswith("_") or value is None:
                continue
            key = self._JSON_KEYS.get(field_.name, field_.name)
            if hasattr(value, "json"):
                json[key] = value.json
            elif isinstance(value, (str, int, float, bool)):
                json[key] = value
            else:
                raise ValueError(
                    f"Unable to serialize field '{field_.name}' of "
                    + f"'{self.__class__.__name__}' (unsupported type "
                    + f"'{type(value).__name__}')."
                )
        return json

    @classmethod
    def from_json(cls: type[T], json: JSONObject) -> T:
        """
        Returns instance of `cls` built from `json`.

        Raises `ValueError` for non-mapping input and `TypeError` if
        required fields are missing.
        """
        if not isinstance(json, Mapping):
            raise ValueError(
                f"Unable to deserialize '{cls.__name__}' from "
                + f"'{type(json).__name__}' (expected mapping)."
            )
        hints = get_type_hints(cls)
        kwargs = {}
        for field_ in fields(cls):
            key = cls._JSON_KEYS.get(field_.name, field_.name)
            if key in json:
                kwargs[field_.name] = _load(hints[field_.name], json[key])
        try:
            return cls(**kwargs)
        except TypeError as exc_info:
            raise TypeError(
                f"Unable to instantiate '{cls.__name__}' from '{json}'."
            ) from exc_info


def _load(type_: Any, value: Any) -> Any:
    """Deserializes nested objects based on the field's type hint."""
    if not isinstance(value, Mapping):
        return value
    if get_origin(type_) in (Union, UnionType):
        candidates = get_args(type_)
    else:
        candidates = (type_,)
    for candidate in candidates:
        if hasattr(candidate, "from_json"):
            return candidate.from_json(value)
    return value
