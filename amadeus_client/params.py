from __future__ import annotations

from typing import Any
from urllib.parse import urlencode


class Params(dict):
    """Query or form parameters for a single API call.

    Keys and values are always strings. Build them fluently:

        >>> Params.with_("cityCode", "PAR").and_("max", 2)
        {'cityCode': 'PAR', 'max': '2'}
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__()
        self.update(*args, **kwargs)

    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(str(key), str(value))

    def update(self, *args: Any, **kwargs: Any) -> None:
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: str, default: Any = "") -> str:
        key = str(key)
        if key not in self:
            self[key] = default
        return self[key]

    def __or__(self, other: Any) -> Params:
        return self.clone().__ior__(other)

    def __ior__(self, other: Any) -> Params:
        self.update(other)
        return self

    def copy(self) -> Params:
        return self.clone()

    @classmethod
    def with_(cls, key: str, value: Any) -> Params:
        return cls().and_(key, value)

    def and_(self, key: str, value: Any) -> Params:
        self[key] = value
        return self

    def put(self, key: str, value: Any) -> Params:
        self[key] = value
        return self

    def clone(self) -> Params:
        return Params(self)

    def to_query_string(self) -> str:
        return urlencode(list(self.items()))
