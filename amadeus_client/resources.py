"""Typed views over response data.

Subclass Resource (usually as a dataclass) and implement `from_dict`:

    @dataclass
    class Location(Resource):
        iata_code: str
        name: str = ""

        @classmethod
        def from_dict(cls, data):
            return cls(iata_code=data["iataCode"], name=data.get("name", ""))

    locations = Resource.from_array(response, Location)
    more = client.next(locations[0])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from .response import Response

R = TypeVar("R", bound="Resource")


class Resource:
    """Base class for one element of an API response."""

    # Set by from_array/from_object.
    response: Response | None = None
    raw: dict[str, Any] | None = None
    deserialization_class: type[Resource] | None = None

    @classmethod
    def from_dict(cls: type[R], data: dict[str, Any]) -> R:
        instance = cls()
        instance.raw = data
        return instance

    @classmethod
    def from_array(cls, response: Response | None, resource_class: type[R]) -> list[R]:
        if response is None or not isinstance(response.data, list):
            return []
        return [cls._build(response, resource_class, item) for item in response.data]

    @classmethod
    def from_object(cls, response: Response | None, resource_class: type[R]) -> R | None:
        if response is None or not isinstance(response.data, dict):
            return None
        return cls._build(response, resource_class, response.data)

    @staticmethod
    def _build(response: Response, resource_class: type[R], item: dict[str, Any]) -> R:
        resource = resource_class.from_dict(item)
        resource.raw = item
        resource.response = response
        resource.deserialization_class = resource_class
        return resource
