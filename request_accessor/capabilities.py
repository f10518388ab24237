"""Narrow contracts the accessor functions depend on.

Any web framework can be plugged in by providing objects that satisfy these
protocols; `flask_adapter` ships the Flask implementation and the tests use
plain fakes.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class RequestParameter(Protocol):
    name: str

    def get_string(self, encoding: str) -> str:
        """Decode the raw parameter value; may raise UnicodeDecodeError or LookupError."""
        ...

    def __str__(self) -> str:
        ...


class Request(Protocol):
    def get_parameter(self, name: str) -> Optional[str]:
        ...

    def get_parameter_values(self, name: str) -> Sequence[str]:
        ...

    def get_request_parameter(self, name: str) -> Optional[RequestParameter]:
        ...

    def get_selectors(self) -> Sequence[str]:
        ...

    def get_path(self) -> str:
        ...

    def get_url(self) -> str:
        ...

    def get_query_string(self) -> Optional[str]:
        ...

    def get_header(self, name: str) -> Optional[str]:
        ...


class Resource(Protocol):
    path: str
    resource_type: str
    properties: Mapping[str, Any]


class ResourceResolver(Protocol):
    def resolve(self, path: str) -> Resource:
        ...
