from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import requests

from .config import DEFAULT_USER_AGENT

NON_EXISTING_RESOURCE_TYPE = "sling:nonexisting"
RESOURCE_TYPE_PROPERTY = "sling:resourceType"
DEFAULT_RESOURCE_TYPE = "nt:unstructured"


class ResourceResolutionError(RuntimeError):
    """Raised when the content repository cannot answer a resolve call."""

    def __init__(
        self,
        status_code: int,
        message: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}


@dataclass
class ResourceData:
    path: str
    resource_type: str = DEFAULT_RESOURCE_TYPE
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def exists(self) -> bool:
        return self.resource_type != NON_EXISTING_RESOURCE_TYPE


def non_existing_resource(path: str) -> ResourceData:
    return ResourceData(path=path, resource_type=NON_EXISTING_RESOURCE_TYPE)


def resource_from_properties(path: str, properties: Mapping[str, Any]) -> ResourceData:
    resource_type = properties.get(RESOURCE_TYPE_PROPERTY) or properties.get("jcr:primaryType")
    return ResourceData(
        path=path,
        resource_type=str(resource_type or DEFAULT_RESOURCE_TYPE),
        properties=dict(properties),
    )


def normalize_resource_path(path: str) -> str:
    return "/" + path.strip().strip("/")


class StaticResourceResolver:
    """Resolve paths against an in-memory tree of `{path: properties}`."""

    def __init__(self, resources: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        self._resources: Dict[str, Dict[str, Any]] = {
            normalize_resource_path(path): dict(properties) for path, properties in (resources or {}).items()
        }

    def resolve(self, path: str) -> ResourceData:
        key = normalize_resource_path(path)
        properties = self._resources.get(key)
        if properties is None:
            return non_existing_resource(key)
        return resource_from_properties(key, properties)


class HttpResourceResolver:
    """Resolve paths through a content repository's `<path>.json` renditions."""

    def __init__(self, base_url: str, user_agent: str = DEFAULT_USER_AGENT, timeout: int = 30) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
                "Accept-Encoding": "gzip, deflate",
            }
        )

    def _parse_json(self, response: requests.Response) -> Dict[str, Any]:
        try:
            payload = response.json()
            if isinstance(payload, dict):
                return payload
        except ValueError:
            pass
        return {}

    def _as_resolution_error(
        self,
        response: requests.Response,
        payload: Optional[Dict[str, Any]] = None,
    ) -> ResourceResolutionError:
        payload = payload or self._parse_json(response)
        detail = payload.get("message") or payload.get("error") or response.text.strip()
        message = f"HTTP {response.status_code}: {detail}" if detail else f"HTTP {response.status_code}"
        return ResourceResolutionError(response.status_code, message, payload)

    def resolve(self, path: str) -> ResourceData:
        key = normalize_resource_path(path)
        url = f"{self.base_url}{key}.json"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ResourceResolutionError(0, f"Network error for {url}: {exc}") from exc

        if response.status_code == 404:
            logging.debug("Resource not found at %s", url)
            return non_existing_resource(key)

        payload = self._parse_json(response)
        if response.status_code >= 400:
            raise self._as_resolution_error(response, payload)
        return resource_from_properties(key, payload)
