"""Expose a Flask/Werkzeug request through the `capabilities.Request` contract.

Parameters merge the query string, the form body and uploaded files, in that
order. Selectors are taken from the Sling-style decomposition of the request
path, so `/content/page.tab.detail.html` yields `["tab", "detail"]`.
"""

from __future__ import annotations

from typing import List, Optional

from flask import Request as WerkzeugRequest
from flask import request as current_request
from werkzeug.datastructures import FileStorage

from .path_info import PathInfo, decompose_path

# Werkzeug decodes form and query values as UTF-8 before we ever see them.
WERKZEUG_CHARSET = "utf-8"


class FlaskRequestParameter:
    def __init__(self, name: str, value: Optional[str] = None, upload: Optional[FileStorage] = None) -> None:
        self.name = name
        self._value = value
        self._upload = upload

    @property
    def is_form_field(self) -> bool:
        return self._upload is None

    def get_bytes(self) -> bytes:
        if self._upload is None:
            return (self._value or "").encode(WERKZEUG_CHARSET)
        stream = self._upload.stream
        data = stream.read()
        stream.seek(0)
        return data

    def get_string(self, encoding: str) -> str:
        return self.get_bytes().decode(encoding)

    def __str__(self) -> str:
        if self._upload is None:
            return self._value or ""
        return self._upload.filename or ""

    def __repr__(self) -> str:
        return f"FlaskRequestParameter(name={self.name!r}, form_field={self.is_form_field})"


class FlaskRequest:
    def __init__(self, request: Optional[WerkzeugRequest] = None) -> None:
        # Unwrap the context-local proxy so the adapter stays valid on its own.
        self._request = request if request is not None else current_request._get_current_object()
        self._path_info: Optional[PathInfo] = None

    @property
    def path_info(self) -> PathInfo:
        if self._path_info is None:
            self._path_info = decompose_path(self._request.path)
        return self._path_info

    def get_parameter(self, name: str) -> Optional[str]:
        value = self._request.values.get(name)
        if value is not None:
            return value
        upload = self._request.files.get(name)
        return str(FlaskRequestParameter(name, upload=upload)) if upload is not None else None

    def get_parameter_values(self, name: str) -> List[str]:
        values = list(self._request.values.getlist(name))
        values.extend(str(FlaskRequestParameter(name, upload=upload)) for upload in self._request.files.getlist(name))
        return values

    def get_request_parameter(self, name: str) -> Optional[FlaskRequestParameter]:
        value = self._request.values.get(name)
        if value is not None:
            return FlaskRequestParameter(name, value=value)
        upload = self._request.files.get(name)
        if upload is not None:
            return FlaskRequestParameter(name, upload=upload)
        return None

    def get_selectors(self) -> List[str]:
        return list(self.path_info.selectors)

    def get_path(self) -> str:
        """Percent-encoded path, spelled exactly as it appears in `get_url()`."""
        return "/" + self._request.base_url[len(self._request.url_root):]

    def get_url(self) -> str:
        return self._request.base_url

    def get_query_string(self) -> Optional[str]:
        raw = self._request.query_string
        if not raw:
            return None
        return raw.decode("latin-1")

    def get_header(self, name: str) -> Optional[str]:
        return self._request.headers.get(name)

    def parameter_names(self) -> List[str]:
        return sorted(set(self._request.values.keys()) | set(self._request.files.keys()))
