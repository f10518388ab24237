"""Flask route registration for the inspection and content endpoints.

Variables and behavior:
- Every handler wraps the current Flask request in `FlaskRequest` and reads it
  only through `request_accessor.accessor`.
- All endpoints return JSON payloads.

How this module works:
1. `register_routes(app, resolver, config)` wires all endpoint handlers.
2. `GET /api/inspect/<path>` reports what the accessor sees in the request.
3. `GET /content/<path>` resolves the request's resource through `resolver`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Flask, jsonify

from request_accessor import accessor
from request_accessor.capabilities import ResourceResolver
from request_accessor.config import AppConfig
from request_accessor.flask_adapter import FlaskRequest
from request_accessor.resolver import NON_EXISTING_RESOURCE_TYPE, ResourceResolutionError


def describe_request(wrapped: FlaskRequest, config: AppConfig) -> Dict[str, Any]:
    names = wrapped.parameter_names()
    prefix = accessor.get_parameter(wrapped, "selector_prefix")
    return {
        "path": wrapped.get_path(),
        "resource_path": wrapped.path_info.resource_path,
        "extension": wrapped.path_info.extension,
        "suffix": wrapped.path_info.suffix,
        "selectors": accessor.get_selectors(wrapped),
        "first_selector": accessor.get_first_selector(wrapped, ""),
        "selector_by_prefix": accessor.get_selector_by_prefix(wrapped, prefix) if prefix else "",
        "parameters": {
            name: accessor.get_null_safe_parameter_value(name, wrapped, config.parameter_charset)
            for name in names
        },
        "parameter_lists": {name: accessor.get_parameter_list_from_request(wrapped, name) for name in names},
        "page": accessor.get_int_parameter(wrapped, "page", 1),
        "preview": accessor.get_boolean_parameter(wrapped, "preview", False),
        "base_url": accessor.get_base_url(wrapped),
        "full_url": accessor.get_full_request_url(wrapped),
        "feature_enabled": accessor.is_feature_header_enabled(wrapped, config.feature_header),
    }


def register_routes(app: Flask, resolver: ResourceResolver, config: AppConfig) -> None:
    @app.get("/api/health")
    def api_health() -> Any:
        return jsonify({"ok": True})

    @app.get("/api/inspect/<path:path>")
    def api_inspect(path: str) -> Any:
        return jsonify(describe_request(FlaskRequest(), config))

    @app.get("/content/<path:path>")
    def content(path: str) -> Any:
        wrapped = FlaskRequest()
        try:
            resource = accessor.get_resource_from_request_path(wrapped, resolver)
        except ResourceResolutionError as exc:
            logging.error("Resolver error for %s: %s", wrapped.get_path(), exc)
            return jsonify({"ok": False, "message": str(exc), "status_code": exc.status_code}), 502

        if resource.resource_type == NON_EXISTING_RESOURCE_TYPE:
            return jsonify({"ok": False, "message": "Resource not found.", "path": resource.path}), 404

        return jsonify(
            {
                "ok": True,
                "resource": {
                    "path": resource.path,
                    "resource_type": resource.resource_type,
                    "properties": dict(resource.properties),
                },
                "selectors": accessor.get_selectors(wrapped),
                "extension": wrapped.path_info.extension,
                "feature_enabled": accessor.is_feature_header_enabled(wrapped, config.feature_header),
            }
        )
