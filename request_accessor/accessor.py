"""Stateless helpers that pull normalized values out of a request.

Every function works against the `capabilities.Request` contract, never
mutates the request and never raises on missing or malformed input: absent
values resolve to the caller's default, unparseable values resolve to the
default with a debug log, and invalid arguments resolve to the safest value
(`False`, `""` or an empty list).
"""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import unquote

from .capabilities import Request, RequestParameter, Resource, ResourceResolver
from .config import DEFAULT_FEATURE_HEADER, DEFAULT_PARAMETER_CHARSET
from .parsing import is_blank, try_parse_int, try_parse_literal_bool
from .path_info import decompose_path


def get_parameter(request: Optional[Request], name: Optional[str], default: str = "") -> str:
    """Return the parameter value, or `default` when it is missing or blank."""
    if request is None or not name:
        return default
    value = request.get_parameter(name)
    if is_blank(value):
        return default
    assert value is not None
    return value


def has_parameter(request: Optional[Request], name: Optional[str]) -> bool:
    """Existence check only; a blank value still counts as present."""
    if request is None or not name:
        return False
    return request.get_request_parameter(name) is not None


def get_int_parameter(request: Optional[Request], name: Optional[str], default: int = 0) -> int:
    parsed = try_parse_int(get_parameter(request, name))
    if parsed is None:
        logging.debug("Unable to parse int from request parameter: %s", name)
        return default
    return parsed


def get_boolean_parameter(request: Optional[Request], name: Optional[str], default: bool = False) -> bool:
    if not has_parameter(request, name):
        return default
    assert request is not None and name is not None
    return bool(try_parse_literal_bool(request.get_parameter(name)))


def get_parameter_list_from_request(request: Optional[Request], name: Optional[str]) -> List[str]:
    if request is None or not name:
        return []
    return list(request.get_parameter_values(name) or [])


def get_null_safe_value(
    parameter: Optional[RequestParameter],
    encoding: str = DEFAULT_PARAMETER_CHARSET,
) -> str:
    if parameter is None:
        return ""
    try:
        return parameter.get_string(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        logging.debug("Could not decode request parameter %s as %s: %s", parameter.name, encoding, exc)
        return ""


def get_null_safe_parameter_value(
    name: Optional[str],
    request: Optional[Request],
    encoding: str = DEFAULT_PARAMETER_CHARSET,
) -> str:
    if request is None or not name:
        return ""
    return get_null_safe_value(request.get_request_parameter(name), encoding)


def get_selectors(request: Optional[Request]) -> List[str]:
    """Return a fresh list; mutating it never touches the request."""
    if request is None:
        return []
    return list(request.get_selectors() or [])


def has_selector(request: Optional[Request], target: Optional[str]) -> bool:
    if target is None:
        return False
    wanted = target.lower()
    return any(selector.lower() == wanted for selector in get_selectors(request))


def get_selector(request: Optional[Request], index: int, default: Optional[str] = None) -> Optional[str]:
    selectors = get_selectors(request)
    if 0 <= index < len(selectors):
        return selectors[index]
    return default


def get_first_selector(request: Optional[Request], default: Optional[str] = None) -> Optional[str]:
    return get_selector(request, 0, default)


def get_selector_by_prefix(request: Optional[Request], prefix: Optional[str]) -> str:
    """Return what follows `prefix` in the first selector starting with it.

    `tab-2` with prefix `tab-` yields `2`; an exact match, an empty prefix and no
    match at all all yield `""`.
    """
    if not prefix:
        return ""
    for selector in get_selectors(request):
        if selector.startswith(prefix):
            return selector[len(prefix):]
    return ""


def get_base_url(request: Request) -> str:
    """Return the URL up to the request path, without a trailing slash."""
    url = request.get_url()
    path = request.get_path()
    if not path:
        return ""

    # Skip past "scheme://" so a path of "/" cannot match inside it.
    authority_start = url.find("://")
    start = authority_start + 3 if authority_start >= 0 else 0
    position = url.find(path, start)
    base_url = url if position < 0 else url[:position]
    if base_url.endswith("/"):
        base_url = base_url[:-1]
    return base_url


def get_full_request_url(request: Request) -> str:
    url = request.get_url()
    query_string = request.get_query_string()
    if is_blank(query_string):
        return url
    return f"{url}?{query_string}"


def is_feature_header_enabled(
    request: Optional[Request],
    header_name: str = DEFAULT_FEATURE_HEADER,
) -> bool:
    if request is None:
        return False
    return bool(try_parse_literal_bool(request.get_header(header_name)))


def get_resource_from_request_path(request: Request, resolver: ResourceResolver) -> Resource:
    resource_path = decompose_path(unquote(request.get_path())).resource_path
    return resolver.resolve(resource_path)
