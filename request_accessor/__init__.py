"""request_accessor package.

Stateless helpers for reading normalized values out of an HTTP request.

Modules summary:
- `accessor`: the parameter, selector, URL, header and resource helpers.
- `capabilities`: the narrow request/resource protocols the helpers rely on.
- `flask_adapter`: a `capabilities.Request` implementation over Flask.
- `path_info`: Sling-style split of a path into resource path, selectors,
  extension and suffix.
- `resolver`: in-memory and HTTP resource resolvers.
- `config`: `.env`, environment and command-line configuration.
"""
