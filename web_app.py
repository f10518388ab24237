#!/usr/bin/env python3
"""Local web app that shows how the request accessor reads incoming requests."""

from __future__ import annotations

import logging
from typing import List, Optional

from flask import Flask

from request_accessor.capabilities import ResourceResolver
from request_accessor.config import AppConfig, load_config, parse_config
from web_backend.environment import build_resolver
from web_backend.routes import register_routes


def create_app(config: Optional[AppConfig] = None, resolver: Optional[ResourceResolver] = None) -> Flask:
    config = config or load_config()
    app = Flask(__name__)
    register_routes(app, resolver or build_resolver(config), config)
    return app


def main(argv: Optional[List[str]] = None) -> None:
    config = parse_config(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )
    if config.content_base_url:
        logging.info("Resolving content from %s", config.content_base_url)
    else:
        logging.info("No CONTENT_BASE_URL configured; serving an empty resource tree.")

    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
