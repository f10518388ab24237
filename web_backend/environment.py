"""Shared environment objects for the Flask web app.

Variables in this module:
- `BASE_DIR`: project root path used to resolve relative files.
- `ENV_FILE`: `.env` file path loaded once at import time.

How this module works:
1. Loads `.env` once so `load_config()` sees its values.
2. `build_resolver(config)` picks the HTTP resolver when a content base URL is
   configured and an empty in-memory tree otherwise.
"""

from __future__ import annotations

from pathlib import Path

from request_accessor.capabilities import ResourceResolver
from request_accessor.config import AppConfig, load_env_file
from request_accessor.resolver import HttpResourceResolver, StaticResourceResolver

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = BASE_DIR / ".env"
load_env_file(ENV_FILE)


def build_resolver(config: AppConfig) -> ResourceResolver:
    if config.content_base_url:
        return HttpResourceResolver(
            base_url=config.content_base_url,
            user_agent=config.user_agent,
            timeout=config.timeout,
        )
    return StaticResourceResolver()
