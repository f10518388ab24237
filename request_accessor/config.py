from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

DEFAULT_FEATURE_HEADER = "X-SSI-Enabled"
DEFAULT_PARAMETER_CHARSET = "utf-8"
DEFAULT_USER_AGENT = "request-accessor/1.0"

TRUTHY_VALUES = {"1", "true", "yes", "y", "on"}
FALSY_VALUES = {"0", "false", "no", "n", "off"}


def parse_env_flag(value: str) -> bool:
    """Lenient flag parsing for configuration; request values use `parsing`."""
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def read_env_file(path: Path) -> Dict[str, str]:
    entries: Dict[str, str] = {}
    if not path.is_file():
        return entries
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if key:
            entries[key] = value.strip().strip("'").strip('"')
    return entries


def load_env_file(path: Path) -> None:
    """Copy `.env` entries into the environment; real variables win."""
    for key, value in read_env_file(path).items():
        os.environ.setdefault(key, value)


def _env_value(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def env_str(name: str, default: str) -> str:
    value = _env_value(name)
    return default if value is None else value


def env_flag(name: str, default: bool) -> bool:
    value = _env_value(name)
    if value is None:
        return default
    try:
        return parse_env_flag(value)
    except ValueError as exc:
        raise SystemExit(f"{name} must be a boolean flag: {exc}") from exc


def env_number(name: str, default: int) -> int:
    value = _env_value(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise SystemExit(f"{name} must be an integer, got {value!r}.") from exc


@dataclass
class AppConfig:
    content_base_url: str
    feature_header: str
    parameter_charset: str
    timeout: int
    user_agent: str
    host: str
    port: int
    verbose: bool


def load_config() -> AppConfig:
    """Build a config from the process environment only."""
    return AppConfig(
        content_base_url=env_str("CONTENT_BASE_URL", "").rstrip("/"),
        feature_header=env_str("FEATURE_HEADER", DEFAULT_FEATURE_HEADER),
        parameter_charset=env_str("PARAMETER_CHARSET", DEFAULT_PARAMETER_CHARSET),
        timeout=max(1, env_number("REQUEST_TIMEOUT_SECONDS", 30)),
        user_agent=env_str("USER_AGENT", DEFAULT_USER_AGENT),
        host=env_str("HOST", "127.0.0.1"),
        port=env_number("PORT", 5000),
        verbose=env_flag("VERBOSE", False),
    )


def parse_config(argv: Optional[List[str]] = None) -> AppConfig:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--env-file", default=".env")
    pre_args, _ = pre_parser.parse_known_args(argv)
    load_env_file(Path(pre_args.env_file))

    defaults = load_config()

    parser = argparse.ArgumentParser(
        description="Serve the request inspection app backed by a content repository."
    )
    parser.add_argument("--env-file", default=pre_args.env_file, help="Path to optional .env file.")
    parser.add_argument(
        "--content-base-url",
        default=defaults.content_base_url,
        help="Base URL of the content repository. Leave empty to serve an empty in-memory tree.",
    )
    parser.add_argument(
        "--feature-header",
        default=defaults.feature_header,
        help="Request header that switches the feature flag on.",
    )
    parser.add_argument(
        "--parameter-charset",
        default=defaults.parameter_charset,
        help="Charset used to decode request parameters.",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=defaults.timeout,
        help="HTTP timeout in seconds for the content repository.",
    )
    parser.add_argument("--user-agent", default=defaults.user_agent, help="Custom User-Agent header.")
    parser.add_argument("--host", default=defaults.host, help="Interface to bind.")
    parser.add_argument("--port", type=int, default=defaults.port, help="Port to bind.")
    parser.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=defaults.verbose,
        help="Enable debug logs.",
    )

    args = parser.parse_args(argv)

    if args.timeout < 1:
        parser.error("--timeout must be >= 1")
    if args.port < 1 or args.port > 65535:
        parser.error("--port must be between 1 and 65535")
    if not args.feature_header.strip():
        parser.error("--feature-header must not be empty")

    return AppConfig(
        content_base_url=args.content_base_url.strip().rstrip("/"),
        feature_header=args.feature_header.strip(),
        parameter_charset=args.parameter_charset.strip() or DEFAULT_PARAMETER_CHARSET,
        timeout=args.timeout,
        user_agent=args.user_agent.strip() or DEFAULT_USER_AGENT,
        host=args.host,
        port=args.port,
        verbose=args.verbose,
    )
