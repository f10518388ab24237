import pytest

from request_accessor.config import (
    DEFAULT_FEATURE_HEADER,
    env_flag,
    env_number,
    load_config,
    load_env_file,
    parse_config,
    parse_env_flag,
    read_env_file,
)

ENV_NAMES = [
    "CONTENT_BASE_URL",
    "FEATURE_HEADER",
    "PARAMETER_CHARSET",
    "REQUEST_TIMEOUT_SECONDS",
    "USER_AGENT",
    "HOST",
    "PORT",
    "VERBOSE",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_NAMES:
        # setenv first so teardown also drops anything load_env_file writes.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.mark.parametrize("value, expected", [("yes", True), ("ON", True), ("0", False), ("off", False)])
def test_parse_env_flag(value, expected):
    assert parse_env_flag(value) is expected


def test_parse_env_flag_rejects_garbage():
    with pytest.raises(ValueError):
        parse_env_flag("maybe")


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("VERBOSE", "yes")
    monkeypatch.setenv("PORT", "8080")
    assert env_flag("VERBOSE", False) is True
    assert env_number("PORT", 1) == 8080
    assert env_number("REQUEST_TIMEOUT_SECONDS", 30) == 30


def test_env_helpers_reject_malformed_values(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(SystemExit):
        env_number("PORT", 1)
    monkeypatch.setenv("VERBOSE", "sometimes")
    with pytest.raises(SystemExit):
        env_flag("VERBOSE", False)


def test_load_env_file_does_not_override(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nFEATURE_HEADER='X-Preview'\nHOST=0.0.0.0\nnot a pair\n", encoding="utf-8")
    monkeypatch.setenv("HOST", "10.0.0.1")
    load_env_file(env_file)
    config = load_config()
    assert config.feature_header == "X-Preview"
    assert config.host == "10.0.0.1"


def test_load_config_defaults():
    config = load_config()
    assert config.feature_header == DEFAULT_FEATURE_HEADER
    assert config.parameter_charset == "utf-8"
    assert config.content_base_url == ""
    assert config.verbose is False


def test_parse_config_cli_overrides_env(tmp_path, monkeypatch):
    monkeypatch.setenv("CONTENT_BASE_URL", "http://repo.local/")
    config = parse_config(
        ["--env-file", str(tmp_path / "missing.env"), "--port", "9000", "--verbose", "--feature-header", "X-Flag"]
    )
    assert config.content_base_url == "http://repo.local"
    assert config.port == 9000
    assert config.verbose is True
    assert config.feature_header == "X-Flag"


def test_parse_config_validates_port(tmp_path):
    with pytest.raises(SystemExit):
        parse_config(["--env-file", str(tmp_path / "missing.env"), "--port", "0"])


def test_read_env_file_parses_pairs(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text('\n# note\nA=1\n B = "two" \n=orphan\nC=x=y\n', encoding="utf-8")
    assert read_env_file(env_file) == {"A": "1", "B": "two", "C": "x=y"}
    assert read_env_file(tmp_path / "missing.env") == {}
