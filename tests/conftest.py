import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402


class FakeParameter:
    def __init__(self, name: str, raw: bytes) -> None:
        self.name = name
        self.raw = raw

    def get_string(self, encoding: str) -> str:
        return self.raw.decode(encoding)

    def __str__(self) -> str:
        return self.raw.decode("utf-8", "replace")


class FakeRequest:
    def __init__(
        self,
        parameters: Optional[Dict[str, Sequence[str]]] = None,
        selectors: Sequence[str] = (),
        path: str = "/",
        url: str = "http://localhost/",
        query_string: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.parameters = {name: list(values) for name, values in (parameters or {}).items()}
        self.selectors = list(selectors)
        self.path = path
        self.url = url
        self.query_string = query_string
        self.headers = headers or {}

    def get_parameter(self, name: str) -> Optional[str]:
        values = self.parameters.get(name)
        return values[0] if values else None

    def get_parameter_values(self, name: str) -> List[str]:
        return self.parameters.get(name, [])

    def get_request_parameter(self, name: str) -> Optional[FakeParameter]:
        value = self.get_parameter(name)
        return FakeParameter(name, value.encode("utf-8")) if value is not None else None

    def get_selectors(self) -> List[str]:
        return self.selectors

    def get_path(self) -> str:
        return self.path

    def get_url(self) -> str:
        return self.url

    def get_query_string(self) -> Optional[str]:
        return self.query_string

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name)


@pytest.fixture
def make_request():
    def _make(**kwargs) -> FakeRequest:
        params = {name: [value] if isinstance(value, str) else value for name, value in kwargs.pop("params", {}).items()}
        return FakeRequest(parameters=params, **kwargs)

    return _make
