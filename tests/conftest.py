"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace
from typing import List, Tuple
from unittest import mock

import pytest
import requests

from graderace.core.config import GradeRaceConfig
from graderace.providers.base import BaseProvider

RACE_URL = "https://example.jp/race/analysis.html"

ENV_VARS = (
    "GEMINI_API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "GRADERACE_PROVIDER",
    "GRADERACE_FLASH_MODEL",
    "GRADERACE_PRO_MODEL",
    "GRADERACE_ENCODING",
    "GRADERACE_LOG_LEVEL",
)


class DummyProvider(BaseProvider):
    """Stubbed provider for tests (no network calls)."""

    name = "dummy"

    def __init__(self, config: GradeRaceConfig, reply: str = "Summary: ..."):
        super().__init__(config)
        self.reply = reply
        self.calls: List[Tuple[str, str]] = []

    async def generate_text(self, prompt: str, model: str) -> str:
        self.calls.append((prompt, model))
        self._record_call(model)
        return self.reply


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials and overrides out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> GradeRaceConfig:
    return GradeRaceConfig(gemini_api_key="test-key")


@pytest.fixture
def dummy_provider(config) -> DummyProvider:
    return DummyProvider(config)


@pytest.fixture
def make_response():
    """Build a requests.Response without touching the network."""

    def _make(body: bytes = b"", status_code: int = 200, url: str = RACE_URL) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response._content = body
        response._content_consumed = True
        response.url = url
        response.raw = mock.Mock()
        return response

    return _make


@pytest.fixture
def race_page():
    """Shift_JIS encoded race page with the content container."""

    def _page(contents: str = "  Race   Result   Data  ") -> bytes:
        html = (
            "<html><head><title>レース分析</title></head><body>"
            "<div id=\"header\">メニュー</div>"
            f"<div id=\"main_contents\">{contents}</div>"
            "</body></html>"
        )
        return html.encode("cp932")

    return _page


@pytest.fixture
def gemini_response():
    """Gemini-shaped response: each argument is the list of part texts of one candidate."""

    def _response(*candidates: List[str]) -> SimpleNamespace:
        return SimpleNamespace(candidates=[
            SimpleNamespace(content=SimpleNamespace(parts=[SimpleNamespace(text=t) for t in parts]))
            for parts in candidates
        ])

    return _response
