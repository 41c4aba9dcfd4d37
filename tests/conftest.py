from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from pocketpaste import lifecycle
from pocketpaste.config import Settings


@pytest.fixture(autouse=True)
def _reset_singletons():
    yield
    lifecycle.reset_all()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        pastebin_api_key="devkey",
        pastebin_user_name="supi",
        pastebin_password="hunter2",
        pastebin_base_url="https://pastebin.test/",
    )


class FakePastebin:
    """Records requests and answers them from per-path (status, body) pairs.

    Paths listed in ``timeouts`` raise ``httpx.ReadTimeout`` instead.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, str]] = {
            "/api/api_login.php": (200, "user-key-123"),
            "/api_post.php": (200, "https://pastebin.test/AbCd1234"),
        }
        self.timeouts: set[str] = set()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path in self.timeouts:
            raise httpx.ReadTimeout("timed out", request=request)
        status, body = self.routes.get(request.url.path, (404, "Not Found"))
        return httpx.Response(status, text=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def form(self, index: int = -1) -> dict[str, str]:
        parsed = parse_qs(self.requests[index].content.decode(), keep_blank_values=True)
        return {k: v[0] for k, v in parsed.items()}

    def timeout(self, index: int = -1) -> dict[str, float | None]:
        """Per-request timeout httpx attached to a recorded request."""
        return self.requests[index].extensions["timeout"]


@pytest.fixture
def fake_pastebin() -> FakePastebin:
    return FakePastebin()
