from __future__ import annotations

from typing import Any
from typing import Optional

import aiohttp
import pytest

from api.channels import ChannelClient


class RecordingContext:
    """Stands in for AuthContext, answering every request with one canned result."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, Optional[str]]] = []

    async def auth_request(self, method: str, path: str, body: Optional[str] = None) -> Any:
        self.calls.append((method, path, body))

        if self.error is not None:
            raise self.error

        return self.response


@pytest.fixture
def make_client():
    def _make_client(response: Any = None, error: Optional[Exception] = None):
        context = RecordingContext(response, error)
        return ChannelClient(context), context  # type: ignore[arg-type]

    return _make_client


@pytest.fixture
async def http():
    async with aiohttp.ClientSession() as session:
        yield session
