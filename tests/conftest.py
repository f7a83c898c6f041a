from __future__ import annotations

import httpx
import pytest

from fake_yuque import FakeYuque
from yuque_client.client import Yuque


@pytest.fixture
def fake_yuque() -> FakeYuque:
    return FakeYuque()


@pytest.fixture
def yuque(fake_yuque: FakeYuque) -> Yuque:
    """Client wired to ``fake_yuque`` through :class:`httpx.MockTransport`."""
    return Yuque("TOKEN", transport=httpx.MockTransport(fake_yuque.handler))
