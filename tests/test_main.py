import json

import httpx

from yuque_client import main as main_mod
from yuque_client.client import Yuque

from fake_yuque import FakeYuque


def test_main_without_token(monkeypatch) -> None:
    monkeypatch.setenv("YUQUE_TOKEN", "")
    assert main_mod.main() == 2


def test_main_bad_timeout(monkeypatch) -> None:
    monkeypatch.setenv("YUQUE_TOKEN", "abc")
    monkeypatch.setenv("YUQUE_TIMEOUT", "ten")
    assert main_mod.main() == 2


def test_main_prints_user(monkeypatch, capsys) -> None:
    fake = FakeYuque()
    real_from_settings = Yuque.from_settings

    def from_settings(settings, transport=None):
        return real_from_settings(settings, transport=httpx.MockTransport(fake.handler))

    monkeypatch.setenv("YUQUE_TOKEN", "abc")
    monkeypatch.delenv("YUQUE_SPACE", raising=False)
    monkeypatch.setattr(Yuque, "from_settings", staticmethod(from_settings))

    assert main_mod.main() == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["login"] == "alice"
    assert printed["_serializer"] == "v2.user"
    assert fake.requests[0].headers["X-Auth-Token"] == "abc"


def test_main_reports_remote_error(monkeypatch) -> None:
    real_from_settings = Yuque.from_settings

    def from_settings(settings, transport=None):
        deny = httpx.MockTransport(lambda request: httpx.Response(401, text="bad token"))
        return real_from_settings(settings, transport=deny)

    monkeypatch.setenv("YUQUE_TOKEN", "abc")
    monkeypatch.delenv("YUQUE_SPACE", raising=False)
    monkeypatch.setattr(Yuque, "from_settings", staticmethod(from_settings))
    assert main_mod.main() == 1
