import asyncio

from yuque_client.client import Yuque


def test_get_auth_user(yuque: Yuque) -> None:
    user = asyncio.run(yuque.get_auth_user())
    assert user.name == "Alice"
    assert user.login == "alice"


def test_get_user_by_id_and_login(yuque: Yuque, fake_yuque) -> None:
    by_id = asyncio.run(yuque.get_user(2))
    by_login = asyncio.run(yuque.get_user("bob"))
    assert by_id.id == by_login.id == 2
    assert [r.url.path for r in fake_yuque.requests] == [
        "/api/v2/users/2",
        "/api/v2/users/bob",
    ]
