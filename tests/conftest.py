import fakeredis
import pytest

from investmate.cache import client


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch):
    fake = fakeredis.FakeAsyncRedis(decode_responses=True)
    monkeypatch.setattr(client, "_redis", lambda: fake)
    return fake
