import os
from types import SimpleNamespace

import pytest

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class FakeCompletions:
    """Stands in for ``client.chat.completions`` of the OpenAI SDK."""

    def __init__(self, reply: str | None = "Rank: Basket Case. Nice hands!", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_client():
    def make(reply: str | None = "Rank: Basket Case. Nice hands!", error: Exception | None = None):
        return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(reply, error)))

    return make
