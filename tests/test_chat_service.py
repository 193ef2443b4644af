import asyncio
from types import SimpleNamespace

from highfive.config import settings
from highfive.services.chat_service import ChatService, fallback_reply


class FakeModels:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.reply)


def fake_client(models):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


def conversation(*texts):
    return [{"role": "user", "content": t} for t in texts]


def test_reply_answers_latest_user_message():
    models = FakeModels(reply="  We build websites.  ")
    service = ChatService(api_key="key", model_name="test-model", client=fake_client(models))

    messages = conversation("hi") + [{"role": "assistant", "content": "Hello!"}] + conversation("What do you do?")
    result = asyncio.run(service.reply(messages))

    assert result == {"reply": "We build websites.", "fallback": False}
    assert models.calls[0]["contents"] == "What do you do?"
    assert models.calls[0]["model"] == "test-model"
    assert settings.TEAM_EMAIL in models.calls[0]["config"].system_instruction


def test_model_error_falls_back():
    models = FakeModels(error=RuntimeError("quota exceeded"))
    service = ChatService(api_key="key", client=fake_client(models))

    result = asyncio.run(service.reply(conversation("Hello")))

    assert result == {"reply": fallback_reply(settings.TEAM_EMAIL), "fallback": True}


def test_empty_model_reply_falls_back():
    service = ChatService(api_key="key", client=fake_client(FakeModels(reply="   ")))

    result = asyncio.run(service.reply(conversation("Hello")))

    assert result["fallback"] is True


def test_missing_api_key_falls_back_without_a_client():
    service = ChatService(api_key="", client=None)
    service.api_key = None

    result = asyncio.run(service.reply(conversation("Hello")))

    assert result["fallback"] is True
    assert settings.TEAM_EMAIL in result["reply"]


def test_empty_prompt_falls_back_without_calling_model():
    models = FakeModels(reply="unused")
    service = ChatService(api_key="key", client=fake_client(models))

    result = asyncio.run(service.reply([{"role": "user", "content": "   "}]))

    assert result["fallback"] is True
    assert models.calls == []
