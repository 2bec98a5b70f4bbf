import asyncio

import pytest
import requests

from chatbot.conversation import (
    Conversation,
    ConversationController,
    LocalReplySource,
    Message,
    RemoteReplyError,
    RemoteReplySource,
    Role,
    thinking_delay,
)
from tests.fakes import FakeHTTPResponse, RecordingPost

HISTORY = [Message(1, Role.BOT, "Hi!"), Message(2, Role.USER, "what is up")]


def test_thinking_delay_grows_then_caps():
    assert thinking_delay("") == pytest.approx(0.4)
    assert thinking_delay("abcde") == pytest.approx(0.5)
    assert thinking_delay("x" * 500) == 1.2


def test_local_source_answers_last_user_turn():
    out = asyncio.run(LocalReplySource().generate(HISTORY + [Message(3, Role.BOT, "tell me a joke")]))
    assert out.startswith('You said: "what is up"')


def test_remote_source_posts_wire_history():
    session = RecordingPost(FakeHTTPResponse(200, {"text": "all good"}))
    src = RemoteReplySource("http://localhost:3001/", provider="gemini", session=session)

    assert asyncio.run(src.generate(HISTORY)) == "all good"
    url, kwargs = session.calls[0]
    assert url == "http://localhost:3001/api/chat"
    assert kwargs["json"] == {
        "provider": "gemini",
        "messages": [{"role": "bot", "text": "Hi!"}, {"role": "user", "text": "what is up"}],
    }


def test_remote_source_raises_gateway_error_message():
    session = RecordingPost(FakeHTTPResponse(500, {"error": "OPENAI_API_KEY not set"}))
    src = RemoteReplySource("http://gw", session=session)
    with pytest.raises(RemoteReplyError) as info:
        asyncio.run(src.generate(HISTORY))
    assert str(info.value) == "OPENAI_API_KEY not set"
    assert info.value.status_code == 500


def test_remote_source_non_json_error():
    session = RecordingPost(FakeHTTPResponse(502, None, text="<html>"))
    src = RemoteReplySource("http://gw", session=session)
    with pytest.raises(RemoteReplyError, match="HTTP 502"):
        asyncio.run(src.generate(HISTORY))


def test_remote_failure_becomes_error_turn():
    session = RecordingPost(exc=requests.ConnectionError("connection refused"))

    async def scenario():
        c = ConversationController(RemoteReplySource("http://gw", session=session), Conversation(greeting=None))
        c.submit("hello?")
        await c.drain()
        return c

    c = asyncio.run(scenario())
    assert c.conversation.last.text == "Error: connection refused"
    assert not c.pending
