"""Tests for AIClient: config mutation, chat history and error propagation."""
import threading
from typing import Callable

import httpx
import pytest

from aifacade.client import AIClient, HTTPConnection, MockConnection
from aifacade.client.mock_connection import chat_reply, completion_reply, image_reply
from aifacade.config import ClientSettings
from aifacade.exceptions import AIFacadeError
from aifacade.schemas import ChatMessage, ChatRequest, CompletionRequest, ImageRequest, RequestKind

SETTINGS = ClientSettings(base_url="https://api.test")


@pytest.fixture
def conn() -> MockConnection:
    return MockConnection()


@pytest.fixture
def client(conn: MockConnection) -> AIClient:
    return AIClient("sk-test", settings=SETTINGS, connection=conn)


def test_generate_text_sets_prompt_before_dispatch(client: AIClient, conn: MockConnection) -> None:
    conn.queue(completion_reply("Once upon a time"))
    assert client.generate_text("Tell me a story") == "Once upon a time"
    assert len(conn.sent) == 1
    assert conn.sent[0].payload["prompt"] == "Tell me a story"
    assert conn.sent[0].url == "https://api.test/v1/completions"
    assert conn.sent[0].kind is RequestKind.COMPLETION


def test_generate_text_overwrites_prompt_each_call(client: AIClient, conn: MockConnection) -> None:
    client.generate_text("first")
    client.generate_text("second")
    assert [s.payload["prompt"] for s in conn.sent] == ["first", "second"]
    assert client.completions.prompt == "second"


def test_generate_image(client: AIClient, conn: MockConnection) -> None:
    conn.queue(image_reply("https://img.test/cat.png"))
    assert client.generate_image("a cat") == "https://img.test/cat.png"
    assert conn.sent[0].url == "https://api.test/v1/images/generations"
    assert conn.sent[0].payload["prompt"] == "a cat"


def test_chat_history_grows_by_two_per_call_in_order(client: AIClient, conn: MockConnection) -> None:
    client.set_chat(ChatRequest(messages=[ChatMessage(role="system", content="be brief")]))
    start = len(client.history)
    for i in range(3):
        conn.queue(chat_reply(f"answer {i}"))
        assert client.chat(f"question {i}") == f"answer {i}"

    history = client.history
    assert len(history) == start + 6
    assert [m.content for m in history[start:]] == [
        "question 0", "answer 0",
        "question 1", "answer 1",
        "question 2", "answer 2",
    ]
    assert [m.role for m in history[start:]] == ["user", "assistant"] * 3
    assert history[0].content == "be brief"


def test_chat_resends_full_history(client: AIClient, conn: MockConnection) -> None:
    conn.queue(chat_reply("Paris"))
    conn.queue(chat_reply("About 2 million"))
    client.chat("Capital of France?")
    client.chat("Population?")
    second = conn.sent[1].payload["messages"]
    assert second == [
        {"role": "user", "content": "Capital of France?"},
        {"role": "assistant", "content": "Paris"},
        {"role": "user", "content": "Population?"},
    ]
    assert conn.sent[1].url == "https://api.test/v1/chat/completions"


def test_chat_batch_appends_every_message(client: AIClient, conn: MockConnection) -> None:
    batch = [
        ChatMessage(role="system", content="You are terse."),
        ChatMessage(role="user", content="hi"),
    ]
    client.chat(batch)
    assert [m.content for m in client.history] == ["You are terse.", "hi", "mock reply"]


def test_chat_string_equals_single_user_message() -> None:
    a, b = MockConnection(), MockConnection()
    AIClient("k", settings=SETTINGS, connection=a).chat("hello")
    AIClient("k", settings=SETTINGS, connection=b).chat([ChatMessage(role="user", content="hello")])
    assert a.sent[0].payload == b.sent[0].payload


def test_default_chat_config_resets_everything(client: AIClient) -> None:
    client.set_chat(ChatRequest(model="gpt-4", max_tokens=10, n=3))
    client.chat("hi")
    assert client.history

    client.default_chat_config()
    assert client.history == ()
    assert client.chat_config.model == "gpt-3.5-turbo"
    assert client.chat_config.max_tokens == 2000
    assert client.chat_config.n == 1


def test_default_completions_config_discards_customization(client: AIClient) -> None:
    client.set_completions(CompletionRequest(model="custom", temperature=0.1))
    client.default_completions_config()
    assert client.completions.model == "text-davinci-003"
    assert client.completions.temperature == pytest.approx(0.9)


def test_set_completions_dispatches_custom_fields(client: AIClient, conn: MockConnection) -> None:
    custom = CompletionRequest(
        model="davinci-002",
        prompt="ignored",
        max_tokens=64,
        temperature=0.0,
        n=2,
        best_of=4,
        stop=["\n"],
        user="u-1",
    )
    expected = custom.to_payload()
    client.set_completions(custom)
    client.generate_text("P")

    sent = conn.sent[0].payload
    assert sent["prompt"] == "P"
    expected["prompt"] = "P"
    assert sent == expected


def test_set_image_config(client: AIClient, conn: MockConnection) -> None:
    client.set_image(ImageRequest(size="256x256", response_format="b64_json", n=2))
    conn.queue({"data": [{"b64_json": "aGk="}]})
    assert client.generate_image("sun") == "aGk="
    assert conn.sent[0].payload["size"] == "256x256"
    client.default_image_config()
    assert client.image_config.size == "1024x1024"


def test_failed_chat_keeps_user_message_without_reply(client: AIClient, conn: MockConnection) -> None:
    conn.queue(AIFacadeError("The server had an error", status_code=500))
    with pytest.raises(AIFacadeError, match="The server had an error"):
        client.chat("hi")
    assert [m.content for m in client.history] == ["hi"]


def _failing_client(message: str) -> AIClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": {"message": message}})

    http = httpx.Client(transport=httpx.MockTransport(handler))
    return AIClient("sk-test", settings=SETTINGS, connection=HTTPConnection("sk-test", client=http))


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.generate_text("p"),
        lambda c: c.generate_image("p"),
        lambda c: c.chat("p"),
        lambda c: c.chat([ChatMessage(role="user", content="p")]),
    ],
    ids=["generate_text", "generate_image", "chat_str", "chat_messages"],
)
def test_provider_error_message_propagates(call: Callable[[AIClient], str]) -> None:
    with _failing_client("X") as client:
        with pytest.raises(AIFacadeError) as exc_info:
            call(client)
    assert exc_info.value.message == "X"
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("base_url", ["not a url", "ftp://api.test", ""])
def test_malformed_base_url_fails_construction(base_url: str) -> None:
    with pytest.raises(AIFacadeError):
        AIClient("k", settings=ClientSettings(base_url=base_url), connection=MockConnection())


def test_trailing_slash_in_base_url(conn: MockConnection) -> None:
    client = AIClient("k", settings=ClientSettings(base_url="https://proxy.test/"), connection=conn)
    client.generate_text("x")
    assert conn.sent[0].url == "https://proxy.test/v1/completions"


def test_from_settings_requires_api_key() -> None:
    with pytest.raises(AIFacadeError, match="API key"):
        AIClient.from_settings(ClientSettings(api_key=""))


def test_from_settings_builds_http_connection() -> None:
    client = AIClient.from_settings(ClientSettings(api_key="sk-env", base_url="https://api.test"))
    try:
        assert isinstance(client._connection, HTTPConnection)
    finally:
        client.close()


def test_concurrent_chat_calls_do_not_interleave(client: AIClient) -> None:
    threads = [threading.Thread(target=client.chat, args=(f"q{i}",)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    history = client.history
    assert len(history) == 16
    for user, assistant in zip(history[::2], history[1::2]):
        assert user.role == "user"
        assert assistant.role == "assistant"
