# tests/test_chat_service.py
import pytest
from claude_agent_sdk import TextBlock, ThinkingBlock, UserMessage

from cc_agent.services.chat_service import collect_reply
from tests.fakes import FakeQuery, assistant, mixed_messages


@pytest.mark.asyncio
async def test_only_assistant_text_blocks_in_order(settings):
    # One assistant message with two text blocks, one non-assistant message and
    # one assistant message carrying a non-text block -> exactly "Hello, world".
    fake = FakeQuery(mixed_messages())
    out = await collect_reply("hi", options=settings.to_options(), query=fake)
    assert out == "Hello, world"


@pytest.mark.asyncio
async def test_text_across_several_messages(settings):
    fake = FakeQuery([
        assistant(TextBlock(text="a")),
        assistant(ThinkingBlock(thinking="hmm", signature="sig"), TextBlock(text="b")),
        UserMessage(content=[TextBlock(text="not mine")]),
        assistant(TextBlock(text="c")),
    ])
    out = await collect_reply("hi", options=settings.to_options(), query=fake)
    assert out == "abc"


@pytest.mark.asyncio
async def test_empty_stream_gives_empty_reply(settings):
    out = await collect_reply("hi", options=settings.to_options(), query=FakeQuery([]))
    assert out == ""


@pytest.mark.asyncio
async def test_prompt_and_options_are_passed_through(settings):
    fake = FakeQuery([])
    options = settings.to_options()
    await collect_reply("what is 2+2?", options=options, query=fake)
    assert len(fake.calls) == 1
    assert fake.calls[0]["prompt"] == "what is 2+2?"
    assert fake.calls[0]["options"] is options


@pytest.mark.asyncio
async def test_stream_error_propagates(settings):
    # Partial text must not leak out when the stream fails later on.
    fake = FakeQuery([assistant(TextBlock(text="partial"))], error=RuntimeError("network dropped"))
    with pytest.raises(RuntimeError, match="network dropped"):
        await collect_reply("hi", options=settings.to_options(), query=fake)
