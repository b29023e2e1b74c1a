from claude_agent_sdk import AssistantMessage, ClaudeAgentOptions, TextBlock

from cc_agent.providers.base import QueryFn


async def collect_reply(prompt: str, *, options: ClaudeAgentOptions, query: QueryFn) -> str:
    """
    Drain one agent response stream and return the assistant's text.

    Only TextBlock content of AssistantMessage counts, in arrival order.
    Tool calls, thinking, user echoes, system and result messages are skipped.
    Errors from the stream propagate; nothing partial is returned.
    """
    parts: list[str] = []
    async for message in query(prompt=prompt, options=options):
        if not isinstance(message, AssistantMessage):
            continue
        for block in message.content:
            if isinstance(block, TextBlock):
                parts.append(block.text)
    return "".join(parts)
