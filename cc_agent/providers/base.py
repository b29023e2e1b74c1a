# declares the agent client contract the chat service consumes
# anything with this shape can stand in for the SDK (tests pass async generators)

from typing import AsyncIterator, Callable

from claude_agent_sdk import Message

# query(prompt=..., options=...) -> async stream of typed messages, consumed once
QueryFn = Callable[..., AsyncIterator[Message]]
