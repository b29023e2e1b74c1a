from fastapi import Request
from claude_agent_sdk import ClaudeAgentOptions
from cc_agent.providers.base import QueryFn

def get_agent_options(request: Request) -> ClaudeAgentOptions:
    return request.app.state.agent_settings.to_options()

def get_query_fn(request: Request) -> QueryFn:
    return request.app.state.query
