# binds the contract in providers/base.py to claude-agent-sdk

from claude_agent_sdk import query

from cc_agent.providers.base import QueryFn


def get_query() -> QueryFn:
    return query
