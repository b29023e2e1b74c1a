# centralized configuration loader
# runs load_dotenv() to read .env
# server settings are plain module constants, agent settings are frozen into AgentSettings

import os
from typing import Literal, Mapping, Optional

from claude_agent_sdk import ClaudeAgentOptions
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Credential (read by the agent SDK itself, only checked here)
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "").strip() or None

# Agent
AGENT_MODEL = os.getenv("AGENT_MODEL", "claude-sonnet-4-5")
AGENT_SYSTEM_PROMPT = os.getenv("AGENT_SYSTEM_PROMPT", "你是一個友善的 AI 助手，請使用繁體中文回覆。")
AGENT_PERMISSION_MODE = os.getenv("AGENT_PERMISSION_MODE", "acceptEdits")
AGENT_MAX_TURNS = int(os.getenv("AGENT_MAX_TURNS", "10"))


PermissionMode = Literal["default", "acceptEdits", "plan", "bypassPermissions"]


class MissingCredentialError(RuntimeError):
    pass


class AgentSettings(BaseModel):
    """
    Read-only agent configuration shared by every request.
    Built once at startup and handed to the app, never looked up per request.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(min_length=1)
    system_prompt: str
    permission_mode: PermissionMode = "acceptEdits"
    max_turns: int = Field(default=10, ge=1)

    def to_options(self) -> ClaudeAgentOptions:
        return ClaudeAgentOptions(
            model=self.model,
            system_prompt=self.system_prompt,
            permission_mode=self.permission_mode,
            max_turns=self.max_turns,
        )


def load_agent_settings() -> AgentSettings:
    return AgentSettings(
        model=AGENT_MODEL,
        system_prompt=AGENT_SYSTEM_PROMPT,
        permission_mode=AGENT_PERMISSION_MODE,
        max_turns=AGENT_MAX_TURNS,
    )


def require_api_key(env: Optional[Mapping[str, str]] = None) -> str:
    # env=None means "use what was loaded at import"
    if env is None:
        key = ANTHROPIC_API_KEY
    else:
        key = (env.get("ANTHROPIC_API_KEY") or "").strip() or None
    if not key:
        raise MissingCredentialError("Missing ANTHROPIC_API_KEY")
    return key
