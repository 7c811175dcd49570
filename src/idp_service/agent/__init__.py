"""
AI DevOps assistant.

This package provides:
- LLMClient, a thin OpenAI-compatible chat completions client
- The assistant's system prompt and chat turn handling
"""

from idp_service.agent.llm import LLMClient
from idp_service.agent.assistant import SYSTEM_PROMPT, build_prompt, chat, session_title

__all__ = [
    "LLMClient",
    "SYSTEM_PROMPT",
    "build_prompt",
    "chat",
    "session_title",
]
