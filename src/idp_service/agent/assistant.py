"""
AI DevOps assistant.

Wraps the caller's history with a fixed system prompt, asks the LLM for the
next turn and, for signed-in users, saves the transcript as an AI session.
"""
import json
from typing import Any, Dict, List, Optional

from idp_service import data
from idp_service.agent.llm import LLMClient
from idp_service.domain.models import ChatRole
from idp_service.infrastructure.observability import get_logger, log_context

logger = get_logger(__name__)

SYSTEM_PROMPT = """You are an AI DevOps assistant integrated into an Internal Developer Platform. You specialize in:
1. Analyzing deployment logs and identifying root causes of failures
2. Suggesting fixes for build errors, test failures, and deployment issues
3. Explaining error messages in plain language
4. Recommending best practices for CI/CD pipelines
5. Helping with Kubernetes, Docker, and cloud infrastructure issues

When analyzing logs, be specific about:
- The exact error and its location
- The root cause
- Step-by-step fix instructions
- Prevention strategies

Format your responses with clear headings and code blocks where appropriate."""

EMPTY_RESPONSE = "I couldn't generate a response. Please try again."
DEFAULT_TITLE = "New Chat"
TITLE_MAX_LENGTH = 100


def build_prompt(messages: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """System prompt first, then the caller's turns minus any system turns."""
    return [{"role": ChatRole.SYSTEM.value, "content": SYSTEM_PROMPT}] + [
        m for m in messages if m["role"] != ChatRole.SYSTEM.value
    ]


def session_title(messages: List[Dict[str, str]], max_length: int = TITLE_MAX_LENGTH) -> str:
    """First user message cut to `max_length` characters; an empty one gives the default."""
    first = next((m for m in messages if m["role"] == ChatRole.USER.value), None)
    if first is None or not first["content"]:
        return DEFAULT_TITLE
    return first["content"][:max_length]


def _as_text(content: Any) -> str:
    if not content:
        return EMPTY_RESPONSE
    if isinstance(content, str):
        return content
    return json.dumps(content)


async def chat(
    llm: LLMClient,
    messages: List[Dict[str, str]],
    session_id: Optional[int] = None,
    user_id: Optional[str] = None,
    title_max_length: int = TITLE_MAX_LENGTH,
) -> str:
    """
    Produce the assistant's reply to `messages`.

    When `user_id` is given the caller's messages plus the reply are saved:
    into `session_id` when it is a real id (0 counts as none), otherwise as a
    new session.

    Raises:
        LLMError: If the LLM call fails
    """
    content = _as_text(await llm.complete(build_prompt(messages)))

    if user_id is None:
        return content

    transcript: List[Dict[str, Any]] = list(messages) + [
        {"role": ChatRole.ASSISTANT.value, "content": content}
    ]

    with log_context(user_id=user_id):
        if session_id:
            await data.update_session_messages(session_id, transcript)
            logger.info("AI session updated", session_id=session_id, messages=len(transcript))
        else:
            new_id = await data.create_session({
                "user_id": user_id,
                "title": session_title(messages, title_max_length),
                "messages": transcript,
            })
            logger.info("AI session started", session_id=new_id)

    return content
